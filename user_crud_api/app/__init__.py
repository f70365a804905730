"""
Application package.

The API is split into configuration and persistence wiring (``core``),
request/response models (``schemas``), data access
(``repositories``), business rules (``services``) and HTTP routing
(``api``).  Routers are grouped by version under ``api/<version>/``.
"""

from .main import app  # noqa: F401
