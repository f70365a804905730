"""
Pydantic model for user data.

A single ``User`` model serves as request body, response body and the
record passed between the service and the repository.  All fields are
optional: ``id`` is assigned by the store on insert, and ``name`` /
``email`` are not validated beyond what the update merge rule needs.
"""

from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """A user account as exchanged over the API and stored in ``app_user``."""

    id: Optional[int] = Field(None, examples=[1])
    name: Optional[str] = Field(None, examples=["Ana"])
    email: Optional[str] = Field(None, examples=["ana@test.com"])

    model_config = {
        "from_attributes": True,
    }
