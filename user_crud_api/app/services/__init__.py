"""
Service layer.

Each service encapsulates the business rules for a domain and talks to
storage only through a repository passed in at construction time.
"""
