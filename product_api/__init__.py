"""Product API - JWT-protected CRUD service for products."""

__version__ = "0.1.0"
