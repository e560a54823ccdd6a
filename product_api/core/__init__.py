"""
Product API - Core Module

This module contains configuration, database setup, logging and security utilities.
"""

from product_api.core.config import Settings, get_settings
from product_api.core.database import Base, get_db, get_engine

__all__ = ["Settings", "get_settings", "Base", "get_db", "get_engine"]
