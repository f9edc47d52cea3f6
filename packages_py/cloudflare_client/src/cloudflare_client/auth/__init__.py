"""
Authentication handlers.
"""
from .auth_handler import AuthHandler, BearerAuthHandler, create_auth_handler

__all__ = ["AuthHandler", "BearerAuthHandler", "create_auth_handler"]
