"""
Token operations
"""
from jwt_cli.services.token_service import TokenService

__all__ = ["TokenService"]
