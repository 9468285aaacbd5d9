"""
JWT codec
"""
from jwt_cli.auth.jwt_codec import JWTCodec

__all__ = ["JWTCodec"]
