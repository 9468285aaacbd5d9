"""
Pydantic models for token contents and command options
"""
from jwt_cli.models.options import DecodeOptions, EncodeOptions, ValidateOptions
from jwt_cli.models.token import ParsedToken, TokenContents

__all__ = [
    "DecodeOptions",
    "EncodeOptions",
    "ParsedToken",
    "TokenContents",
    "ValidateOptions",
]
