"""
Output rendering for command results and errors
"""
import json
from typing import Any

from jwt_cli.core.exceptions import JWTToolError, SerializationError
from jwt_cli.core.logging import console


def to_pretty_json(data: Any, indent: int = 4) -> str:
    """
    Serialize a result to indented JSON

    Raises:
        SerializationError: If the value cannot be represented as JSON
    """
    try:
        text = json.dumps(data, indent=indent, sort_keys=True, ensure_ascii=False, allow_nan=False)
        # Lone surrogates from \udXXX escapes cannot be written out
        text.encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Couldn't serialize output: {e}") from e
    return text


def render_json(data: Any, indent: int = 4):
    """Print a result as indented JSON on stdout"""
    print(to_pretty_json(data, indent=indent))


def render_token(token: str):
    """Print a compact token on stdout"""
    print(token)


def render_error(error: JWTToolError | Exception):
    """Print a single-line diagnostic on stderr"""
    console.error(f"error: {error}")
