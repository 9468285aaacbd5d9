"""
Per-invocation option models for each subcommand
"""
from pydantic import BaseModel, ConfigDict, Field


class DecodeOptions(BaseModel):
    """Options for the decode command"""

    model_config = ConfigDict(frozen=True)

    token: bytes = Field(default=b"", description="Compact JWT to display")
    show_help: bool = Field(default=False, description="Print decode usage and exit")


class ValidateOptions(BaseModel):
    """Options for the validate command"""

    model_config = ConfigDict(frozen=True)

    token: bytes = Field(default=b"", description="Compact JWT to verify")
    secret: bytes = Field(default=b"", description="The signing secret as raw bytes")
    allowed_algorithms: list[str] = Field(
        default_factory=lambda: ["HS256", "HS384", "HS512"],
        description="Algorithms a token header may name"
    )
    show_help: bool = Field(default=False, description="Print validate usage and exit")


class EncodeOptions(BaseModel):
    """Options for the encode command"""

    model_config = ConfigDict(frozen=True)

    claims: bytes = Field(default=b"", description="JSON-encoded claim set")
    secret: bytes = Field(default=b"", description="The signing secret as raw bytes")
    algorithm: str = Field(default="", description="The algorithm")
    show_help: bool = Field(default=False, description="Print encode usage and exit")
