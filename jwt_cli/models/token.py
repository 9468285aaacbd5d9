"""
Token models shared by the codec and the command handlers
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ParsedToken(BaseModel):
    """Compact token split into its decoded segments"""

    model_config = ConfigDict(frozen=True)

    header: dict[str, Any] = Field(..., description="Decoded JOSE header")
    claims: dict[str, Any] = Field(..., description="Decoded claim set")
    signature: bytes = Field(default=b"", description="Raw signature bytes")

    @property
    def algorithm(self) -> str | None:
        """Algorithm identifier named by the header, if any"""
        alg = self.header.get("alg")
        return alg if isinstance(alg, str) else None


class TokenContents(BaseModel):
    """Header and payload rendered by decode and validate"""

    model_config = ConfigDict(frozen=True)

    header: dict[str, Any] = Field(..., description="Decoded JOSE header")
    payload: dict[str, Any] = Field(..., description="Decoded claim set")

    @classmethod
    def from_parsed(cls, parsed: ParsedToken) -> "TokenContents":
        return cls(header=parsed.header, payload=parsed.claims)

    def to_output(self) -> dict[str, Any]:
        """Two-key wrapper in output order"""
        return {"header": self.header, "payload": self.payload}
