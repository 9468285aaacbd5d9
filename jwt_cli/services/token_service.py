"""
Token service - decode, validate and encode operations
"""
import json

from loguru import logger

from jwt_cli.auth.jwt_codec import JWTCodec
from jwt_cli.core.exceptions import ClaimsNotJSONError
from jwt_cli.models.options import DecodeOptions, EncodeOptions, ValidateOptions
from jwt_cli.models.token import TokenContents


class TokenService:
    """Service for the three token operations"""

    def __init__(self, codec: JWTCodec | None = None):
        self.codec = codec or JWTCodec()

    def decode(self, options: DecodeOptions) -> TokenContents:
        """Display a token's header and claims without verifying anything"""
        parsed = self.codec.parse(options.token)
        logger.debug(f"Decoded token header: {parsed.header}")
        return TokenContents.from_parsed(parsed)

    def validate(self, options: ValidateOptions) -> TokenContents:
        """
        Verify a token's signature and return its contents

        Args:
            options: Token, secret and the algorithms the header may name

        Returns:
            Header and payload of the verified token

        Raises:
            MalformedTokenError: If the token cannot be parsed
            UnknownAlgorithmError: If the header names an algorithm that is not allowed
            SignatureMismatchError: If the signature does not match
        """
        parsed = self.codec.verify(options.token, options.secret, options.allowed_algorithms)
        return TokenContents.from_parsed(parsed)

    def encode(self, options: EncodeOptions) -> str:
        """
        Sign a JSON claim set into a compact token

        Raises:
            ClaimsNotJSONError: If the claims are not a JSON object
            UnknownAlgorithmError: If the algorithm cannot be resolved
            SigningFailureError: If the key or claims are rejected
        """
        claims = parse_claims(options.claims)
        logger.debug(f"Encoding {len(claims)} claim(s) with {options.algorithm or '<none given>'}")
        return self.codec.sign(claims, options.algorithm, options.secret)


def _reject_constant(name: str):
    raise ValueError(f"invalid literal {name}")


def parse_claims(data: str | bytes) -> dict:
    """Parse the claims argument into a claim set"""
    try:
        raw = data if isinstance(data, bytes) else data.encode("utf-8", errors="surrogateescape")
        # Invalid UTF-8 becomes U+FFFD
        text = raw.decode("utf-8", errors="replace")
        claims = json.loads(text, parse_constant=_reject_constant)
    except (UnicodeError, ValueError) as e:
        raise ClaimsNotJSONError(f"Couldn't parse claims JSON: {e}") from e

    if not isinstance(claims, dict):
        raise ClaimsNotJSONError(
            f"Couldn't parse claims JSON: expected an object, got {type(claims).__name__}"
        )
    return claims
