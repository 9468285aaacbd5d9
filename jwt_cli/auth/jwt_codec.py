"""
JWT codec built on PyJWT

Parses, verifies and signs compact tokens. Every PyJWT failure is re-raised
as one of the tool's own error kinds.
"""
import json
import os
import warnings
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import jwt
from jwt.algorithms import Algorithm
from loguru import logger

from jwt_cli.core.exceptions import (
    MalformedTokenError,
    SignatureMismatchError,
    SigningFailureError,
    UnknownAlgorithmError,
)
from jwt_cli.models.token import ParsedToken

# Registered-claim checks are disabled: only the signature is verified
CLAIM_CHECKS_DISABLED = {
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iat": False,
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
    "require": [],
}

UNSIGNED_ALGORITHM = "none"

# HTML-safe escapes, so tokens match encoding/json output byte for byte
HTML_SAFE_ESCAPES = (
    ("&", "\\u0026"),
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def _to_bytes(secret: str | bytes) -> bytes:
    """Raw key bytes; undecodable argv bytes come back unchanged"""
    return os.fsencode(secret) if isinstance(secret, str) else secret


def _token_bytes(token: str | bytes) -> bytes:
    if isinstance(token, bytes):
        return token
    try:
        return token.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError as e:
        raise MalformedTokenError("Token is not valid UTF-8") from e


def marshal_claims(claims: dict[str, Any]) -> str:
    """
    Serialize claims compactly with sorted keys

    Raises:
        TypeError, ValueError: If the claims are not representable as JSON
    """
    text = json.dumps(claims, separators=(",", ":"), sort_keys=True, ensure_ascii=False, allow_nan=False)
    for char, escape in HTML_SAFE_ESCAPES:
        text = text.replace(char, escape)
    return text


@contextmanager
def _library_warnings() -> Iterator[None]:
    """Route PyJWT warnings (e.g. short HMAC keys) to the diagnostic log"""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        yield
    for warning in caught:
        logger.debug(f"PyJWT {warning.category.__name__}: {warning.message}")


class JWTCodec:
    """Structural parsing, HMAC verification and signing of compact JWTs"""

    def __init__(self):
        self._jwt = jwt.PyJWT()
        self._jws = jwt.PyJWS()

    def parse(self, token: str | bytes) -> ParsedToken:
        """
        Decode header and claims without checking the signature

        Raises:
            MalformedTokenError: If the token is not three base64url/JSON segments
        """
        raw = _token_bytes(token)
        try:
            with _library_warnings():
                decoded = self._jwt.decode_complete(raw, options={"verify_signature": False})
        except jwt.InvalidTokenError as e:
            logger.debug(f"Token parse failed: {e}")
            raise MalformedTokenError(str(e)) from e

        return self._to_parsed(decoded)

    def verify(
        self,
        token: str | bytes,
        secret: str | bytes,
        allowed_algorithms: list[str],
    ) -> ParsedToken:
        """
        Decode a token and verify its signature against a shared secret

        Args:
            token: Compact JWT
            secret: HMAC key material
            allowed_algorithms: Algorithms the token header may name

        Returns:
            Parsed token whose signature matched

        Raises:
            MalformedTokenError: If the token cannot be parsed
            UnknownAlgorithmError: If the header algorithm is unknown or not allowed
            SignatureMismatchError: If the signature does not match
        """
        if not allowed_algorithms:
            raise UnknownAlgorithmError("No signing algorithms are allowed")

        raw = _token_bytes(token)
        try:
            with _library_warnings():
                decoded = self._jwt.decode_complete(
                    raw,
                    key=_to_bytes(secret),
                    algorithms=allowed_algorithms,
                    options=dict(CLAIM_CHECKS_DISABLED),
                )
        except jwt.InvalidSignatureError as e:
            raise SignatureMismatchError(str(e)) from e
        except jwt.InvalidAlgorithmError as e:
            raise UnknownAlgorithmError(str(e)) from e
        except jwt.InvalidKeyError as e:
            raise SignatureMismatchError(str(e)) from e
        except jwt.InvalidTokenError as e:
            raise MalformedTokenError(str(e)) from e

        parsed = self._to_parsed(decoded)
        logger.debug(f"Signature verified with {parsed.algorithm}")
        return parsed

    def resolve_algorithm(self, name: str) -> Algorithm | None:
        """Look up a registered signing algorithm by its identifier"""
        if not name:
            return None
        try:
            return self._jws.get_algorithm_by_name(name)
        except NotImplementedError:
            return None

    def sign(self, claims: dict[str, Any], algorithm: str, secret: str | bytes) -> str:
        """
        Build and sign a compact token

        The header is ``{"alg": algorithm, "typ": "JWT"}``. Header and claims
        are serialized compactly with sorted keys, so identical input always
        yields an identical token.

        Raises:
            UnknownAlgorithmError: If the algorithm is not registered
            SigningFailureError: If the key or claims are rejected
        """
        if self.resolve_algorithm(algorithm) is None:
            raise UnknownAlgorithmError(f"Couldn't find signing method: {algorithm}")

        if algorithm == UNSIGNED_ALGORITHM:
            raise SigningFailureError("'none' signature type is not allowed")

        try:
            payload = marshal_claims(claims).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SigningFailureError(f"Couldn't serialize claims: {e}") from e

        try:
            with _library_warnings():
                token = self._jws.encode(
                    payload,
                    _to_bytes(secret),
                    algorithm=algorithm,
                    headers={"typ": "JWT"},
                )
        # A public key loads but has no signing primitive
        except (jwt.PyJWTError, ValueError, TypeError, AttributeError) as e:
            logger.debug(f"Signing with {algorithm} failed: {e}")
            raise SigningFailureError(str(e) or "key is invalid") from e

        logger.debug(f"Signed token with {algorithm}")
        return token

    @staticmethod
    def _to_parsed(decoded: dict[str, Any] | None) -> ParsedToken:
        # PyJWT may hand back partial results; never read fields off them blindly
        if not decoded:
            raise MalformedTokenError("Invalid token")

        header = decoded.get("header")
        claims = decoded.get("payload")
        if not isinstance(header, dict) or not isinstance(claims, dict):
            raise MalformedTokenError("Invalid token")

        return ParsedToken(header=header, claims=claims, signature=decoded.get("signature") or b"")
