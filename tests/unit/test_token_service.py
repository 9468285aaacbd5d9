"""
Unit tests for the token service
"""
from unittest.mock import MagicMock

import pytest

from jwt_cli.core.exceptions import (
    ClaimsNotJSONError,
    MalformedTokenError,
    SignatureMismatchError,
    UnknownAlgorithmError,
)
from jwt_cli.models.options import DecodeOptions, EncodeOptions, ValidateOptions
from jwt_cli.models.token import ParsedToken
from jwt_cli.services.token_service import TokenService, parse_claims
from tests.tokens import JOHN_DOE_CLAIMS, JOHN_DOE_HS256, SECRET, tamper_signature


def test_decode_returns_header_and_payload(service):
    """Test decode exposes header and payload"""
    contents = service.decode(DecodeOptions(token=JOHN_DOE_HS256))
    assert contents.header == {"alg": "HS256", "typ": "JWT"}
    assert contents.payload == JOHN_DOE_CLAIMS


def test_decode_does_not_verify(service):
    """Test decode shows a token that validate rejects"""
    tampered = tamper_signature(JOHN_DOE_HS256)

    contents = service.decode(DecodeOptions(token=tampered))
    assert contents.payload == JOHN_DOE_CLAIMS

    with pytest.raises(SignatureMismatchError):
        service.validate(ValidateOptions(token=tampered, secret=SECRET))


def test_validate_with_correct_secret(service):
    contents = service.validate(ValidateOptions(token=JOHN_DOE_HS256, secret=SECRET))
    assert contents.payload == {"name": "John Doe"}


def test_validate_with_wrong_secret(service):
    with pytest.raises(SignatureMismatchError):
        service.validate(ValidateOptions(token=JOHN_DOE_HS256, secret="wrong"))


def test_validate_not_a_jwt(service):
    with pytest.raises(MalformedTokenError):
        service.validate(ValidateOptions(token="notajwt", secret=SECRET))


def test_validate_passes_allow_list_to_codec():
    """Test the service hands the configured algorithms to the codec"""
    codec = MagicMock()
    codec.verify.return_value = ParsedToken(header={"alg": "HS384"}, claims={"a": 1})
    service = TokenService(codec)

    contents = service.validate(
        ValidateOptions(token="t.o.k", secret="s", allowed_algorithms=["HS384"])
    )

    codec.verify.assert_called_once_with(b"t.o.k", b"s", ["HS384"])
    assert contents.payload == {"a": 1}


def test_encode_known_token(service):
    token = service.encode(EncodeOptions(claims='{"name":"John Doe"}', algorithm="HS256", secret=SECRET))
    assert token == JOHN_DOE_HS256


def test_encode_unknown_algorithm(service):
    with pytest.raises(UnknownAlgorithmError):
        service.encode(EncodeOptions(claims='{"name":"John Doe"}', algorithm="NOPE", secret=SECRET))


def test_encode_invalid_claims_checked_before_algorithm(service):
    """Test bad claims are reported even when the algorithm is also bad"""
    with pytest.raises(ClaimsNotJSONError):
        service.encode(EncodeOptions(claims="{not json", algorithm="NOPE", secret=SECRET))


def test_encode_then_decode_round_trip(service):
    claims = {"sub": "42", "scopes": ["read", "write"], "meta": {"n": 3}}
    token = service.encode(
        EncodeOptions(claims='{"meta": {"n": 3}, "scopes": ["read", "write"], "sub": "42"}',
                      algorithm="HS512", secret="anything")
    )
    assert service.decode(DecodeOptions(token=token)).payload == claims


class TestParseClaims:
    """Tests for the claims argument parser"""

    def test_object(self):
        assert parse_claims('{"foo": "bar"}') == {"foo": "bar"}

    def test_empty_object(self):
        assert parse_claims("{}") == {}

    @pytest.mark.parametrize("data", ["", "{", "not json", "{'single': 'quotes'}"])
    def test_invalid_json(self, data):
        with pytest.raises(ClaimsNotJSONError, match="Couldn't parse claims JSON"):
            parse_claims(data)

    @pytest.mark.parametrize("data", ["[1, 2]", '"text"', "42", "null"])
    def test_non_object(self, data):
        with pytest.raises(ClaimsNotJSONError, match="expected an object"):
            parse_claims(data)

    @pytest.mark.parametrize("data", ['{"a": NaN}', '{"a": Infinity}', '{"a": [-Infinity]}'])
    def test_non_finite_numbers_rejected(self, data):
        """Test NaN and Infinity are not accepted as JSON numbers"""
        with pytest.raises(ClaimsNotJSONError, match="Couldn't parse claims JSON"):
            parse_claims(data)

    def test_bytes_input(self):
        assert parse_claims(b'{"name": "J\xc3\xb6hn"}') == {"name": "Jöhn"}

    def test_invalid_utf8_replaced(self):
        """Test undecodable bytes inside strings become U+FFFD"""
        assert parse_claims(b'{"name": "J\xffhn"}') == {"name": "J\ufffdhn"}

    def test_surrogate_escaped_str(self):
        """Test argv-style surrogate escapes are read back as raw bytes"""
        assert parse_claims('{"name": "J\udcffhn"}') == {"name": "J\ufffdhn"}


def test_encode_nan_claims_rejected(service):
    with pytest.raises(ClaimsNotJSONError):
        service.encode(EncodeOptions(claims='{"a": NaN}', algorithm="HS256", secret=SECRET))
