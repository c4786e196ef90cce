"""Unit tests for CredentialCodec."""

import base64

import pytest

from gatekeeper.core.exceptions import MalformedCredentialError
from gatekeeper.domain.services.credential_codec import CredentialCodec


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


class TestDecode:
    def test_decodes_basic_credential(self):
        credential = CredentialCodec.decode("Basic dGVzdEBleGFtcGxlLmNvbTpzZWNyZXQ=")

        assert credential.email == "test@example.com"
        assert credential.password == "secret"

    def test_scheme_is_ignored(self):
        credential = CredentialCodec.decode(f"Whatever {_b64('a@example.com:pw')}")
        assert credential.email == "a@example.com"

    def test_password_may_contain_colons(self):
        credential = CredentialCodec.decode(f"Basic {_b64('a@example.com:pa:ss:word')}")

        assert credential.email == "a@example.com"
        assert credential.password == "pa:ss:word"

    def test_empty_password_is_allowed(self):
        credential = CredentialCodec.decode(f"Basic {_b64('a@example.com:')}")
        assert credential.password == ""

    def test_utf8_payload(self):
        credential = CredentialCodec.decode(f"Basic {_b64('a@example.com:pässwörd')}")
        assert credential.password == "pässwörd"

    def test_surrounding_whitespace_is_tolerated(self):
        credential = CredentialCodec.decode(f"  Basic   {_b64('a@example.com:pw')}  ")
        assert credential.password == "pw"

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "Basic",
            "dGVzdEBleGFtcGxlLmNvbTpzZWNyZXQ=",
            "Basic not*base64!",
            "Basic dGVzdA",
            f"Basic {_b64('no-colon-here')}",
            "Basic " + base64.b64encode(b"\xff\xfe:pw").decode("ascii"),
        ],
        ids=[
            "empty",
            "scheme-only",
            "payload-only",
            "invalid-characters",
            "bad-padding",
            "missing-colon",
            "not-utf8",
        ],
    )
    def test_malformed_credentials_raise(self, raw):
        with pytest.raises(MalformedCredentialError) as exc_info:
            CredentialCodec.decode(raw)
        assert exc_info.value.code == "malformed_credential"

    def test_non_string_raises(self):
        with pytest.raises(MalformedCredentialError):
            CredentialCodec.decode(None)


class TestEncode:
    def test_encode_produces_decodable_string(self):
        raw = CredentialCodec.encode("test@example.com", "secret")

        assert raw == "Basic dGVzdEBleGFtcGxlLmNvbTpzZWNyZXQ="

    def test_custom_scheme(self):
        assert CredentialCodec.encode("a@example.com", "pw", scheme="Token").startswith("Token ")
