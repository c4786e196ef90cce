"""Codec for Basic-Auth-style credential strings.

The transport form is ``"<scheme> <base64(email:password)>"``. The scheme
token is ignored; only the encoded payload matters.
"""

import base64

from gatekeeper.core.exceptions import MalformedCredentialError
from gatekeeper.domain.value_objects.credential import Credential


class CredentialCodec:
    """Converts between transport credential strings and `Credential` pairs."""

    DEFAULT_SCHEME = "Basic"

    @staticmethod
    def decode(raw_credential: str) -> Credential:
        """Extracts the email and password from a transport credential string.

        The payload is split on its first colon, so passwords may contain
        colons while emails may not.

        Args:
            raw_credential: ``"<scheme> <base64(email:password)>"``.

        Returns:
            Credential: The decoded pair.

        Raises:
            MalformedCredentialError: If the separator, the base64 payload or
                the colon is missing or invalid.
        """
        if not isinstance(raw_credential, str):
            raise MalformedCredentialError("Credential must be a string")

        parts = raw_credential.strip().split(None, 1)
        if len(parts) != 2:
            raise MalformedCredentialError("Credential is missing the scheme separator")

        try:
            decoded = base64.b64decode(parts[1].strip(), validate=True).decode("utf-8")
        except ValueError as e:
            # binascii.Error and UnicodeDecodeError are both ValueErrors
            raise MalformedCredentialError("Credential payload is not valid base64") from e

        email, separator, password = decoded.partition(":")
        if not separator:
            raise MalformedCredentialError("Credential payload is missing the ':' separator")

        return Credential(email=email, password=password)

    @classmethod
    def encode(cls, email: str, password: str, scheme: str = DEFAULT_SCHEME) -> str:
        """Builds the transport string for an email and password."""
        payload = base64.b64encode(f"{email}:{password}".encode("utf-8")).decode("ascii")
        return f"{scheme} {payload}"
