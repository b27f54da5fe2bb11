"""Player name checks, offline ids and session-server authentication helpers."""

from __future__ import annotations

import hashlib
import uuid
from http import HTTPStatus

_AUTHENTICATION_URL = (
    "https://sessionserver.mojang.com/session/minecraft/hasJoined"
    "?username={username}&serverId={server_hash}"
)


def is_valid_player_name(name: str) -> bool:
    """Names are 3 to 16 ASCII letters, digits or underscores."""
    return (
        3 <= len(name.encode("utf-8")) <= 16
        and name.isascii()
        and all(c.isalnum() or c == "_" for c in name)
    )


def offline_uuid(username: str) -> uuid.UUID:
    """The id used for a player when the server runs in offline mode."""
    return uuid.UUID(bytes=hashlib.sha256(username.encode("utf-8")).digest()[:16])


def server_hash(secret_key: bytes, public_key_der: bytes) -> str:
    """SHA-1 of the shared secret and public key, as a signed hexadecimal number."""
    digest = hashlib.sha1(bytes(secret_key) + bytes(public_key_der)).digest()
    return format(int.from_bytes(digest, "big", signed=True), "x")


def authentication_url(username: str, server_hash: str) -> str:
    """The session-server query that checks a player has joined."""
    return _AUTHENTICATION_URL.replace("{username}", username).replace(
        "{server_hash}", server_hash
    )


class AuthError(Exception):
    """Authenticating a player with the session server failed."""

    message = "Authentication failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)


class FailedResponse(AuthError):
    message = "Authentication servers are down"


class UnverifiedUsername(AuthError):
    message = "Failed to verify username"


class Banned(AuthError):
    message = "You are banned from Authentication servers"


class DisallowedAction(AuthError):
    message = "You have disallowed actions from Authentication servers"


class FailedParse(AuthError):
    message = "Failed to parse JSON into Game Profile"


class UnknownStatusCode(AuthError):
    """The session server answered with an unexpected HTTP status."""

    def __init__(self, status: int) -> None:
        self.status = status
        try:
            phrase = HTTPStatus(status).phrase
        except ValueError:
            phrase = "<unknown status code>"
        super().__init__(f"Unknown Status Code {status} {phrase}")


class TextureError(AuthError):
    """A player's skin or cape texture could not be accepted."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Texture Error {reason}")

    @classmethod
    def invalid_url(cls) -> TextureError:
        return cls("Invalid URL")

    @classmethod
    def disallowed_url_scheme(cls, scheme: str) -> TextureError:
        return cls(f"Invalid URL scheme for player texture: {scheme}")

    @classmethod
    def disallowed_url_domain(cls, domain: str) -> TextureError:
        return cls(f"Invalid URL domain for player texture: {domain}")

    @classmethod
    def decode_error(cls, detail: str) -> TextureError:
        return cls(f"Failed to decode base64 player texture: {detail}")

    @classmethod
    def json_error(cls, detail: str) -> TextureError:
        return cls(f"Failed to parse JSON from player texture: {detail}")