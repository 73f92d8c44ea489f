from __future__ import annotations

from typing import Iterable, Mapping

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from .model import Credential


def build_credentials(auth_users: Mapping[str, Mapping[str, str]]) -> list[Credential]:
    """Hash the configured ``{username: {password, role}}`` table at startup."""
    credentials = []
    for username, entry in auth_users.items():
        password_hash = entry.get("password_hash") or generate_password_hash(entry["password"])
        credentials.append(Credential(username=username, password_hash=password_hash, role=Role(entry["role"])))
    return credentials


class AuthService:
    """Use case: authenticate a gate/HR/admin login."""

    def __init__(self, credentials: Iterable[Credential]):
        self._by_username = {c.username: c for c in credentials}

    def authenticate(self, username: str, password: str) -> Role:
        credential = self._by_username.get((username or "").strip())
        if not credential:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(credential.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes or corrupted values in the environment
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")
        return credential.role
