from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Credential:
    """One fixed login of the gate system (there is no user table)."""

    username: str
    password_hash: str
    role: Role
