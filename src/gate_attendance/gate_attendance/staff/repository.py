from __future__ import annotations

from typing import Protocol, Sequence

from .model import StaffRecord


class RosterRepository(Protocol):
    """Read side of the staff roster.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def list_staff(self) -> Sequence[StaffRecord]:
        raise NotImplementedError
