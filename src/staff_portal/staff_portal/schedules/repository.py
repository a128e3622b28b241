from __future__ import annotations

from typing import Protocol, Sequence

from .model import ShiftRecord


class ShiftRecordRepository(Protocol):
    def list_shifts(self) -> Sequence[ShiftRecord]:
        """All stored shifts ordered by date, joined with the employee name."""

        raise NotImplementedError
