"""Registration aggregate: binds a user to an event.

Attendance is tracked here and is independent of any order status.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Registration:

    id: int
    event_id: int
    user_id: int
    participant_name: str
    attended: bool = False

    def mark_attendance(self, attended: bool) -> None:
        """Overwrite the attendance flag (last writer wins)."""
        self.attended = attended
