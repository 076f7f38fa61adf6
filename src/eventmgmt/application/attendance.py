"""Application service: registration attendance toggle.

A plain boolean flag; no state machine and last writer wins.
"""

from __future__ import annotations

import structlog

from eventmgmt.domain.exceptions import EntityNotFoundError
from eventmgmt.domain.model.registration import Registration
from eventmgmt.domain.repository.registration_repository import (
    RegistrationRepository,
)

logger = structlog.get_logger(__name__)


class AttendanceService:

    def __init__(self, registration_repo: RegistrationRepository) -> None:
        self._registration_repo = registration_repo

    def get(self, registration_id: int) -> bool:
        return self._load(registration_id).attended

    def set(self, registration_id: int, attended: bool) -> bool:
        """Overwrite attendance and return the stored value."""
        registration = self._load(registration_id)
        registration.mark_attendance(attended)
        self._registration_repo.save(registration)
        logger.info(
            "Attendance recorded",
            registration_id=registration_id,
            attended=attended,
        )
        return registration.attended

    def _load(self, registration_id: int) -> Registration:
        registration = self._registration_repo.get_by_id(registration_id)
        if registration is None:
            raise EntityNotFoundError(f"Registration #{registration_id} not found")
        return registration
