"""Application service: List Participants use case (query)."""

from __future__ import annotations

from eventmgmt.application.dto import ParticipantDTO, ParticipantList
from eventmgmt.domain.exceptions import EntityNotFoundError
from eventmgmt.domain.repository.reference_repositories import (
    EventRepository,
    UserRepository,
)
from eventmgmt.domain.repository.registration_repository import (
    RegistrationRepository,
)


class ListParticipantsHandler:

    def __init__(
        self,
        event_repo: EventRepository,
        registration_repo: RegistrationRepository,
        user_repo: UserRepository,
    ) -> None:
        self._event_repo = event_repo
        self._registration_repo = registration_repo
        self._user_repo = user_repo

    def handle(self, event_id: int) -> ParticipantList:
        if self._event_repo.get_by_id(event_id) is None:
            raise EntityNotFoundError(f"Event #{event_id} not found")

        participants: list[ParticipantDTO] = []
        for registration in self._registration_repo.list_for_event(event_id):
            user = self._user_repo.get_by_id(registration.user_id)
            participants.append(
                ParticipantDTO(
                    registration_id=registration.id,
                    # Fall back to the name given at registration time
                    name=user.name if user else registration.participant_name,
                    email=user.email if user else None,
                    phone=user.phone if user else None,
                    attended=registration.attended,
                )
            )
        return ParticipantList.of(participants)
