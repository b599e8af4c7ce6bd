"""Contact zones — per-contact address books and their change notifications."""

from typing import Annotated, Any, List, Optional

from pydantic import BeforeValidator, Field, SerializeAsAny

from cube_entity.factory import resolvers
from cube_entity.models.base import Entity, ValueModel, current_millis
from cube_entity.models.contact import AbstractContact
from cube_entity.models.enums import (
    ContactZoneParticipantState,
    ContactZoneParticipantType,
    ContactZoneState,
    ZoneAction,
    lenient,
)


def _resolve_linked(value: Any) -> Any:
    return resolvers.resolve_contact(value)


class ContactZoneParticipant(ValueModel):
    """A contact or group listed in a zone."""

    id: int                                 # Contact or group id
    type: lenient(ContactZoneParticipantType) = ContactZoneParticipantType.Contact
    timestamp: int = Field(default_factory=current_millis)
    inviter_id: int = 0
    postscript: str = ""                    # Note attached to the invitation
    state: lenient(ContactZoneParticipantState) = ContactZoneParticipantState.Normal
    linked_contact: Optional[
        Annotated[SerializeAsAny[AbstractContact], BeforeValidator(_resolve_linked)]
    ] = None


class ContactZone(Entity):
    """
    A named list of participants owned by one contact.

    In peer mode every contact participant keeps a mirror zone listing the
    owner; changes to one side are announced to the other with a
    ContactZoneBundle.
    """

    compact_exclude = ("participants",)

    owner: int
    name: str
    display_name: str = ""
    state: lenient(ContactZoneState) = ContactZoneState.Normal
    peer_mode: bool = False
    participants: List[ContactZoneParticipant] = Field(default_factory=list)

    def get_participant(self, participant_id: int) -> Optional[ContactZoneParticipant]:
        for participant in self.participants:
            if participant.id == participant_id:
                return participant
        return None

    def add_participant(self, participant: ContactZoneParticipant) -> None:
        """Add or replace the participant with the same id."""
        self.remove_participant(participant.id)
        self.participants.append(participant)

    def remove_participant(self, participant_id: int) -> Optional[ContactZoneParticipant]:
        participant = self.get_participant(participant_id)
        if participant is not None:
            self.participants.remove(participant)
        return participant


class ContactZoneBundle(ValueModel):
    """
    Notification of one participant change in a zone.

    ``action`` is always emitted as its wire code (0 remove, 1 add, 9 update),
    in the compact shape as well.
    """

    zone: ContactZone
    participant: ContactZoneParticipant
    action: lenient(ZoneAction)
