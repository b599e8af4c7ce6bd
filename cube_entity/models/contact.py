"""Contact family — contacts, anonymous contacts, groups and their devices."""

from typing import Annotated, Any, List, Literal, Optional

from pydantic import BeforeValidator, Field, SerializeAsAny, model_validator

from cube_entity.models.base import Entity, ValueModel
from cube_entity.models.enums import GroupState, lenient


class Device(ValueModel):
    """A client endpoint a contact is signed in from."""

    compact_exclude = ("address", "port")

    name: str                               # e.g., "Web", "iPhone"
    platform: str                           # e.g., "Chrome/120", "iOS 17"
    address: Optional[str] = None
    port: Optional[int] = None


class AbstractContact(Entity):
    """Anything addressable as a conversation party."""

    name: str
    context: Optional[dict] = None          # Avatar, badges and other app data
    external_id: Optional[str] = None


class Contact(AbstractContact):
    """A registered user."""

    compact_exclude = ("devices",)

    devices: List[Device] = Field(default_factory=list)

    def add_device(self, device: Device) -> None:
        if device not in self.devices:
            self.devices.append(device)

    def remove_device(self, device: Device) -> None:
        if device in self.devices:
            self.devices.remove(device)

    def get_device(self, name: str, platform: str) -> Optional[Device]:
        for device in self.devices:
            if device.name == name and device.platform == platform:
                return device
        return None


class AnonymousContact(Contact):
    """A visitor without an account. Always flagged on the wire."""

    anonymous: Literal[True] = True


def _resolve_contact(value: Any) -> Any:
    from cube_entity.factory.resolvers import resolve_contact

    return resolve_contact(value)


# A Contact field that keeps the anonymous variant through a round-trip.
ContactVariant = Annotated[SerializeAsAny[Contact], BeforeValidator(_resolve_contact)]


class Group(AbstractContact):
    """
    A named set of contacts with an owner.

    The owner is always a member; ``members`` lists member ids and
    ``member_contacts`` optionally carries the member entities themselves.
    Neither list is part of the compact shape.
    """

    compact_exclude = ("members", "memberContacts")

    tag: str                                # "public" | "private" | app-defined
    owner_id: int
    creation: int
    last_active: int
    state: lenient(GroupState)
    members: List[int] = Field(default_factory=list)
    member_contacts: Optional[List[ContactVariant]] = None

    @model_validator(mode="after")
    def _owner_is_member(self) -> "Group":
        if self.owner_id not in self.members:
            self.members.insert(0, self.owner_id)
        return self

    def has_member(self, contact_id: int) -> bool:
        return contact_id in self.members

    def add_member(self, contact_id: int) -> bool:
        if contact_id in self.members:
            return False
        self.members.append(contact_id)
        return True

    def remove_member(self, contact_id: int) -> bool:
        if contact_id == self.owner_id or contact_id not in self.members:
            return False
        self.members.remove(contact_id)
        return True


class MutableGroup:
    """
    Deferred reference to a Group.

    Filled at most once by the subsystem that looks the group up, possibly
    after the holder was handed out. Single-writer: the owning subsystem must
    call ``set`` before any reader relies on ``get``; this type does no
    locking and gives no ordering guarantee of its own.
    """

    __slots__ = ("_group",)

    def __init__(self, group: Optional[Group] = None):
        self._group = group

    @property
    def is_set(self) -> bool:
        return self._group is not None

    def get(self) -> Optional[Group]:
        return self._group

    def require(self) -> Group:
        if self._group is None:
            raise LookupError("group reference has not been resolved")
        return self._group

    def set(self, group: Group) -> None:
        if self._group is not None and self._group is not group:
            raise RuntimeError("group reference is already resolved")
        self._group = group

    def __repr__(self) -> str:
        return f"MutableGroup({self._group!r})"
