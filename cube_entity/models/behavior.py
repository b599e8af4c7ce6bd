"""Contact behaviours — sign-in, sign-out and other client activity events."""

from typing import Optional

from cube_entity.models.base import Entity
from cube_entity.models.contact import ContactVariant, Device


class ContactBehavior(Entity):
    """
    Something a contact did from a device. The device may be attached after
    construction through ``set_device``; nothing else changes once built.
    """

    compact_exclude = ("data",)

    contact: ContactVariant
    behavior: str                           # e.g., "SignIn", "SignOut", "DeviceTimeout"
    device: Optional[Device] = None
    data: Optional[dict] = None             # Behaviour-specific detail

    def set_device(self, device: Optional[Device]) -> None:
        self.device = device
