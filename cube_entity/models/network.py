"""ICE server descriptors handed to real-time media clients."""

from typing import Optional, Tuple

from pydantic import field_validator

from cube_entity.models.base import ValueModel


class IceServer(ValueModel):
    """A STUN or TURN server."""

    urls: Tuple[str, ...]                   # e.g., ("turn:turn.example.com:3478",)
    username: Optional[str] = None
    credential: Optional[str] = None

    @field_validator("urls", mode="before")
    @classmethod
    def _single_url(cls, value):
        if isinstance(value, str):
            return (value,)
        return value

    @property
    def is_turn(self) -> bool:
        return any(url.startswith(("turn:", "turns:")) for url in self.urls)
