"""File label — descriptor of a stored media artifact."""

from typing import Optional

from pydantic import Field, model_validator

from cube_entity.models.base import Entity


class FileLabel(Entity):
    """Metadata of a file held by the storage service."""

    compact_exclude = ("directURL",)

    file_code: str
    owner_id: int
    file_name: str
    file_size: int
    completed_time: int
    last_modified: Optional[int] = None     # Falls back to completed_time
    expiry_time: int = 0                    # 0 = never expires
    file_type: str = "unknown"              # Preferred extension, e.g. "jpg"
    md5: Optional[str] = None
    sha1: Optional[str] = None
    file_url: Optional[str] = Field(default=None, alias="fileURL")
    file_secure_url: Optional[str] = Field(default=None, alias="fileSecureURL")
    direct_url: Optional[str] = Field(default=None, alias="directURL")   # Internal address
    context: Optional[dict] = None

    @model_validator(mode="after")
    def _default_last_modified(self) -> "FileLabel":
        if self.last_modified is None:
            self.last_modified = self.completed_time
        return self
