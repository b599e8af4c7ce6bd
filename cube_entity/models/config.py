"""Document codec configuration."""

from typing import Optional

from pydantic import BaseModel, Field

from cube_entity.models.base import Shape


class CodecConfig(BaseModel):
    """Configuration for the DocumentCodec."""

    default_domain: str = ""                # Applied to entity documents without "domain"
    skip_malformed: bool = False            # Batch loads log and drop bad records instead of raising
    shape: Shape = Shape.FULL               # Default output shape of dump()
    indent: Optional[int] = Field(default=None, ge=0)
