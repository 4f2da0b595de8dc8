"""Channel domain model and configuration."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field, validator

CHANNEL_ID_PREFIX = "UC"


def validate_channel_id(channel_id: str) -> str:
    """Check a YouTube channel ID and return it unchanged."""
    if not channel_id:
        raise ValueError("Channel ID cannot be empty")
    if not channel_id.startswith(CHANNEL_ID_PREFIX):
        raise ValueError(f"Channel ID must start with '{CHANNEL_ID_PREFIX}': {channel_id}")
    return channel_id


@dataclass(frozen=True)
class Channel:
    """
    Represents a subscribed YouTube channel.

    Immutable and built once from configuration. Two channels are the same
    channel when their IDs match, whatever they are called locally.
    """

    id: str
    name: str

    def __post_init__(self) -> None:
        """Validate channel data after initialization."""
        validate_channel_id(self.id)
        if not self.name:
            raise ValueError("Channel name cannot be empty")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Channel):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"Channel(name='{self.name}', id={self.id})"


class ChannelConfig(BaseModel):
    """
    Configuration entry for a subscribed channel.

    Mirrors one item of the ``channels`` list in the YAML configuration.
    """

    name: str = Field(..., min_length=1, description="Display name for the channel")
    id: str = Field(..., description="YouTube channel ID (starts with UC)")

    @validator("id")
    def validate_id(cls, v: str) -> str:
        """Validate YouTube channel ID format."""
        return validate_channel_id(v)

    def to_domain(self) -> Channel:
        """Convert to domain Channel entity."""
        return Channel(id=self.id, name=self.name)

    class Config:
        """Pydantic configuration."""

        extra = "forbid"
