"""Session registry models."""

from pydantic import BaseModel, ConfigDict, Field


class Session(BaseModel):
    """A created room, identified by its public room code.

    Immutable once created. Room codes are not guaranteed unique.
    """

    room_id: str = Field(..., alias="roomId", description="6-character public room code")
    created_at: int = Field(..., alias="createdAt", description="Creation time in milliseconds since the Unix epoch")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={"examples": [{"roomId": "A3X9K2", "createdAt": 1767225600000}]},
    )
