from pydantic import BaseModel, ConfigDict, Field

from .port import Port


class Ship(BaseModel):
    """A vessel tracked by the projection.

    Attributes:
        name: Unique identifier of the ship. Cannot be reassigned.
        current_port: Port the ship is docked at, or None while at sea.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(frozen=True, description="Unique name of the ship")
    current_port: Port | None = Field(
        default=None,
        description="Port the ship is docked at, None while at sea",
    )

    @property
    def at_sea(self) -> bool:
        return self.current_port is None

    def docked_at(self, port: Port) -> bool:
        return self.current_port == port
