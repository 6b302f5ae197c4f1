from typing import Any

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """
    Base for entities read from the client log.

    Fields are populated by their JSON key (alias) or Python name.
    Unknown keys in the log are ignored. Instances are immutable.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    def to_wire(self) -> dict[str, Any]:
        """Encode with log/upload keys, omitting absent fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
