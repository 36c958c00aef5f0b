"""Point-in-time summary views of the registry, for external rendering."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .item import ItemDescription


class ItemSummary(BaseModel):
    """One catalog entry with its circulation state."""

    model_config = ConfigDict(frozen=True)

    description: ItemDescription
    available: bool
    holder_id: str | None = None


class MemberSummary(BaseModel):
    """One roster entry with the ids of the items it holds."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    borrowed_item_ids: list[str] = Field(default_factory=list)


class RegistrySummary(BaseModel):
    """Consistent snapshot of the whole catalog and roster."""

    model_config = ConfigDict(frozen=True)

    taken_at: datetime
    items: list[ItemSummary]
    members: list[MemberSummary]

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def available_items(self) -> int:
        return sum(1 for entry in self.items if entry.available)

    @property
    def loaned_items(self) -> int:
        return self.total_items - self.available_items
