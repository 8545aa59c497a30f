"""Hero and item display descriptors."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HeroDescriptor:
    """Display information for a hero."""

    id: int
    name: str  # internal name, e.g. "npc_dota_hero_antimage"
    localized_name: str
    image_url: str | None = None
    primary_attribute: str | None = None  # "str", "agi", "int", "all"
    is_placeholder: bool = False

    @classmethod
    def placeholder(cls, hero_id: int, name: str | None = None) -> "HeroDescriptor":
        """Descriptor for a hero id (or internal name) missing from reference data."""
        return cls(
            id=hero_id,
            name=name or f"hero_{hero_id}",
            localized_name=f"Unknown Hero ({name or hero_id})",
            is_placeholder=True,
        )


@dataclass(frozen=True)
class ItemDescriptor:
    """Display information for an item."""

    id: int
    name: str  # internal name, e.g. "blink"
    localized_name: str
    image_url: str | None = None
    cost: int | None = None
    is_placeholder: bool = False

    @classmethod
    def placeholder(cls, item_id: int) -> "ItemDescriptor":
        """Descriptor for an item id missing from reference data."""
        return cls(
            id=item_id,
            name=f"item_{item_id}",
            localized_name=f"Unknown Item ({item_id})",
            is_placeholder=True,
        )
