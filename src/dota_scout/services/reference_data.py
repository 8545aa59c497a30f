"""Hero and item reference data lookup."""

import json
import logging
from pathlib import Path
from typing import Mapping, Optional

from dota_scout.models.reference import HeroDescriptor, ItemDescriptor

logger = logging.getLogger(__name__)

HERO_NAME_PREFIX = "npc_dota_hero_"


class ReferenceData:
    """Resolves hero and item ids to display descriptors.

    The lookup tables are supplied by the caller, either directly or from a
    directory holding ``heroes.json`` and ``items.json``. Ids that cannot be
    resolved yield placeholder descriptors instead of errors.
    """

    def __init__(
        self,
        heroes: Optional[Mapping[int, HeroDescriptor]] = None,
        items: Optional[Mapping[int, ItemDescriptor]] = None,
    ):
        self._heroes: dict[int, HeroDescriptor] = dict(heroes or {})
        self._items: dict[int, ItemDescriptor] = dict(items or {})
        self._heroes_by_name: dict[str, HeroDescriptor] = {
            hero.name: hero for hero in self._heroes.values()
        }

    @classmethod
    def from_directory(cls, reference_dir: Optional[Path]) -> "ReferenceData":
        """Load reference data from a directory.

        Args:
            reference_dir: Directory with heroes.json / items.json. Missing
                          files (or a None directory) give empty tables.

        Returns:
            ReferenceData backed by whatever files were found
        """
        if reference_dir is None:
            return cls()
        heroes = cls._load_heroes(reference_dir / "heroes.json")
        items = cls._load_items(reference_dir / "items.json")
        logger.info(
            f"Loaded {len(heroes)} heroes and {len(items)} items from {reference_dir}"
        )
        return cls(heroes=heroes, items=items)

    @staticmethod
    def _read_section(path: Path, section: str) -> dict:
        if not path.exists():
            logger.warning(f"Reference file not found: {path}")
            return {}
        with open(path) as f:
            data = json.load(f)
        return data.get(section, {})

    @classmethod
    def _load_heroes(cls, path: Path) -> dict[int, HeroDescriptor]:
        heroes = {}
        for raw_id, entry in cls._read_section(path, "heroes").items():
            hero_id = int(raw_id)
            name = entry.get("name") or f"hero_{hero_id}"
            heroes[hero_id] = HeroDescriptor(
                id=hero_id,
                name=name,
                localized_name=entry.get("localized_name") or name,
                image_url=entry.get("img"),
                primary_attribute=entry.get("primary_attr"),
            )
        return heroes

    @classmethod
    def _load_items(cls, path: Path) -> dict[int, ItemDescriptor]:
        items = {}
        for raw_id, entry in cls._read_section(path, "items").items():
            item_id = int(raw_id)
            name = entry.get("name") or f"item_{item_id}"
            items[item_id] = ItemDescriptor(
                id=item_id,
                name=name,
                localized_name=entry.get("localized_name") or name,
                image_url=entry.get("img"),
                cost=entry.get("cost"),
            )
        return items

    @property
    def hero_count(self) -> int:
        return len(self._heroes)

    @property
    def item_count(self) -> int:
        return len(self._items)

    def resolve_hero(self, hero_id: int) -> HeroDescriptor:
        """Descriptor for a hero id, or a placeholder carrying the id."""
        hero = self._heroes.get(hero_id)
        if hero is None:
            logger.debug(f"Hero {hero_id} not found in reference data")
            return HeroDescriptor.placeholder(hero_id)
        return hero

    def resolve_hero_by_name(self, name: str) -> HeroDescriptor:
        """Descriptor for an internal hero name such as ``npc_dota_hero_lion``.

        Bare names (``lion``) are accepted as well.
        """
        key = name if name.startswith(HERO_NAME_PREFIX) else f"{HERO_NAME_PREFIX}{name}"
        hero = self._heroes_by_name.get(key)
        if hero is None:
            logger.debug(f"Hero {key} not found in reference data")
            return HeroDescriptor.placeholder(0, name=key)
        return hero

    def resolve_item(self, item_id: int) -> ItemDescriptor:
        """Descriptor for an item id, or a placeholder carrying the id."""
        item = self._items.get(item_id)
        if item is None:
            logger.debug(f"Item {item_id} not found in reference data")
            return ItemDescriptor.placeholder(item_id)
        return item
