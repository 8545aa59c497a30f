"""Draft reconstruction from the pick/ban log."""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from dota_scout.models.match import (
    Draft,
    DraftTimelineEntry,
    HeroPick,
    PickOrder,
    Role,
    Side,
)
from dota_scout.models.raw import RawDraftEntry, RawParticipant
from dota_scout.services.reference_data import ReferenceData
from dota_scout.utils.sides import side_for_team_index

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReconstructedDraft:
    """Draft plus the ordering details derived alongside it."""

    draft: Draft
    timeline: tuple[DraftTimelineEntry, ...]
    pick_order: Optional[PickOrder]


class DraftReconstructor:
    """Turns the ordered pick/ban log into per-side picks and bans."""

    def __init__(self, reference_data: Optional[ReferenceData] = None):
        self.reference_data = reference_data or ReferenceData()

    @staticmethod
    def order_entries(entries: Sequence[RawDraftEntry]) -> list[RawDraftEntry]:
        """Sort entries by their draft order.

        The sort is stable. Entries without an order keep their relative
        input order and come after every ordered entry.
        """
        return sorted(
            entries,
            key=lambda e: (e.order is None, e.order if e.order is not None else 0),
        )

    def reconstruct(
        self,
        entries: Sequence[RawDraftEntry],
        players: Sequence[RawParticipant] = (),
        roles: Optional[Mapping[int, Role]] = None,
    ) -> ReconstructedDraft:
        """Rebuild the draft.

        Args:
            entries: Raw pick/ban log, any order
            players: Match participants, used to link picks to players
            roles: Role per player slot, copied onto the linked picks

        Returns:
            ReconstructedDraft. Every input entry appears exactly once across
            the four pick/ban lists.
        """
        roles = roles or {}
        ordered = self.order_entries(entries)
        unordered = sum(1 for e in entries if e.order is None)
        if unordered:
            logger.warning(f"{unordered} draft entries have no order, keeping input order")

        picks: dict[Side, list[HeroPick]] = {Side.RADIANT: [], Side.DIRE: []}
        bans: dict[Side, list] = {Side.RADIANT: [], Side.DIRE: []}
        timeline: list[DraftTimelineEntry] = []

        for sequence, entry in enumerate(ordered, 1):
            side = side_for_team_index(entry.team)
            hero = self.reference_data.resolve_hero(entry.hero_id)

            if entry.is_pick:
                player = self._find_player(players, entry.hero_id, side)
                picks[side].append(
                    HeroPick(
                        hero=hero,
                        order=len(picks[side]) + 1,
                        account_id=player.account_id if player else None,
                        role=roles.get(player.player_slot) if player else None,
                    )
                )
            else:
                bans[side].append(hero)

            timeline.append(
                DraftTimelineEntry(
                    sequence=sequence,
                    action_type="pick" if entry.is_pick else "ban",
                    side=side,
                    hero=hero,
                )
            )

        first_pick = next((e for e in ordered if e.is_pick), None)
        pick_order = PickOrder(first=side_for_team_index(first_pick.team)) if first_pick else None

        return ReconstructedDraft(
            draft=Draft(
                radiant_picks=tuple(picks[Side.RADIANT]),
                dire_picks=tuple(picks[Side.DIRE]),
                radiant_bans=tuple(bans[Side.RADIANT]),
                dire_bans=tuple(bans[Side.DIRE]),
            ),
            timeline=tuple(timeline),
            pick_order=pick_order,
        )

    @staticmethod
    def _find_player(
        players: Sequence[RawParticipant], hero_id: int, side: Side
    ) -> Optional[RawParticipant]:
        for player in players:
            if player.hero_id == hero_id and player.is_radiant == (side == Side.RADIANT):
                return player
        return None
