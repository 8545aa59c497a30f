"""Side resolution from provider slot and team conventions."""

from typing import Optional

from dota_scout.models.match import Side
from dota_scout.models.raw import RADIANT_SLOT_THRESHOLD


def side_for_slot(player_slot: Optional[int]) -> Side:
    """Map a player slot to its side.

    Slots below the threshold are radiant. A missing slot is attributed
    to dire, matching how the dashboard has always labelled such events.
    """
    if player_slot is not None and player_slot < RADIANT_SLOT_THRESHOLD:
        return Side.RADIANT
    return Side.DIRE


def side_for_team_index(team: int) -> Side:
    """Map a draft team index (0 or 1) to its side."""
    return Side.RADIANT if team == 0 else Side.DIRE
