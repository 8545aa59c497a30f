"""Event timeline extraction from the objective log."""

import logging
from typing import Optional, Sequence

from dota_scout.models.match import BuildingKind, EventKind, MatchEvent
from dota_scout.models.raw import RawObjectiveEntry, RawParticipant
from dota_scout.services.reference_data import ReferenceData
from dota_scout.utils.building_keys import parse_building_key
from dota_scout.utils.sides import side_for_slot

logger = logging.getLogger(__name__)

FIRST_BLOOD = "CHAT_MESSAGE_FIRSTBLOOD"
ROSHAN_KILL = "CHAT_MESSAGE_ROSHAN_KILL"
AEGIS = "CHAT_MESSAGE_AEGIS"
BUILDING_KILL = "building_kill"

EVENT_TAGS: dict[str, EventKind] = {
    FIRST_BLOOD: EventKind.FIRST_BLOOD,
    ROSHAN_KILL: EventKind.ROSHAN_KILL,
    AEGIS: EventKind.AEGIS_PICKUP,
    # Refined to tower_kill / barracks_kill from the structure key
    BUILDING_KILL: EventKind.TOWER_KILL,
}


class EventTimelineBuilder:
    """Builds the sorted, typed event timeline of a match."""

    def __init__(self, reference_data: Optional[ReferenceData] = None):
        self.reference_data = reference_data or ReferenceData()

    def build(
        self,
        objectives: Sequence[RawObjectiveEntry],
        players: Sequence[RawParticipant] = (),
    ) -> tuple[MatchEvent, ...]:
        """Convert objective entries into events sorted by timestamp.

        Args:
            objectives: Raw objective log, any order
            players: Match participants, used to resolve actor and victim heroes

        Returns:
            Events sorted ascending by timestamp; ties keep input order.
            Unrecognized tags and building kills without a key are dropped.
        """
        by_slot = {p.player_slot: p for p in players}
        events = []
        skipped = 0
        for objective in objectives:
            event = self._to_event(objective, by_slot)
            if event is None:
                skipped += 1
            else:
                events.append(event)

        if skipped:
            logger.debug(f"Skipped {skipped} of {len(objectives)} objective entries")
        return tuple(sorted(events, key=lambda e: e.timestamp))

    def _to_event(
        self, objective: RawObjectiveEntry, by_slot: dict[int, RawParticipant]
    ) -> Optional[MatchEvent]:
        kind = EVENT_TAGS.get(objective.type)
        if kind is None:
            return None

        slot = objective.acting_slot
        actor = by_slot.get(slot) if slot is not None else None
        side = side_for_slot(slot)

        if objective.type == BUILDING_KILL:
            if not objective.key:
                logger.warning(f"building_kill at {objective.time}s has no structure key")
                return None
            building = parse_building_key(objective.key)
            return MatchEvent(
                timestamp=objective.time,
                kind=(
                    EventKind.BARRACKS_KILL
                    if building.kind == BuildingKind.BARRACKS
                    else EventKind.TOWER_KILL
                ),
                side=side,
                actor_slot=slot,
                building=building,
            )

        actor_hero = None
        victim_hero = None
        if actor is not None and kind != EventKind.ROSHAN_KILL:
            actor_hero = self.reference_data.resolve_hero(actor.hero_id)
            if kind == EventKind.FIRST_BLOOD:
                victim_hero = self._first_blood_victim(actor, objective.time)

        return MatchEvent(
            timestamp=objective.time,
            kind=kind,
            side=side,
            actor_slot=slot,
            actor_hero=actor_hero,
            victim_hero=victim_hero,
        )

    def _first_blood_victim(self, killer: RawParticipant, time: float):
        """Victim hero from the killer's kill log entry at the first blood time."""
        kill = next((k for k in killer.kills_log if k.time == time), None)
        if kill is None or not kill.key:
            return None
        return self.reference_data.resolve_hero_by_name(kill.key)
