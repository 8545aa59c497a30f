"""Tests for DraftReconstructor."""

import random

import pytest

from dota_scout.models.match import Role, Side
from dota_scout.models.raw import RawDraftEntry, RawParticipant, parse_raw_match
from dota_scout.services.draft_reconstructor import DraftReconstructor


def _entries(raw_entries):
    return [RawDraftEntry.model_validate(e) for e in raw_entries]


@pytest.fixture
def reconstructor(reference_data):
    return DraftReconstructor(reference_data)


class TestReconstruct:
    def test_picks_and_bans_split_by_side(self, reconstructor, raw_match):
        result = reconstructor.reconstruct(_entries(raw_match["picks_bans"]))
        draft = result.draft

        assert [p.hero.id for p in draft.radiant_picks] == [1, 2, 3, 4, 5]
        assert [p.hero.id for p in draft.dire_picks] == [6, 7, 8, 9, 10]
        assert [h.id for h in draft.radiant_bans] == [20, 22]
        assert [h.id for h in draft.dire_bans] == [21, 23]

    def test_pick_order_is_one_based_per_side(self, reconstructor, raw_match):
        draft = reconstructor.reconstruct(_entries(raw_match["picks_bans"])).draft

        assert [p.order for p in draft.radiant_picks] == [1, 2, 3, 4, 5]
        assert [p.order for p in draft.dire_picks] == [1, 2, 3, 4, 5]

    def test_empty_log(self, reconstructor):
        result = reconstructor.reconstruct([])

        assert result.draft.radiant_picks == ()
        assert result.draft.dire_picks == ()
        assert result.draft.radiant_bans == ()
        assert result.draft.dire_bans == ()
        assert result.timeline == ()
        assert result.pick_order is None

    def test_entries_sorted_by_order(self, reconstructor, raw_match):
        shuffled = raw_match["picks_bans"][:]
        random.Random(7).shuffle(shuffled)

        result = reconstructor.reconstruct(_entries(shuffled))

        assert [p.hero.id for p in result.draft.radiant_picks] == [1, 2, 3, 4, 5]
        assert [e.sequence for e in result.timeline] == list(range(1, 15))
        assert [e.hero.id for e in result.timeline][:4] == [20, 21, 22, 23]

    def test_entries_without_order_keep_input_order(self, reconstructor):
        entries = _entries([
            {"hero_id": 5, "is_pick": True, "team": 0},
            {"hero_id": 3, "is_pick": True, "team": 0, "order": 2},
            {"hero_id": 4, "is_pick": True, "team": 0},
            {"hero_id": 1, "is_pick": True, "team": 0, "order": 0},
        ])

        draft = reconstructor.reconstruct(entries).draft

        # Ordered entries first, then unordered ones as they arrived
        assert [p.hero.id for p in draft.radiant_picks] == [1, 3, 5, 4]

    def test_all_entries_without_order_preserve_input(self, reconstructor):
        entries = _entries([
            {"hero_id": 4, "is_pick": False, "team": 1},
            {"hero_id": 2, "is_pick": False, "team": 1},
            {"hero_id": 9, "is_pick": False, "team": 1},
        ])

        draft = reconstructor.reconstruct(entries).draft

        assert [h.id for h in draft.dire_bans] == [4, 2, 9]

    @pytest.mark.parametrize("seed", range(5))
    def test_no_entry_lost_or_duplicated(self, reconstructor, seed):
        rng = random.Random(seed)
        entries = _entries([
            {
                "hero_id": rng.randint(1, 130),
                "is_pick": rng.random() < 0.5,
                "team": rng.randint(0, 1),
                "order": rng.choice([None, rng.randint(0, 30)]),
            }
            for _ in range(rng.randint(0, 24))
        ])

        draft = reconstructor.reconstruct(entries).draft

        assert draft.action_count == len(entries)

    def test_unknown_hero_becomes_placeholder(self, reconstructor):
        entries = _entries([{"hero_id": 999, "is_pick": False, "team": 0, "order": 0}])

        ban = reconstructor.reconstruct(entries).draft.radiant_bans[0]

        assert ban.id == 999
        assert ban.is_placeholder


class TestPickLinking:
    def test_picks_linked_to_players_and_roles(self, reconstructor, raw_match):
        record = parse_raw_match(raw_match)
        roles = {0: Role.CARRY, 128: Role.CARRY, 132: Role.ROAMING}

        draft = reconstructor.reconstruct(
            record.picks_bans, players=record.players, roles=roles
        ).draft

        first_radiant = draft.radiant_picks[0]
        assert first_radiant.account_id == 1000
        assert first_radiant.role == Role.CARRY
        assert draft.dire_picks[-1].account_id == 1132
        assert draft.dire_picks[-1].role == Role.ROAMING
        # Linked but not classified in this roles map
        assert draft.radiant_picks[1].role is None

    def test_pick_without_matching_player(self, reconstructor):
        players = [RawParticipant(player_slot=128, hero_id=1)]
        entries = _entries([{"hero_id": 1, "is_pick": True, "team": 0, "order": 0}])

        pick = reconstructor.reconstruct(entries, players=players).draft.radiant_picks[0]

        # Hero 1 was played by dire, so the radiant pick stays unlinked
        assert pick.account_id is None
        assert pick.role is None


class TestPickOrderAndTimeline:
    def test_first_pick_side(self, reconstructor, raw_match):
        result = reconstructor.reconstruct(_entries(raw_match["picks_bans"]))

        assert result.pick_order.first == Side.RADIANT
        assert result.pick_order.second == Side.DIRE

    def test_dire_first_pick(self, reconstructor):
        entries = _entries([
            {"hero_id": 20, "is_pick": False, "team": 0, "order": 0},
            {"hero_id": 6, "is_pick": True, "team": 1, "order": 1},
            {"hero_id": 1, "is_pick": True, "team": 0, "order": 2},
        ])

        assert reconstructor.reconstruct(entries).pick_order.first == Side.DIRE

    def test_bans_only_has_no_pick_order(self, reconstructor):
        entries = _entries([{"hero_id": 20, "is_pick": False, "team": 0, "order": 0}])

        assert reconstructor.reconstruct(entries).pick_order is None

    def test_timeline_entries(self, reconstructor, raw_match):
        timeline = reconstructor.reconstruct(_entries(raw_match["picks_bans"])).timeline

        assert len(timeline) == 14
        assert timeline[0].action_type == "ban"
        assert timeline[0].side == Side.RADIANT
        assert timeline[4].action_type == "pick"
        assert timeline[4].hero.localized_name == "Anti-Mage"
