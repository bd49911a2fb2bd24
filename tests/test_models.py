from bladearena.battle.models import (
    CombatStats, LaunchType, DEFAULT_STAT, calc_percent, compute_outcome,
    has_battle_stats, to_battle_entity, FinishFlags,
)


class FixedRng:
    def __init__(self, value):
        self.value = value
    def random(self):
        return self.value


def test_from_mapping_ignores_unknown_keys():
    s = CombatStats.from_mapping({"name": "DranSword", "attack": 60, "stamina": None, "image_url": "x"})
    assert s.attack == 60
    assert s.stamina is None
    assert s.get("stamina") == DEFAULT_STAT


def test_to_battle_entity_defaults():
    full = to_battle_entity(None)
    assert full.attack == full.propulsion == full.height == DEFAULT_STAT
    assert full.weight == 0
    partial = to_battle_entity({"attack": 10})
    assert partial.attack == 10 and partial.defense == DEFAULT_STAT and partial.weight == 0


def test_has_battle_stats():
    assert has_battle_stats({"weight": 3})
    assert not has_battle_stats({"name": "x"})
    assert not has_battle_stats(42)
    assert has_battle_stats(CombatStats())


def test_launch_from_mapping():
    l = LaunchType.from_mapping({"id": "power", "name": "Power", "attack_modifier": 1.2, "created_at": "2024-01-01"})
    assert l.attack_modifier == 1.2
    assert l.defense_modifier is None


def test_calc_percent_even_stats():
    even = to_battle_entity(None)
    p = calc_percent(even, even)
    assert (p.spin, p.burst, p.over, p.xtreme) == (80, 100, 50, 100)


def test_compute_outcome_counts_successes():
    outcome = compute_outcome(CombatStats(), CombatStats(), rng=FixedRng(0.0))
    assert outcome.user_score == outcome.enemy_score == 4
    assert outcome.winner == "draw"
    outcome = compute_outcome(CombatStats(), CombatStats(), rng=FixedRng(0.99))
    # only burst and xtreme sit at 100%
    assert outcome.user_result == FinishFlags(burst=True, xtreme=True)
