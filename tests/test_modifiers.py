import math
import random

from bladearena.battle.models import CombatStats, LaunchType, DEFAULT_STAT
from bladearena.battle.modifiers import apply_arena_modifiers, apply_launch_modifiers, random_launch

SAMPLES = [
    CombatStats(),
    CombatStats(attack=60, defense=30, stamina=45, propulsion=37),
    CombatStats(stamina=1, propulsion=0),
    CombatStats(attack=12, height=80, weight=33.5),
]

def _or_default(v):
    return DEFAULT_STAT if v is None else v


def test_arena_side_x_boosts_propulsion():
    for s in SAMPLES:
        out = apply_arena_modifiers(s, "X")
        assert out.propulsion == math.floor(_or_default(s.propulsion) * 1.2)
        assert out.stamina == math.floor(_or_default(s.stamina) * 0.8)


def test_arena_side_b_boosts_stamina():
    for s in SAMPLES:
        out = apply_arena_modifiers(s, "B")
        assert out.stamina == math.floor(_or_default(s.stamina) * 1.2)
        assert out.propulsion == math.floor(_or_default(s.propulsion) * 0.8)


def test_arena_carries_other_fields_and_does_not_mutate():
    s = CombatStats(attack=12, defense=7, height=80, weight=33.5)
    out = apply_arena_modifiers(s, "X")
    assert (out.attack, out.defense, out.height, out.weight) == (12, 7, 80, 33.5)
    assert s.propulsion is None and s.stamina is None
    assert out is not s


def test_launch_without_modifiers_only_fills_defaults():
    bare = LaunchType(id="none", name="None")
    for s in SAMPLES:
        out = apply_launch_modifiers(s, bare)
        for name in ("attack", "defense", "stamina", "propulsion"):
            assert getattr(out, name) == math.floor(_or_default(getattr(s, name)))


def test_launch_attack_modifier_doubles_attack():
    double = LaunchType(id="d", name="Double", attack_modifier=2)
    for s in SAMPLES:
        out = apply_launch_modifiers(s, double)
        assert out.attack == math.floor(_or_default(s.attack) * 2)
        assert out.defense == _or_default(s.defense)


def test_launch_results_are_floored_ints():
    launch = LaunchType(id="p", name="Power", attack_modifier=1.15, defense_modifier=0.95,
                        stamina_modifier=1.05, propulsion_modifier=1.33)
    out = apply_launch_modifiers(CombatStats(attack=33, defense=41, stamina=17, propulsion=29), launch)
    assert (out.attack, out.defense, out.stamina, out.propulsion) == (37, 38, 17, 38)
    assert all(isinstance(v, int) for v in (out.attack, out.defense, out.stamina, out.propulsion))


def test_random_launch_stays_within_ten_percent():
    rng = random.Random(42)
    for _ in range(200):
        l = random_launch(rng)
        for m in (l.attack_modifier, l.defense_modifier, l.stamina_modifier, l.propulsion_modifier):
            assert 0.9 <= m < 1.1
        assert l.id == "rand"
