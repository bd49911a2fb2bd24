import random

import pytest

import bladearena.battle.factory as factory
from bladearena.battle.build import BladeBuild, apply_build_stats, build_name, fighter_from_build, image_for
from bladearena.core.errors import CatalogError

BLADE = {"blade_id": "b1", "name": "DranSword", "line": "BX", "attack": 60, "defense": 30, "stamina": 30, "weight": 33.0}
CX_BLADE = {"blade_id": "b2", "name": "DranBrave", "line": "CX", "attack": 55, "image_url": "https://cdn/x.png"}
ASSIST = {"assist_id": "a1", "name": "Slash", "attack": 10}
RATCHET = {"ratchet_id": "r1", "name": "3-60", "defense": 5, "height": 60}
BIT = {"bit_id": "t1", "name": "Rush", "type": "attack", "propulsion": 30, "weight": 2.2}


def test_build_stats_are_summed():
    stats = apply_build_stats(BladeBuild(BLADE, ASSIST, RATCHET, BIT))
    assert stats.attack == 70
    assert stats.defense == 35
    assert stats.propulsion == 30
    assert stats.height == 60
    assert stats.weight == pytest.approx(35.2)
    assert stats.burst == 0


def test_build_name_and_fighter():
    build = BladeBuild(BLADE, None, RATCHET, BIT)
    assert build_name(build) == "DranSword -3-60 -Rush"
    f = fighter_from_build(build)
    assert f.bit_type == "attack"
    assert f.image_url == "/blades/enemy-default.png"
    assert f.record()["bit_type"] == "attack"


def test_image_for():
    assert image_for(CX_BLADE) == "https://cdn/x.png"
    assert image_for({"image_url": "a.png"}) == "/blades/a.png"


def _fake_catalogs(blades):
    data = {"blade": tuple(blades), "assist": (ASSIST,), "ratchet": (RATCHET,), "bit": (BIT,)}
    return lambda name: data[name]


def test_only_cx_blades_get_an_assist(monkeypatch):
    monkeypatch.setattr(factory, "load_catalog", _fake_catalogs([BLADE]))
    assert "+" not in factory.generate_enemy(random.Random(1)).name
    monkeypatch.setattr(factory, "load_catalog", _fake_catalogs([CX_BLADE]))
    enemy = factory.generate_enemy(random.Random(1))
    assert enemy.name == "DranBrave +Slash -3-60 -Rush"
    assert enemy.stats.attack == 65


def test_empty_blade_catalog_raises(monkeypatch):
    monkeypatch.setattr(factory, "load_catalog", _fake_catalogs([]))
    with pytest.raises(CatalogError):
        factory.generate_enemy(random.Random(1))


def test_fighter_from_catalog_ids():
    f = factory.fighter_from_ids("dransword", ratchet_id="3-60", bit_id="rush", fighter_id="user")
    assert f.id == "user"
    assert f.name == "DranSword -3-60 -Rush"
    assert f.stats.attack == 75


class PickLast:
    def randrange(self, n):
        return n - 1


def test_enemy_blade_is_picked_by_index(monkeypatch):
    monkeypatch.setattr(factory, "load_catalog", _fake_catalogs([BLADE, CX_BLADE]))
    enemy = factory.generate_enemy(PickLast())
    assert enemy.name.startswith("DranBrave +Slash")
