from bladearena.battle.metadata import (
    make_meta_from, read_bit_type_from, read_height_from, read_name_from,
)
from bladearena.battle.models import DEFAULT_STAT


def test_bit_type_lookup_order():
    assert read_bit_type_from({"bit_type": "Attack", "bitType": "stamina"}) == "attack"
    assert read_bit_type_from({"bitType": "stamina"}) == "stamina"
    assert read_bit_type_from({"bit": {"type": "defense"}}) == "defense"
    assert read_bit_type_from({"build": {"bit": {"type": "STAMINA"}}}) == "stamina"
    assert read_bit_type_from({"build": {"bit_type": "attack"}}) == "attack"


def test_bit_type_falls_back_to_balance():
    assert read_bit_type_from({}) == "balance"
    assert read_bit_type_from({"bit_type": "spinner"}) == "balance"
    assert read_bit_type_from({"bit": None}) == "balance"


def test_height_must_be_positive_number():
    assert read_height_from({"height": 60}) == 60
    assert read_height_from({"blade": {"height": 45}}) == 45
    assert read_height_from({"build": {"blade": {"height": 70}}}) == 70
    assert read_height_from({"height": 0}) == DEFAULT_STAT
    assert read_height_from({"height": "tall"}) == DEFAULT_STAT
    assert read_height_from({}) == DEFAULT_STAT


def test_name_prefers_blade_name():
    assert read_name_from({"blade": {"name": "DranSword"}, "name": "row"}, "You") == "DranSword"
    assert read_name_from({"build": {"blade": {"name": "Arc"}}}, "You") == "Arc"
    assert read_name_from({"name": "Foe"}, "You") == "Foe"
    assert read_name_from({}, "You") == "You"


def test_make_meta_from():
    meta = make_meta_from({"name": "Knight", "bit_type": "defense", "height": 80}, "Opponent")
    assert (meta.bit_type, meta.height, meta.display_name) == ("defense", 80, "Knight")
