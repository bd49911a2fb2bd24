"""
Battle engine package.
- models.py (CombatStats, LaunchType, outcomes)
- constants.py (hit-chance tables)
- modifiers.py (arena & launch modifiers)
- hit.py / finish.py (per-attempt rolls)
- round.py / match.py (round resolution, first-to-seven loop)
- countdown.py (pre-battle countdown)
"""
from .models import CombatStats, LaunchType, DEFAULT_STAT
from .modifiers import apply_arena_modifiers, apply_launch_modifiers
from .constants import BIT_BASE_HIT, BIT_VS_BIT_HIT_MULT
from .hit import calculate_hit_chance
from .finish import calculate_finish
from .metadata import make_meta_from
from .round import compute_round
from .match import compute_match
from .countdown import countdown
from .utils import flip_arena_side

__all__ = [
    "CombatStats","LaunchType","DEFAULT_STAT","apply_arena_modifiers","apply_launch_modifiers",
    "BIT_BASE_HIT","BIT_VS_BIT_HIT_MULT","calculate_hit_chance","calculate_finish","make_meta_from",
    "compute_round","compute_match","countdown","flip_arena_side",
]
