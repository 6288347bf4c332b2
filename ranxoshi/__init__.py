"""Public package surface for the ranxoshi xoshiro256** generator."""

from .conversions import double_cc, double_co, float_cc, float_co
from .streams import StreamConfig, jump_streams, run_streams
from .xoshiro import DEFAULT_SEED, JUMP, Xoshiro256

__all__ = [
    "DEFAULT_SEED",
    "JUMP",
    "StreamConfig",
    "Xoshiro256",
    "double_cc",
    "double_co",
    "float_cc",
    "float_co",
    "jump_streams",
    "run_streams",
]
