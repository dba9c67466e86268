"""Holdings — инварианты долей крупного акционера и миноритария."""

from .invariant import (
    DEFAULT_MIN_RESERVE,
    MINOR_EXCEEDS_MAJOR_MESSAGE,
    HoldingsConfig,
    HoldingsInvariant,
    HoldingsStatus,
    clamp_holdings,
    classify_holdings,
    with_invariant,
)

__all__ = [
    "DEFAULT_MIN_RESERVE",
    "MINOR_EXCEEDS_MAJOR_MESSAGE",
    "HoldingsConfig",
    "HoldingsInvariant",
    "HoldingsStatus",
    "clamp_holdings",
    "classify_holdings",
    "with_invariant",
]
