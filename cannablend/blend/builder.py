"""
Blend builder: caller-side editing rules for a list of ``BlendEntry``.

The engine accepts any number of strains whose weights sum to ~100.  The rules
here are the interactive policy layered on top of it:

  - A blend holds at most ``max_strains`` entries (default 3) and each strain
    at most once.
  - Adding or removing a strain re-splits the weights evenly:
    ``floor(100 / n)`` each, the last entry absorbing the remainder
    (3 strains -> 33 / 33 / 34).
  - Changing one weight redistributes the remainder over the other entries in
    proportion to their current weights, so the total stays exactly 100.

Every function returns a new list; inputs are never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cannablend.engine.rounding import clamp, round_half_away
from cannablend.models.strain import BlendEntry

log = logging.getLogger(__name__)

DEFAULT_MAX_STRAINS = 3
_TOTAL = 100
_TOLERANCE = 0.5


def even_weights(n: int) -> list[int]:
    """Split 100 into ``n`` integer weights, remainder on the last one."""
    if n <= 0:
        return []
    even = _TOTAL // n
    return [even] * (n - 1) + [_TOTAL - even * (n - 1)]


def _respread(strain_ids: Sequence[str]) -> list[BlendEntry]:
    return [
        BlendEntry(strain_id=sid, weight=w)
        for sid, w in zip(strain_ids, even_weights(len(strain_ids)))
    ]


def add_strain(
    entries:     Sequence[BlendEntry],
    strain_id:   str,
    max_strains: int = DEFAULT_MAX_STRAINS,
) -> list[BlendEntry]:
    """Append ``strain_id`` and re-split weights evenly.

    Returns the entries unchanged when the blend is already full or already
    contains the strain.
    """
    if len(entries) >= max_strains:
        log.info("Blend is full (%d strains); not adding %s.", max_strains, strain_id)
        return list(entries)
    if any(e.strain_id == strain_id for e in entries):
        log.info("Strain %s is already in the blend.", strain_id)
        return list(entries)
    return _respread([e.strain_id for e in entries] + [strain_id])


def remove_strain(entries: Sequence[BlendEntry], strain_id: str) -> list[BlendEntry]:
    """Drop ``strain_id`` and re-split the remaining weights evenly."""
    return _respread([e.strain_id for e in entries if e.strain_id != strain_id])


def set_weight(
    entries:    Sequence[BlendEntry],
    strain_id:  str,
    new_weight: float,
) -> list[BlendEntry]:
    """Set one entry's weight and rebalance the others to keep the total at 100.

    The new weight is rounded and clamped to an integer in [0, 100].  A
    single-entry blend is always 100.  The remainder is shared by the other
    entries proportionally to their current weights (evenly if they are all
    zero); the last of them absorbs any rounding drift.  The edited entry
    keeps its position.

    Raises:
        ValueError: If ``strain_id`` is not in the blend.
    """
    position = next((i for i, e in enumerate(entries) if e.strain_id == strain_id), None)
    if position is None:
        raise ValueError(f"Strain {strain_id} is not in the blend.")

    if len(entries) == 1:
        return [BlendEntry(strain_id=strain_id, weight=_TOTAL)]

    clamped = int(clamp(round_half_away(new_weight), 0, _TOTAL))
    others = [e for e in entries if e.strain_id != strain_id]
    other_total = sum(e.weight for e in others)
    remainder = _TOTAL - clamped

    if other_total == 0:
        share = remainder // len(others)
        weights = [share] * (len(others) - 1) + [remainder - share * (len(others) - 1)]
    else:
        weights = [int(round_half_away(e.weight / other_total * remainder)) for e in others]
        weights[-1] += remainder - sum(weights)

    rebalanced = [
        BlendEntry(strain_id=e.strain_id, weight=max(0, w))
        for e, w in zip(others, weights)
    ]
    rebalanced.insert(position, BlendEntry(strain_id=strain_id, weight=clamped))
    return rebalanced


def weight_total(entries: Sequence[BlendEntry]) -> int:
    return sum(e.weight for e in entries)


def is_complete(entries: Sequence[BlendEntry]) -> bool:
    """True if the blend is non-empty and its weights total ~100."""
    return bool(entries) and abs(weight_total(entries) - _TOTAL) < _TOLERANCE
