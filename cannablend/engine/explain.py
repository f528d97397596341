"""
Explanation trace: human-readable lines documenting how a prediction was
derived.

Line order
----------
1. Up to three compound lines, highest presence first::

     Pinene (33.33% presence) -> contributes Focused, Clear-headed
     Skunkberry (16.67% presence) -> no known effect mapping (custom compound)

2. THC amplification::

     THC 21.5% -> amplifies Uplifted, Creative, Body-heavy, Social (factor: 0.54)

3. CBD amplification, only when blended CBD > 0::

     CBD 3% -> amplifies Relaxed, Clear-headed, Focused (factor: 0.08)

4. Intensity formula with substituted values and the clamped result::

     Intensity formula: (THC 21.5% / 40) x 10 - (CBD 3% x 0.15) = 4.93 -> clamped to 5/10

The trace is informational only; no decision reads it.  Every number in it is
taken from the same values the engine used, passed in by the caller.
"""

from __future__ import annotations

from collections.abc import Mapping

from cannablend.engine.rounding import format_number as _n
from cannablend.engine.rounding import round2
from cannablend.taxonomy.effect_tables import (
    CBD_TAG_INFLUENCE,
    THC_TAG_INFLUENCE,
    compound_effects,
    top_effects,
)

EXPLAINED_COMPOUND_COUNT = 3


def top_compounds(
    compound_scores: Mapping[str, float],
    n: int = EXPLAINED_COMPOUND_COUNT,
) -> list[tuple[str, float]]:
    """The ``n`` most present compounds, ties kept in first-appearance order."""
    return sorted(compound_scores.items(), key=lambda kv: -kv[1])[:n]


def compound_line(name: str, presence: float) -> str:
    pct = _n(round2(presence * 100))
    effects = compound_effects(name)
    if effects is None:
        return f"{name} ({pct}% presence) -> no known effect mapping (custom compound)"
    tags = ", ".join(top_effects(effects, 2))
    return f"{name} ({pct}% presence) -> contributes {tags}"


def build_explanation(
    compound_scores: Mapping[str, float],
    blended_thc:     float,
    blended_cbd:     float,
    thc_factor:      float,
    cbd_factor:      float,
    raw_intensity:   float,
    intensity:       int,
) -> list[str]:
    """Assemble the explanation trace.

    Args:
        compound_scores: Presence score per compound, as computed.
        blended_thc:     Rounded blended THC %.
        blended_cbd:     Rounded blended CBD %.
        thc_factor:      ``clamp(blended_thc / 40, 0, 1)``.
        cbd_factor:      ``clamp(blended_cbd / 40, 0, 1)``.
        raw_intensity:   Pre-rounding, pre-clamp intensity.
        intensity:       Final clamped intensity.

    Returns:
        Ordered list of explanation lines.
    """
    lines = [compound_line(name, presence) for name, presence in top_compounds(compound_scores)]

    lines.append(
        f"THC {_n(blended_thc)}% -> amplifies {', '.join(THC_TAG_INFLUENCE)} "
        f"(factor: {_n(round2(thc_factor))})"
    )
    if blended_cbd > 0:
        lines.append(
            f"CBD {_n(blended_cbd)}% -> amplifies {', '.join(CBD_TAG_INFLUENCE)} "
            f"(factor: {_n(round2(cbd_factor))})"
        )

    lines.append(
        f"Intensity formula: (THC {_n(blended_thc)}% / 40) x 10 - "
        f"(CBD {_n(blended_cbd)}% x 0.15) = {_n(round2(raw_intensity))} "
        f"-> clamped to {intensity}/10"
    )
    return lines
