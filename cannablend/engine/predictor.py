"""
Prediction engine: converts a weighted blend of strains into a predicted
experience profile.

Heuristic only.  No physiological model, no calibration against real data.

Pipeline (single pass, pure, no I/O)
-----------------------------------
    validate          non-empty, weights sum to 100 ± 0.5
    blend             weighted THC / CBD, rounded to 2 decimals
    presence          each strain's 3 compounds share its weight equally
    tag scoring       compound effects + THC influence + CBD influence
    label selection   see ``cannablend.engine.ranking``
    intensity         THC drives, CBD damps, clamped to [1, 10]
    explanation       see ``cannablend.engine.explain``

Intensity formula
-----------------
    raw       = (blended_thc / 40) * 10  -  blended_cbd * 0.15
    intensity = clamp(round_half_away(raw), 1, 10)

The floor is 1: a zero-THC blend still reports minimum intensity.

Caller contract
---------------
The engine does not cap the number of strains; the 3-strain limit is a
caller-side policy (``cannablend.blend.builder``, ``[blend] max_strains``).
It also does not re-validate strain records; see ``models.strain.Strain``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cannablend.engine.errors import EmptyBlendError, WeightSumMismatchError
from cannablend.engine.explain import build_explanation
from cannablend.engine.ranking import rank_tags, select_labels
from cannablend.engine.rounding import clamp, round2, round_half_away
from cannablend.models.prediction import (
    MAX_INTENSITY,
    MIN_INTENSITY,
    BlendInput,
    PredictionResult,
)
from cannablend.taxonomy.effect_tables import (
    CANNABINOID_SATURATION_PCT,
    CBD_TAG_INFLUENCE,
    THC_TAG_INFLUENCE,
    compound_effects,
)
from cannablend.taxonomy.experience_taxonomy import ExperienceTag

log = logging.getLogger(__name__)

WEIGHT_TOTAL = 100.0
WEIGHT_TOLERANCE = 0.5
CBD_INTENSITY_DAMPING = 0.15


def compute_prediction(blend_inputs: Sequence[BlendInput]) -> PredictionResult:
    """Predict the experience profile of a weighted blend.

    Args:
        blend_inputs: Ordered ``(strain, weight)`` pairs.  Weights must sum
            to 100 within ±0.5.

    Returns:
        A frozen ``PredictionResult``.

    Raises:
        EmptyBlendError: If ``blend_inputs`` is empty.
        WeightSumMismatchError: If the weights do not sum to ~100.
    """
    _validate(blend_inputs)

    blended_thc, blended_cbd = blend_cannabinoids(blend_inputs)
    compound_scores = score_compound_presence(blend_inputs)

    thc_factor = clamp(blended_thc / CANNABINOID_SATURATION_PCT, 0.0, 1.0)
    cbd_factor = clamp(blended_cbd / CANNABINOID_SATURATION_PCT, 0.0, 1.0)
    tag_scores = score_tags(compound_scores, thc_factor, cbd_factor)

    primary_label, secondary_tags = select_labels(rank_tags(tag_scores))

    raw_intensity = intensity_raw(blended_thc, blended_cbd)
    intensity = int(clamp(round_half_away(raw_intensity), MIN_INTENSITY, MAX_INTENSITY))

    explanation = build_explanation(
        compound_scores=compound_scores,
        blended_thc=blended_thc,
        blended_cbd=blended_cbd,
        thc_factor=thc_factor,
        cbd_factor=cbd_factor,
        raw_intensity=raw_intensity,
        intensity=intensity,
    )

    log.debug(
        "Prediction for %d strain(s): THC=%.2f CBD=%.2f primary=%s intensity=%d",
        len(blend_inputs), blended_thc, blended_cbd, primary_label, intensity,
    )

    return PredictionResult(
        blended_thc=blended_thc,
        blended_cbd=blended_cbd,
        compound_scores=compound_scores,
        tag_scores=tag_scores,
        primary_label=primary_label,
        secondary_tags=secondary_tags,
        intensity=intensity,
        explanation=tuple(explanation),
    )


def _validate(blend_inputs: Sequence[BlendInput]) -> None:
    if not blend_inputs:
        raise EmptyBlendError()
    weight_sum = sum(bi.weight for bi in blend_inputs)
    if abs(weight_sum - WEIGHT_TOTAL) > WEIGHT_TOLERANCE:
        raise WeightSumMismatchError(weight_sum)


def blend_cannabinoids(blend_inputs: Sequence[BlendInput]) -> tuple[float, float]:
    """Weighted THC and CBD percentages, each rounded to 2 decimals.

    A convex combination of the inputs: bounded by the min/max of the
    contributing strains' values.
    """
    thc = 0.0
    cbd = 0.0
    for bi in blend_inputs:
        w = bi.weight / WEIGHT_TOTAL
        thc += bi.strain.thc_percent * w
        cbd += bi.strain.cbd_percent * w
    return round2(thc), round2(cbd)


def score_compound_presence(blend_inputs: Sequence[BlendInput]) -> dict[str, float]:
    """Presence score per compound name.

    Each strain's dominant compounds hold an equal one-third share of that
    strain's weight fraction.  Names are trimmed; blank names are skipped.
    Keys are exact and case-sensitive.
    """
    scores: dict[str, float] = {}
    for bi in blend_inputs:
        share = (1.0 / 3.0) * (bi.weight / WEIGHT_TOTAL)
        for raw_name in bi.strain.dominant_compounds:
            name = raw_name.strip()
            if not name:
                continue
            scores[name] = scores.get(name, 0.0) + share
    return scores


def score_tags(
    compound_scores: dict[str, float],
    thc_factor:      float,
    cbd_factor:      float,
) -> dict[ExperienceTag, float]:
    """Additive score per experience tag.  No normalisation."""
    tag_scores: dict[ExperienceTag, float] = {tag: 0.0 for tag in ExperienceTag}

    for name, presence in compound_scores.items():
        if presence == 0:
            continue
        effects = compound_effects(name)
        if effects is None:
            continue  # custom compound: presence only
        for tag, weight in effects.items():
            tag_scores[tag] += presence * weight

    for tag, weight in THC_TAG_INFLUENCE.items():
        tag_scores[tag] += thc_factor * weight

    for tag, weight in CBD_TAG_INFLUENCE.items():
        tag_scores[tag] += cbd_factor * weight

    return tag_scores


def intensity_raw(blended_thc: float, blended_cbd: float) -> float:
    """Pre-rounding, pre-clamp intensity."""
    return (blended_thc / CANNABINOID_SATURATION_PCT) * 10 - blended_cbd * CBD_INTENSITY_DAMPING
