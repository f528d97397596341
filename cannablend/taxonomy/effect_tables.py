"""
Static effect tables consumed by the prediction engine.

``COMPOUND_EFFECTS`` maps each standard compound to weighted experience tags.
Weights are relative (0–1] and do NOT sum to 1 per compound.  These are
heuristic guesses informed by published terpene summaries, not medical claims.

``THC_TAG_INFLUENCE`` / ``CBD_TAG_INFLUENCE`` are additive tag weights applied
scaled by ``clamp(blended_pct / 40, 0, 1)``.

All tables are read-only ``MappingProxyType`` views and are safe to share
between concurrent callers.  Dict insertion order is meaningful: within a
compound it is the tie-break order for "top effects" in the explanation, and
for the influence tables it is the order the tags are listed in the trace.

Integrity contract (see ``tests/test_taxonomy/test_effect_tables.py``):
  - Every ``Compound`` has an entry in ``COMPOUND_EFFECTS``.
  - Every weight is in (0, 1].
  - Every key of every table is an ``ExperienceTag``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from cannablend.taxonomy.experience_taxonomy import Compound, ExperienceTag

_T = ExperienceTag

EffectMap = Mapping[ExperienceTag, float]


def _frozen(effects: dict[ExperienceTag, float]) -> EffectMap:
    return MappingProxyType(dict(effects))


COMPOUND_EFFECTS: Mapping[str, EffectMap] = MappingProxyType({
    Compound.MYRCENE.value:       _frozen({_T.RELAXED: 0.9, _T.SLEEPY: 0.7, _T.BODY_HEAVY: 0.6}),
    Compound.LIMONENE.value:      _frozen({_T.UPLIFTED: 0.9, _T.SOCIAL: 0.5, _T.CREATIVE: 0.4}),
    Compound.CARYOPHYLLENE.value: _frozen({_T.RELAXED: 0.5, _T.BODY_HEAVY: 0.4, _T.FOCUSED: 0.3}),
    Compound.LINALOOL.value:      _frozen({_T.RELAXED: 0.8, _T.SLEEPY: 0.6, _T.CLEAR_HEADED: 0.2}),
    Compound.PINENE.value:        _frozen({_T.FOCUSED: 0.8, _T.CLEAR_HEADED: 0.7, _T.UPLIFTED: 0.3}),
    Compound.HUMULENE.value:      _frozen({_T.RELAXED: 0.4, _T.BODY_HEAVY: 0.3, _T.FOCUSED: 0.2}),
    Compound.TERPINOLENE.value:   _frozen({_T.UPLIFTED: 0.7, _T.CREATIVE: 0.6, _T.SOCIAL: 0.4}),
    Compound.OCIMENE.value:       _frozen({_T.UPLIFTED: 0.5, _T.SOCIAL: 0.4, _T.CREATIVE: 0.3}),
    Compound.BISABOLOL.value:     _frozen({_T.RELAXED: 0.6, _T.SLEEPY: 0.4, _T.CLEAR_HEADED: 0.3}),
    Compound.EUCALYPTOL.value:    _frozen({_T.CLEAR_HEADED: 0.8, _T.FOCUSED: 0.5, _T.UPLIFTED: 0.3}),
    Compound.NEROLIDOL.value:     _frozen({_T.RELAXED: 0.7, _T.SLEEPY: 0.5, _T.BODY_HEAVY: 0.3}),
    Compound.GUAIOL.value:        _frozen({_T.RELAXED: 0.5, _T.CLEAR_HEADED: 0.4, _T.BODY_HEAVY: 0.2}),
    Compound.CAMPHENE.value:      _frozen({_T.FOCUSED: 0.4, _T.CLEAR_HEADED: 0.5, _T.BODY_HEAVY: 0.2}),
    Compound.GERANIOL.value:      _frozen({_T.RELAXED: 0.5, _T.UPLIFTED: 0.4, _T.SOCIAL: 0.3}),
    Compound.VALENCENE.value:     _frozen({_T.UPLIFTED: 0.6, _T.CREATIVE: 0.4, _T.SOCIAL: 0.3}),
})

THC_TAG_INFLUENCE: EffectMap = _frozen({
    _T.UPLIFTED:   0.3,
    _T.CREATIVE:   0.2,
    _T.BODY_HEAVY: 0.4,
    _T.SOCIAL:     0.1,
})

CBD_TAG_INFLUENCE: EffectMap = _frozen({
    _T.RELAXED:      0.4,
    _T.CLEAR_HEADED: 0.5,
    _T.FOCUSED:      0.2,
})

# Blended percentage at which a cannabinoid's influence saturates.
CANNABINOID_SATURATION_PCT = 40.0


def compound_effects(name: str) -> EffectMap | None:
    """Return the effect mapping for ``name``, or ``None`` if it is unknown.

    Lookup is exact and case-sensitive.  ``None`` marks a custom compound that
    contributes presence but no tag score.
    """
    return COMPOUND_EFFECTS.get(name)


def top_effects(effects: EffectMap, n: int = 2) -> list[ExperienceTag]:
    """The ``n`` highest-weighted tags of one compound, ties in table order."""
    ranked = sorted(effects.items(), key=lambda kv: -kv[1])
    return [tag for tag, _ in ranked[:n]]
