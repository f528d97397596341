"""
Experience and compound taxonomy for blend predictions.

Two closed vocabularies:
  - ``ExperienceTag``: the eight predicted-effect labels the engine can emit.
  - ``Compound``     : the fifteen standard aromatic compounds (terpenes) with
    known effect mappings.

Declaration order of ``ExperienceTag`` is significant: it is the canonical
tie-break order used when ranking tags with equal scores.  ``TAG_ORDER`` is
derived from it and must not be re-sorted.

Compound names on a ``Strain`` are free text.  A name that is not a
``Compound`` value is a *custom* compound: it still counts toward presence
scores but has no effect mapping.

This module has NO imports from any other ``cannablend`` package.
"""

from enum import StrEnum


class ExperienceTag(StrEnum):
    """Predicted experience label.  The set is closed."""

    RELAXED = "Relaxed"
    """Calm, physically and mentally at ease."""

    UPLIFTED = "Uplifted"
    """Elevated mood, energetic."""

    FOCUSED = "Focused"
    """Alert, attentive, task-oriented."""

    SLEEPY = "Sleepy"
    """Sedated, drowsy."""

    CREATIVE = "Creative"
    """Divergent thinking, imaginative."""

    SOCIAL = "Social"
    """Talkative, outgoing."""

    BODY_HEAVY = "Body-heavy"
    """Pronounced physical heaviness."""

    CLEAR_HEADED = "Clear-headed"
    """Lucid, minimal mental fog."""


# Canonical ranking order: tag -> position.  Lower wins a score tie.
TAG_ORDER: dict[ExperienceTag, int] = {tag: i for i, tag in enumerate(ExperienceTag)}


class Compound(StrEnum):
    """Standard aromatic compounds with a known effect mapping."""

    MYRCENE = "Myrcene"
    LIMONENE = "Limonene"
    CARYOPHYLLENE = "Caryophyllene"
    LINALOOL = "Linalool"
    PINENE = "Pinene"
    HUMULENE = "Humulene"
    TERPINOLENE = "Terpinolene"
    OCIMENE = "Ocimene"
    BISABOLOL = "Bisabolol"
    EUCALYPTOL = "Eucalyptol"
    NEROLIDOL = "Nerolidol"
    GUAIOL = "Guaiol"
    CAMPHENE = "Camphene"
    GERANIOL = "Geraniol"
    VALENCENE = "Valencene"


STANDARD_COMPOUNDS: frozenset[str] = frozenset(c.value for c in Compound)


def is_standard_compound(name: str) -> bool:
    """True if ``name`` (after trimming) is one of the standard compounds.

    Matching is exact and case-sensitive, the same rule the engine uses.
    """
    return name.strip() in STANDARD_COMPOUNDS
