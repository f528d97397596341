"""
Experience tag ranking and label selection.

Ranking rule
------------
Tags are sorted by score descending.  Equal scores fall back to the canonical
``ExperienceTag`` declaration order (``TAG_ORDER``):

    Relaxed, Uplifted, Focused, Sleepy, Creative, Social, Body-heavy, Clear-headed

Score ties are routine with sparse inputs (e.g. a zero-THC, zero-CBD blend of
three compounds leaves several tags at exactly 0.0).

Selection
---------
Fixed-width top-k: position 1 is the primary label, positions 2-4 are the
secondary tags.  Always exactly three secondaries, regardless of how small or
tied their scores are.  No threshold filter.
"""

from __future__ import annotations

from collections.abc import Mapping

from cannablend.models.prediction import SECONDARY_TAG_COUNT
from cannablend.taxonomy.experience_taxonomy import TAG_ORDER, ExperienceTag


def tag_rank_key(item: tuple[ExperienceTag, float]) -> tuple[float, int]:
    """Sort key for ``(tag, score)`` pairs: score desc, then canonical order."""
    tag, score = item
    return (-score, TAG_ORDER[tag])


def rank_tags(tag_scores: Mapping[ExperienceTag, float]) -> list[tuple[ExperienceTag, float]]:
    """Return ``(tag, score)`` pairs best-first.

    Tags missing from ``tag_scores`` are ranked with a score of 0.0 so the
    result always covers the full closed tag set.
    """
    full = {tag: tag_scores.get(tag, 0.0) for tag in ExperienceTag}
    return sorted(full.items(), key=tag_rank_key)


def select_labels(
    ranked: list[tuple[ExperienceTag, float]],
) -> tuple[ExperienceTag, tuple[ExperienceTag, ...]]:
    """Split a ranked tag list into ``(primary_label, secondary_tags)``."""
    primary = ranked[0][0]
    secondary = tuple(tag for tag, _ in ranked[1 : 1 + SECONDARY_TAG_COUNT])
    return primary, secondary
