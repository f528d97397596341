"""
Prediction engine input and output models.

``BlendInput`` is one resolved ``(strain, weight)`` pair, which is what the
engine consumes after the resolver has joined ``BlendEntry`` ids against a
catalog.

``PredictionResult`` is the engine's sole output.  It is frozen, score
mappings included: once produced it belongs to the caller, who may display
it, serialise it with ``model_dump_json()``, or discard it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from cannablend.models.strain import Strain
from cannablend.taxonomy.experience_taxonomy import ExperienceTag

MIN_INTENSITY = 1
MAX_INTENSITY = 10
SECONDARY_TAG_COUNT = 3


@dataclass(frozen=True)
class BlendInput:
    """One strain and its share of the blend.

    Attributes:
        strain: The resolved strain record.
        weight: Share in [0, 100].  Int or float; the engine only requires the
            list-wide sum to be within 0.5 of 100.
    """

    strain: Strain
    weight: float


class PredictionResult(BaseModel):
    """Predicted experience profile for a blend.

    Attributes:
        blended_thc: Weighted THC %, rounded to 2 decimals.
        blended_cbd: Weighted CBD %, rounded to 2 decimals.
        compound_scores: Compound name -> presence score (unnormalised; sums
            to ~1 across a valid blend).  Insertion order follows first
            appearance in the blend.
        tag_scores: Every ``ExperienceTag`` -> raw accumulated score, in
            canonical tag order.
        primary_label: Highest-scoring tag.
        secondary_tags: The next three tags by score.
        intensity: Predicted strength, integer in [1, 10].
        explanation: Human-readable derivation lines.

    Both score mappings are stored as read-only ``MappingProxyType`` views
    and serialise as plain JSON objects.
    """

    model_config = ConfigDict(frozen=True)

    blended_thc: float
    blended_cbd: float
    compound_scores: Mapping[str, float]
    tag_scores: Mapping[ExperienceTag, float]
    primary_label: ExperienceTag
    secondary_tags: tuple[ExperienceTag, ...]
    intensity: int
    explanation: tuple[str, ...]

    @field_validator("compound_scores", "tag_scores")
    @classmethod
    def freeze_scores(cls, v: Mapping) -> Mapping:
        return MappingProxyType(dict(v))

    @field_serializer("compound_scores", "tag_scores")
    def serialize_scores(self, v: Mapping) -> dict:
        return dict(v)

    @field_validator("secondary_tags")
    @classmethod
    def validate_secondary_count(
        cls, v: tuple[ExperienceTag, ...]
    ) -> tuple[ExperienceTag, ...]:
        if len(v) != SECONDARY_TAG_COUNT:
            raise ValueError(
                f"secondary_tags must hold exactly {SECONDARY_TAG_COUNT} tags, got {len(v)}."
            )
        return v

    @field_validator("intensity")
    @classmethod
    def validate_intensity_range(cls, v: int) -> int:
        if not MIN_INTENSITY <= v <= MAX_INTENSITY:
            raise ValueError(
                f"intensity must be in [{MIN_INTENSITY}, {MAX_INTENSITY}], got {v}."
            )
        return v

    @property
    def top_tags(self) -> tuple[ExperienceTag, ...]:
        """Primary label followed by the secondary tags."""
        return (self.primary_label, *self.secondary_tags)
