"""
Strain and blend-entry models.

``Strain`` is a named cannabinoid / aromatic-compound profile.  The model
applies the same validation the strain editor does: a non-empty name, THC and
CBD in [0, 40], and exactly three distinct non-empty dominant compounds.  The
prediction engine trusts these invariants and does not re-check them.

``BlendEntry`` references one strain by id with an integer weight.  It is
ephemeral: built per prediction request and never persisted.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

MAX_CANNABINOID_PCT = 40.0
COMPOUNDS_PER_STRAIN = 3


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class Strain(BaseModel):
    """A strain record.

    Attributes:
        strain_id: Stable identifier used by blend entries (e.g. ``"seed-001"``).
        name: Display name.
        thc_percent: THC percentage by mass, 0–40.
        cbd_percent: CBD percentage by mass, 0–40.
        dominant_compounds: Exactly three distinct compound names.  Names may
            be standard (``Compound``) or custom.
        notes: Optional free-form annotation.
        created_at: UTC creation timestamp.
        updated_at: UTC last-update timestamp.
    """

    model_config = ConfigDict(frozen=True)

    strain_id: str
    name: str
    thc_percent: float
    cbd_percent: float
    dominant_compounds: tuple[str, str, str]
    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @field_validator("strain_id")
    @classmethod
    def validate_strain_id(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("strain_id must not be empty.")
        return v.strip()

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name is required.")
        return v.strip()

    @field_validator("thc_percent", "cbd_percent")
    @classmethod
    def validate_cannabinoid_range(cls, v: float, info: ValidationInfo) -> float:
        if not 0.0 <= v <= MAX_CANNABINOID_PCT:
            label = "THC" if info.field_name == "thc_percent" else "CBD"
            raise ValueError(
                f"{label}% must be a number between 0 and {MAX_CANNABINOID_PCT:g}, got {v}."
            )
        return v

    @field_validator("dominant_compounds", mode="before")
    @classmethod
    def validate_compounds(cls, v):
        if isinstance(v, str) or not isinstance(v, (list, tuple)):
            raise ValueError("dominant_compounds must be a list of compound names.")
        if any(not isinstance(n, str) for n in v):
            raise ValueError(f"Compound names must be strings, got {list(v)!r}.")
        names = [n.strip() for n in v]
        filled = [n for n in names if n]
        if len(filled) != COMPOUNDS_PER_STRAIN:
            raise ValueError(
                f"Exactly {COMPOUNDS_PER_STRAIN} dominant compounds are required, "
                f"got {len(filled)}."
            )
        if len({n.lower() for n in filled}) != len(filled):
            raise ValueError(f"Dominant compounds must be unique, got {filled}.")
        return tuple(filled)

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class BlendEntry(BaseModel):
    """One strain's share of a blend.

    Attributes:
        strain_id: Id of the referenced ``Strain``.
        weight: Integer share in [0, 100].  Entries of a complete blend sum
            to 100.
    """

    model_config = ConfigDict(frozen=True)

    strain_id: str
    weight: int = 0

    @field_validator("weight")
    @classmethod
    def validate_weight_range(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError(f"weight must be in [0, 100], got {v}.")
        return v
