"""
Shared pytest fixtures for the cannablend test suite.

Provides:
  - ``make_strain``: factory for valid ``Strain`` records with sensible defaults.
  - ``seed_catalog_path``: path to the committed seed strains JSON.
  - Sample strains used across engine, reporting and CLI tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from cannablend.models.prediction import BlendInput
from cannablend.models.strain import Strain

PROJECT_ROOT = Path(__file__).resolve().parent.parent


# ── Factories ─────────────────────────────────────────────────────────────────

_counter = {"n": 0}


def build_strain(
    thc: float = 15.0,
    cbd: float = 0.0,
    compounds: tuple[str, str, str] = ("Myrcene", "Limonene", "Pinene"),
    name: str = "Test Strain",
    strain_id: str | None = None,
) -> Strain:
    if strain_id is None:
        _counter["n"] += 1
        strain_id = f"test-{_counter['n']:03d}"
    return Strain(
        strain_id=strain_id,
        name=name,
        thc_percent=thc,
        cbd_percent=cbd,
        dominant_compounds=compounds,
    )


def solo(strain: Strain) -> list[BlendInput]:
    """A single-strain blend at weight 100."""
    return [BlendInput(strain=strain, weight=100)]


@pytest.fixture
def make_strain() -> Callable[..., Strain]:
    """Factory fixture returning valid ``Strain`` objects."""
    return build_strain


@pytest.fixture
def seed_catalog_path() -> Path:
    return PROJECT_ROOT / "config" / "strains" / "seed_strains.json"


# ── Sample strains ────────────────────────────────────────────────────────────

@pytest.fixture
def high_thc_strain() -> Strain:
    """THC 35 / CBD 0, citrus-spice compounds."""
    return build_strain(
        thc=35, cbd=0, compounds=("Limonene", "Caryophyllene", "Humulene"),
        name="Rocket Fuel", strain_id="hi-thc",
    )


@pytest.fixture
def high_cbd_strain() -> Strain:
    """THC 1 / CBD 20, calming compounds."""
    return build_strain(
        thc=1, cbd=20, compounds=("Myrcene", "Pinene", "Caryophyllene"),
        name="Still Water", strain_id="hi-cbd",
    )
