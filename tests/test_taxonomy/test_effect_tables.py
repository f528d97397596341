"""Tests for the experience taxonomy and effect table integrity contract."""

from __future__ import annotations

import pytest

from cannablend.taxonomy.compound_info import COMPOUND_INFO, get_compound_info
from cannablend.taxonomy.effect_tables import (
    CBD_TAG_INFLUENCE,
    COMPOUND_EFFECTS,
    THC_TAG_INFLUENCE,
    compound_effects,
    top_effects,
)
from cannablend.taxonomy.experience_taxonomy import (
    STANDARD_COMPOUNDS,
    Compound,
    ExperienceTag,
    is_standard_compound,
)


class TestExperienceTag:
    def test_closed_set_of_eight(self):
        assert [t.value for t in ExperienceTag] == [
            "Relaxed", "Uplifted", "Focused", "Sleepy",
            "Creative", "Social", "Body-heavy", "Clear-headed",
        ]

    def test_tags_are_strings(self):
        assert ExperienceTag.BODY_HEAVY == "Body-heavy"


class TestCompoundEffects:
    def test_every_compound_has_effects(self):
        missing = {c.value for c in Compound} - set(COMPOUND_EFFECTS)
        assert not missing, f"Compounds without effects: {missing}"

    def test_no_effects_for_unlisted_compounds(self):
        assert set(COMPOUND_EFFECTS) == STANDARD_COMPOUNDS

    def test_weights_in_unit_interval(self):
        for name, effects in COMPOUND_EFFECTS.items():
            for tag, weight in effects.items():
                assert 0.0 < weight <= 1.0, f"{name}/{tag} = {weight}"

    def test_all_keys_are_experience_tags(self):
        tables = [*COMPOUND_EFFECTS.values(), THC_TAG_INFLUENCE, CBD_TAG_INFLUENCE]
        for table in tables:
            for tag in table:
                assert isinstance(tag, ExperienceTag)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            COMPOUND_EFFECTS["Skunkberry"] = {}  # type: ignore[index]
        with pytest.raises(TypeError):
            THC_TAG_INFLUENCE[ExperienceTag.SLEEPY] = 1.0  # type: ignore[index]
        with pytest.raises(TypeError):
            COMPOUND_EFFECTS["Myrcene"][ExperienceTag.SLEEPY] = 0.1  # type: ignore[index]

    def test_unknown_compound_lookup_is_none(self):
        assert compound_effects("Skunkberry") is None
        assert compound_effects("myrcene") is None
        assert compound_effects("Myrcene") is not None


class TestTopEffects:
    def test_ranked_by_weight(self):
        assert top_effects(COMPOUND_EFFECTS["Camphene"]) == [
            ExperienceTag.CLEAR_HEADED, ExperienceTag.FOCUSED,
        ]

    def test_ties_keep_table_order(self):
        effects = {
            ExperienceTag.SOCIAL: 0.5, ExperienceTag.RELAXED: 0.5, ExperienceTag.FOCUSED: 0.1,
        }
        assert top_effects(effects) == [ExperienceTag.SOCIAL, ExperienceTag.RELAXED]


class TestCompoundInfo:
    def test_covers_all_standard_compounds(self):
        assert set(COMPOUND_INFO) == STANDARD_COMPOUNDS

    def test_lookup_trims(self):
        info = get_compound_info("  Pinene ")
        assert info is not None
        assert "Rosemary" in info.found_in

    def test_custom_compound_has_no_info(self):
        assert get_compound_info("Skunkberry") is None

    def test_is_standard_compound(self):
        assert is_standard_compound(" Linalool ")
        assert not is_standard_compound("linalool")
