"""
Tests for the explanation trace.

The wording is displayed verbatim by callers, and every embedded number must
match the values the engine computed.
"""

from __future__ import annotations

from cannablend.engine.explain import build_explanation, compound_line, top_compounds
from cannablend.engine.predictor import compute_prediction
from cannablend.models.prediction import BlendInput
from tests.conftest import build_strain, solo


class TestTopCompounds:
    def test_highest_presence_first_ties_in_appearance_order(self):
        scores = {"Myrcene": 1 / 6, "Limonene": 1 / 6, "Pinene": 1 / 3, "Bisabolol": 1 / 6}
        assert [n for n, _ in top_compounds(scores)] == ["Pinene", "Myrcene", "Limonene"]

    def test_fewer_than_three(self):
        assert top_compounds({"Pinene": 1.0}) == [("Pinene", 1.0)]


class TestCompoundLine:
    def test_known_compound_lists_top_two_effects(self):
        assert compound_line("Pinene", 1 / 3) == (
            "Pinene (33.33% presence) -> contributes Focused, Clear-headed"
        )

    def test_effects_ranked_by_weight_not_table_order(self):
        # Camphene lists Focused 0.4 before Clear-headed 0.5
        assert compound_line("Camphene", 0.5).endswith("contributes Clear-headed, Focused")

    def test_unknown_compound(self):
        assert compound_line("Skunkberry", 1 / 6) == (
            "Skunkberry (16.67% presence) -> no known effect mapping (custom compound)"
        )


class TestBuildExplanation:
    def test_high_thc_trace(self, high_thc_strain):
        result = compute_prediction(solo(high_thc_strain))
        assert list(result.explanation) == [
            "Limonene (33.33% presence) -> contributes Uplifted, Social",
            "Caryophyllene (33.33% presence) -> contributes Relaxed, Body-heavy",
            "Humulene (33.33% presence) -> contributes Relaxed, Body-heavy",
            "THC 35% -> amplifies Uplifted, Creative, Body-heavy, Social (factor: 0.88)",
            "Intensity formula: (THC 35% / 40) x 10 - (CBD 0% x 0.15) = 8.75 "
            "-> clamped to 9/10",
        ]

    def test_cbd_line_only_when_cbd_present(self, high_thc_strain, high_cbd_strain):
        no_cbd = compute_prediction(solo(high_thc_strain)).explanation
        with_cbd = compute_prediction(solo(high_cbd_strain)).explanation
        assert not any(line.startswith("CBD") for line in no_cbd)
        assert any(line.startswith("CBD 20% ") for line in with_cbd)

    def test_two_strain_trace_values(self):
        s1 = build_strain(thc=20, cbd=0, compounds=("Myrcene", "Limonene", "Pinene"))
        s2 = build_strain(thc=0, cbd=20, compounds=("Pinene", "Caryophyllene", "Bisabolol"))
        result = compute_prediction([BlendInput(s1, 50), BlendInput(s2, 50)])
        assert list(result.explanation) == [
            "Pinene (33.33% presence) -> contributes Focused, Clear-headed",
            "Myrcene (16.67% presence) -> contributes Relaxed, Sleepy",
            "Limonene (16.67% presence) -> contributes Uplifted, Social",
            "THC 10% -> amplifies Uplifted, Creative, Body-heavy, Social (factor: 0.25)",
            "CBD 10% -> amplifies Relaxed, Clear-headed, Focused (factor: 0.25)",
            "Intensity formula: (THC 10% / 40) x 10 - (CBD 10% x 0.15) = 1 "
            "-> clamped to 1/10",
        ]

    def test_negative_raw_intensity_shown_before_clamp(self):
        lines = build_explanation(
            compound_scores={"Pinene": 1.0},
            blended_thc=1.0,
            blended_cbd=20.0,
            thc_factor=0.025,
            cbd_factor=0.5,
            raw_intensity=-2.75,
            intensity=1,
        )
        assert lines[-1].endswith("= -2.75 -> clamped to 1/10")
        assert "(factor: 0.03)" in lines[1]
