"""
ASCII terminal formatters for CLI commands.

All formatters accept domain objects and return plain multi-line strings
suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Intensity bar
-------------
``format_prediction()`` renders intensity as a ten-slot bar so it reads at a
glance::

    Intensity:  [######----]  6/10
"""

from __future__ import annotations

from collections.abc import Sequence

from cannablend.engine.rounding import format_number
from cannablend.models.prediction import MAX_INTENSITY, BlendInput, PredictionResult
from cannablend.models.strain import Strain
from cannablend.taxonomy.compound_info import COMPOUND_INFO
from cannablend.taxonomy.effect_tables import COMPOUND_EFFECTS, top_effects
from cannablend.taxonomy.experience_taxonomy import is_standard_compound

DISCLAIMER = (
    "Heuristic estimate only. Effects vary per individual; this is not medical advice."
)


def format_intensity_bar(intensity: int) -> str:
    filled = max(0, min(MAX_INTENSITY, intensity))
    return f"[{'#' * filled}{'-' * (MAX_INTENSITY - filled)}]  {intensity}/{MAX_INTENSITY}"


# ── Prediction ────────────────────────────────────────────────────────────────


def format_prediction(result: PredictionResult, blend: Sequence[BlendInput]) -> str:
    """Format a prediction with its blend, labels, compound presence and trace.

    Args:
        result: Output of ``compute_prediction()``.
        blend:  The inputs the prediction was computed from (for the header).

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Blend ===")
    for bi in blend:
        lines.append(
            f"  {format_number(bi.weight):>5}%  {bi.strain.name:<28}  "
            f"THC {format_number(bi.strain.thc_percent):>5}%  "
            f"CBD {format_number(bi.strain.cbd_percent):>5}%"
        )

    lines.append("")
    lines.append("=== Predicted Experience ===")
    lines.append(f"  Primary:    {result.primary_label}")
    lines.append(f"  Secondary:  {', '.join(result.secondary_tags)}")
    lines.append(f"  Intensity:  {format_intensity_bar(result.intensity)}")
    lines.append(
        f"  Blended:    THC {format_number(result.blended_thc)}%  "
        f"CBD {format_number(result.blended_cbd)}%"
    )

    lines.append("")
    lines.append("  Compound presence:")
    for name, presence in sorted(result.compound_scores.items(), key=lambda kv: -kv[1]):
        marker = "" if is_standard_compound(name) else "  (custom)"
        lines.append(f"    {name:<16} {presence:>7.1%}{marker}")

    lines.append("")
    lines.append("  How this was derived:")
    for line in result.explanation:
        lines.append(f"    - {line}")

    lines.append("")
    lines.append(f"  {DISCLAIMER}")
    return "\n".join(lines)


# ── Catalog ───────────────────────────────────────────────────────────────────


def format_strain_table(strains: Sequence[Strain]) -> str:
    """Format the strain catalog as an ASCII table."""
    lines: list[str] = []
    lines.append("")
    lines.append("=== Strain Catalog ===")

    if not strains:
        lines.append("")
        lines.append("  (no strains in catalog)")
        return "\n".join(lines)

    header = (
        f"  {'ID':<10}  {'Name':<22}  {'THC':>6}  {'CBD':>6}  {'Dominant compounds':<40}"
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for s in strains:
        compounds = ", ".join(s.dominant_compounds)
        lines.append(
            f"  {s.strain_id[:10]:<10}  {s.name[:22]:<22}  "
            f"{format_number(s.thc_percent) + '%':>6}  "
            f"{format_number(s.cbd_percent) + '%':>6}  {compounds[:40]:<40}"
        )
    return "\n".join(lines)


def format_compound_table() -> str:
    """Format the standard compound reference table with top effects."""
    lines: list[str] = []
    lines.append("")
    lines.append("=== Compound Reference ===")
    header = f"  {'Compound':<14}  {'Aroma':<30}  {'Leans toward':<26}  Found in"
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for name, info in COMPOUND_INFO.items():
        leans = ", ".join(top_effects(COMPOUND_EFFECTS[name], 2))
        lines.append(
            f"  {name:<14}  {info.aroma[:30]:<30}  {leans:<26}  {', '.join(info.found_in)}"
        )
    return "\n".join(lines)
