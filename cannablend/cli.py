"""
cannablend CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute action (load catalog, run prediction, etc.).
  5. Report result to stdout.

Install and run::

    pip install -e .
    cannablend --help
    cannablend validate-config
    cannablend strains
    cannablend compounds
    cannablend predict -s seed-001 -s seed-006
    cannablend predict -s seed-001:60 -s seed-006:30 -s seed-009:10 --json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="cannablend",
    help="Blend strains and predict a heuristic experience profile.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from cannablend.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from cannablend.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_catalog_or_exit(config, strains_file: Optional[str]):
    """Load the strain catalog named by --strains-file or config."""
    from pydantic import ValidationError

    from cannablend.catalog.seed_loader import load_strain_catalog
    from cannablend.config import resolve_path

    path = Path(strains_file) if strains_file else resolve_path(config.catalog.strains_file)
    try:
        return load_strain_catalog(path)
    except (FileNotFoundError, ValueError, ValidationError) as exc:
        typer.echo(f"[ERROR] Could not load strain catalog: {exc}", err=True)
        raise typer.Exit(code=1)


def _parse_strain_specs(specs: list[str], max_strains: int):
    """Turn ``ID`` / ``ID:WEIGHT`` specs into BlendEntry objects.

    All-unweighted specs are split evenly with the blend builder.
    Raises ValueError on malformed or mixed specs.
    """
    from cannablend.blend.builder import add_strain
    from cannablend.models.strain import BlendEntry

    if len(specs) > max_strains:
        raise ValueError(
            f"A blend holds at most {max_strains} strains, got {len(specs)}."
        )

    parsed: list[tuple[str, Optional[str]]] = []
    for spec in specs:
        strain_id, sep, weight = spec.partition(":")
        if not strain_id.strip() or (sep and not weight.strip()):
            raise ValueError(f"Malformed strain spec '{spec}'. Use ID or ID:WEIGHT.")
        parsed.append((strain_id.strip(), weight.strip() if sep else None))

    if len({sid for sid, _ in parsed}) != len(parsed):
        raise ValueError("Each strain may appear in a blend only once.")

    weighted = [w is not None for _, w in parsed]
    if any(weighted) and not all(weighted):
        raise ValueError("Give a weight for every strain or for none of them.")

    if not any(weighted):
        entries: list = []
        for sid, _ in parsed:
            entries = add_strain(entries, sid, max_strains=max_strains)
        return entries

    entries = []
    for sid, w in parsed:
        try:
            weight = int(w)
        except ValueError:
            raise ValueError(f"Weight for '{sid}' must be an integer, got '{w}'.") from None
        entries.append(BlendEntry(strain_id=sid, weight=weight))
    return entries


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Strains file:  {config.catalog.strains_file}")
    typer.echo(f"  Max strains:   {config.blend.max_strains}")
    typer.echo(f"  Log level:     {config.logging.level}")
    typer.echo(f"  Debug mode:    {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")


@app.command("strains")
def list_strains(
    strains_file: Optional[str] = typer.Option(
        None, "--strains-file", help="Override the strain catalog JSON path.",
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """List the strains available for blending."""
    from cannablend.reporting.formatters import format_strain_table

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    strains = _load_catalog_or_exit(config, strains_file)
    typer.echo(format_strain_table(strains))


@app.command("compounds")
def list_compounds() -> None:
    """List the standard aromatic compounds and the effects they lean toward."""
    from cannablend.reporting.formatters import format_compound_table

    typer.echo(format_compound_table())


@app.command("predict")
def predict(
    strain_specs: list[str] = typer.Option(
        ...,
        "--strain",
        "-s",
        help="Strain to blend as ID or ID:WEIGHT. Repeat for each strain.",
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the prediction as JSON.",
    ),
    strains_file: Optional[str] = typer.Option(
        None, "--strains-file", help="Override the strain catalog JSON path.",
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Predict the experience profile of a blend.

    Weights default to an even split.  Explicit weights must total 100.
    """
    from cannablend.engine.predictor import compute_prediction
    from cannablend.engine.resolver import resolve_blend_inputs
    from cannablend.reporting.formatters import format_prediction

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    strains = _load_catalog_or_exit(config, strains_file)

    try:
        entries = _parse_strain_specs(strain_specs, config.blend.max_strains)
        blend = resolve_blend_inputs(entries, strains)
        result = compute_prediction(blend)
    except ValueError as exc:  # BlendError and pydantic ValidationError included
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        typer.echo(format_prediction(result, blend))


if __name__ == "__main__":
    app()
