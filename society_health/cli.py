"""
Society Health — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Score snapshots.
  5. Report result to stdout (ASCII report or JSON).

Install and run::

    pip install -e .
    society-health --help
    society-health validate-config
    society-health sample
    society-health score data/snapshots/green-acres.json --previous 78
    society-health score data/snapshots/portfolio.csv --output data/outputs/health.csv
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="society-health",
    help="Housing society health scoring — score metric snapshots from files.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from society_health.config import load_config

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
    from society_health.utils.logging import configure_logging
    configure_logging(config.logging)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("score")
def score(
    snapshot_file: str = typer.Argument(
        ...,
        help="Snapshot file (.json object/array or .csv with one society per row).",
    ),
    previous: Optional[float] = typer.Option(
        None,
        "--previous",
        help="Previous overall score for the trend (applies to every snapshot).",
    ),
    critical_override: Optional[float] = typer.Option(
        None,
        "--critical-override",
        help="Lowered critical boundary (applies to every snapshot).",
    ),
    period: Optional[str] = typer.Option(
        None,
        "--period",
        help="Trend period label (default: scoring.default_period).",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write results to this file (.json or .csv).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print results as JSON instead of the ASCII report.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Score one society snapshot or a batch of snapshots.

    \b
      .json — a metrics object, an entry object
              {"society_id", "metrics", "previous_overall"}, or an array of either.
      .csv  — header row of metric names, optional society_id /
              previous_overall / critical_override columns.
    """
    from society_health.ingestion.snapshot_loader import load_snapshots
    from society_health.reporting.export import (
        export_to_csv,
        export_to_json,
        flatten_scores_for_export,
        scores_to_payload,
    )
    from society_health.reporting.formatters import format_batch_table, format_health_report
    from society_health.scoring.batch import rank_by_urgency, score_batch

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        snapshots = load_snapshots(Path(snapshot_file))
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    if not snapshots:
        typer.echo("[ERROR] No snapshots found in file.", err=True)
        raise typer.Exit(code=1)

    overrides: dict = {}
    if previous is not None:
        overrides["previous_overall"] = previous
    if critical_override is not None:
        overrides["critical_override"] = critical_override
    if overrides:
        snapshots = [s.model_copy(update=overrides) for s in snapshots]

    try:
        scores = score_batch(snapshots, config=config.scoring, period=period)
    except ValueError as exc:
        typer.echo(f"[ERROR] Scoring failed: {exc}", err=True)
        raise typer.Exit(code=1)

    payload = scores_to_payload(scores)

    if as_json:
        typer.echo(json.dumps(payload[0] if len(payload) == 1 else payload, indent=2))
    elif len(scores) == 1:
        typer.echo(format_health_report(scores[0].result, scores[0].society_id))
    else:
        typer.echo(format_batch_table(rank_by_urgency(scores)))

    if output:
        out_path = Path(output)
        if out_path.suffix.lower() == ".csv":
            export_to_csv(flatten_scores_for_export(scores), out_path)
        else:
            export_to_json(payload, out_path)
        typer.echo(f"[OK] Wrote {len(scores)} result(s) to {out_path}", err=as_json)


@app.command("sample")
def sample(
    previous: Optional[float] = typer.Option(
        None,
        "--previous",
        help="Previous overall score for the trend.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result as JSON.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Score the built-in sample snapshot (a well-run 150-resident society)."""
    from society_health.models.metrics import sample_health_metrics
    from society_health.reporting.formatters import format_health_report
    from society_health.scoring.engine import compute_health_score

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        result = compute_health_score(
            sample_health_metrics(), previous, config=config.scoring
        )
    except ValueError as exc:
        typer.echo(f"[ERROR] Scoring failed: {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.to_payload(), indent=2))
    else:
        typer.echo(format_health_report(result, "sample"))


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
    scoring_cfg = config.scoring

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo("  Weights:")
    for dim, weight in scoring_cfg.weights.items():
        typer.echo(f"    {dim.value:<18}{weight:.2f}")
    typer.echo(f"  Healthy threshold:   {scoring_cfg.healthy_threshold:g}")
    typer.echo(f"  Critical threshold:  {scoring_cfg.critical_threshold:g}")
    typer.echo(f"  Attention threshold: {scoring_cfg.attention_threshold:g}")
    typer.echo(f"  Trend noise (%):     {scoring_cfg.trend_noise_threshold:g}")
    typer.echo(f"  Default period:      {scoring_cfg.default_period}")
    typer.echo(f"  Log level:           {config.logging.level}")
    typer.echo(f"  Debug mode:          {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(mode="json"), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


if __name__ == "__main__":
    app()
