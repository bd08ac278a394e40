"""
Sales summary — CLI entry point.

Running the tool with no arguments does the whole job with the standard
layout::

    pip install -e .
    cd /path/to/project        # contains stores/
    sales-summary
    # Sales summary created at: /path/to/project/salesTotalDir/salesSummary.txt

Other invocations::

    sales-summary --config config/example.toml
    sales-summary validate-config --full
    python -m sales_summary

Commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging (stderr; stdout carries only results).
  3. Execute.
  4. Report result to stdout.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="sales-summary",
    help="Aggregate per-store sales JSON files into a text summary report.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from sales_summary.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except ValueError as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from sales_summary.utils.logging import configure_logging
    configure_logging(config.logging)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: built-in standard layout).",
    ),
) -> None:
    """Build salesTotalDir/salesSummary.txt from every stores/**/*.json file.

    Each file's "Total" is credited to the store named by its parent
    directory.  Unreadable or malformed files count as zero.
    """
    if ctx.invoked_subcommand is not None:
        return

    from sales_summary.pipeline.summary import run_sales_summary

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    result = run_sales_summary(config)
    typer.echo(result.message)


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: built-in standard layout).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration and print the resolved values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)
    paths = config.paths

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Stores dir:    {paths.stores_dir}")
    typer.echo(f"  File pattern:  {paths.file_pattern}")
    typer.echo(f"  Output dir:    {paths.output_dir}")
    typer.echo(f"  Summary file:  {paths.summary_file}")
    typer.echo(f"  Log level:     {config.logging.level}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
