from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from user_pipeline.config import get_settings
from user_pipeline.errors import PipelineError
from user_pipeline.pipeline import RunConfig, available_strategies, run_pipeline
from user_pipeline.reporter import print_error, print_settings, print_status
from user_pipeline.utils.logging import configure_logging

app = typer.Typer(help="Fetch users, render them concurrently, and persist catch-phrase matches.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    print_settings(get_settings())


@app.command()
def strategies() -> None:
    """
    List available dispatch strategies.
    """
    typer.echo("Available strategies: " + ", ".join(available_strategies()))


@app.command()
def run(
    url: Optional[str] = typer.Option(
        None,
        "--url",
        "-u",
        help="Source endpoint returning a JSON array of users (default from settings).",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="YAML destination for matching users (default from settings).",
    ),
    term: Optional[str] = typer.Option(
        None,
        "--term",
        "-t",
        help="Case-insensitive catch-phrase substring to filter on.",
    ),
    strategy: Optional[str] = typer.Option(
        None,
        "--strategy",
        "-s",
        help="Dispatch strategy (channel, locked, sequential).",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        min=1,
        help="Worker threads for the concurrent strategies.",
    ),
) -> None:
    """
    Fetch users, print each one, and persist those whose catch phrase matches.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    config = RunConfig.from_settings(settings).with_overrides(
        source_url=url,
        output_path=output,
        filter_term=term,
        strategy=strategy,
        max_workers=workers,
    )
    if config.strategy not in available_strategies():
        typer.echo(
            f"Unknown strategy '{config.strategy}'. "
            f"Available: {', '.join(available_strategies())}",
            err=True,
        )
        raise typer.Exit(code=2)

    try:
        result = run_pipeline(config)
    except PipelineError as exc:
        print_error(exc)
        return

    print_status(result)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
