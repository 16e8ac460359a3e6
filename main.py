from pathlib import Path
from typing import Optional

import typer

from src.colornames import ColorNamesError, PullRequest, list_palettes, load_palette, pull_names
from src.colornames.config import DEFAULT_OUTPUT_ROOT, FULL_COLORS_INFO
from src.colornames.logging_config import configure_logging

app = typer.Typer()


@app.command("pull-names")
def pull_names_command(
    url: str = typer.Option(
        FULL_COLORS_INFO["url"],
        "--url",
        envvar="COLORNAMES_SOURCE_URL",
        help="Upstream full_colors_info.csv to fetch.",
    ),
    source: Optional[Path] = typer.Option(
        None,
        "--source",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Read a local copy of the upstream CSV instead of fetching it.",
    ),
    output_root: Path = typer.Option(
        DEFAULT_OUTPUT_ROOT,
        "--output-root",
        envvar="COLORNAMES_OUTPUT_ROOT",
        file_okay=False,
        dir_okay=True,
        writable=True,
        help="Directory holding the data/, json/ and svg/ folders.",
    ),
    timeout: float = typer.Option(FULL_COLORS_INFO["timeout"], "--timeout", help="Seconds allowed per fetch attempt."),
    retries: int = typer.Option(FULL_COLORS_INFO["retries"], "--retries", help="Extra fetch attempts after a failure."),
    strict: bool = typer.Option(False, "--strict", help="Fail when required upstream columns are missing."),
    verbose: bool = typer.Option(False, "--verbose", help="Emit debug-level log events."),
    json_logs: bool = typer.Option(False, "--json-logs", help="Render log events as JSON lines."),
) -> None:
    """
    Regenerate the per-language CSV, JSON and SVG color-name files from upstream.
    """
    configure_logging(verbose=verbose, json_logs=json_logs)
    try:
        request = PullRequest(
            source_url=url,
            source_path=source,
            output_root=output_root,
            timeout=timeout,
            retries=retries,
            strict=strict,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        pull_names(request)
    except ColorNamesError as exc:
        typer.echo(f"❌ Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("list-palettes")
def list_palettes_command(
    output_root: Path = typer.Option(
        DEFAULT_OUTPUT_ROOT,
        "--output-root",
        envvar="COLORNAMES_OUTPUT_ROOT",
        help="Directory holding the published json/ folder.",
    ),
) -> None:
    """Print every published palette with its number of colors."""
    configure_logging()
    try:
        for basename in list_palettes(output_root):
            typer.echo(f"{basename}\t{len(load_palette(basename, root=output_root))}")
    except ColorNamesError as exc:
        typer.echo(f"❌ Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
