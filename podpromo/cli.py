import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich import print
from rich.logging import RichHandler
from rich.markup import escape

from .artifacts import save_content_run
from .config import AppConfig, load_config
from .llm import resolve_client
from .models import ArtifactKind, ContentPackage, Transcript
from .pipeline import ContentJob, run_job
from .timestamps import MissingTimingError, to_description_block

app = typer.Typer(help="Generate podcast marketing content from a transcript.")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Podpromo CLI entrypoint."""
    _configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit(code=0)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _resolve_kinds(kind: str) -> tuple[ArtifactKind, ...]:
    normalized_kind = kind.lower()
    if normalized_kind == "all":
        return tuple(ArtifactKind)
    try:
        return (ArtifactKind(normalized_kind),)
    except ValueError:
        choices = ", ".join(["all", *(k.value for k in ArtifactKind)])
        print(f"[red]Invalid kind. Use one of: {choices}.[/red]")
        raise typer.Exit(code=2)


def _read_config() -> AppConfig:
    load_dotenv()
    config = load_config()
    if not config.api_key:
        print("[red]ANTHROPIC_API_KEY not found in environment.[/red]")
        raise typer.Exit(code=1)
    return config


def _read_transcript(file: Path) -> Transcript:
    if not file.exists():
        print("[red]File not found[/red]")
        raise typer.Exit(code=1)
    try:
        return Transcript.model_validate_json(file.read_text(encoding="utf-8"))
    except ValidationError as exc:
        print(f"[red]Invalid transcript JSON:[/red] {exc}")
        raise typer.Exit(code=1)


def _print_package(package: ContentPackage) -> None:
    fallback_kinds = set(package.fallbacks)

    def heading(title: str, kind: ArtifactKind) -> None:
        marker = " [yellow](fallback)[/yellow]" if kind in fallback_kinds else ""
        print(f"\n[bold]{title}[/bold]{marker}")

    if package.summary is not None:
        heading("TL;DR", ArtifactKind.SUMMARY)
        print(escape(package.summary.tldr))
        for i, bullet in enumerate(package.summary.bullets[:5], 1):
            print(f"{i}. {escape(bullet)}")

    if package.social_posts is not None:
        heading("Twitter/X", ArtifactKind.SOCIAL_POSTS)
        print(escape(package.social_posts.twitter))

    if package.titles is not None:
        heading("YouTube Titles", ArtifactKind.TITLES)
        for title in package.titles.youtube_short:
            print(f"- {escape(title)}")
        print(f"keywords: {escape(', '.join(package.titles.seo_keywords))}")

    if package.youtube_timestamps is not None:
        heading("YouTube Timestamps", ArtifactKind.YOUTUBE_TIMESTAMPS)
        print(escape(to_description_block(package.youtube_timestamps)))


@app.command()
def generate(
    file: Path,
    kind: str = typer.Option(
        "all",
        "--kind",
        help="Artifact to generate: all, summary, social_posts, titles or youtube_timestamps.",
    ),
):
    kinds = _resolve_kinds(kind)
    transcript = _read_transcript(file)
    config = _read_config()
    client = resolve_client(api_key=config.api_key)

    job = ContentJob(transcript=transcript, kinds=kinds)
    try:
        run_job(job, client=client, model=config.model)
    except MissingTimingError as exc:
        if job.results:
            _save_and_print(job, config)
        print(f"[red]{exc}[/red] Re-run with --kind to skip youtube_timestamps.")
        raise typer.Exit(code=1)

    _save_and_print(job, config)


def _save_and_print(job: ContentJob, config: AppConfig) -> None:
    package = job.to_package()
    paths = save_content_run(package, job.raw_outputs(), runs_dir=config.runs_dir)
    print(f"Saved content to [bold]{paths['content_path']}[/bold]")
    print(f"Saved raw model output to [bold]{paths['raw_path']}[/bold]")
    _print_package(package)


@app.command()
def timestamps(file: Path):
    transcript = _read_transcript(file)
    config = _read_config()
    client = resolve_client(api_key=config.api_key)

    job = ContentJob(transcript=transcript, kinds=(ArtifactKind.YOUTUBE_TIMESTAMPS,))
    try:
        package = run_job(job, client=client, model=config.model)
    except MissingTimingError as exc:
        print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    print(escape(to_description_block(package.youtube_timestamps or [])))


if __name__ == "__main__":
    app()
