#!/usr/bin/env python3
"""Brief Factory CLI - generate, stream and validate project briefs.

Usage:
    # Generate, embed, store and save three backend briefs
    python main.py generate --domain fintech --level junior --tech-focus backend --count 3

    # Stream a brief to the console without validation or storage
    python main.py stream --domain healthcare --stack react,node

    # Validate a dataset of briefs
    python main.py validate ./data/briefs_dataset.json
"""

import json
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from openai import OpenAIError
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from agents import BriefAgent
from config import settings
from contracts import (
    BriefFactoryError,
    BriefValidationError,
    GenerationRequest,
    Level,
    TechFocus,
    validate_batch,
)
from orchestrator import BriefPipeline, load_briefs_file
from providers import list_providers as get_available_providers
from utils import setup_logging


console = Console()


def _fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")
    sys.exit(1)


def _print_field_errors(errors) -> None:
    for error in errors:
        console.print(
            f"  [red]-[/red] [bold]{escape(error.field)}[/bold]: {escape(error.message)} "
            f"[dim]({error.error_type})[/dim]"
        )


def build_request(
    domain: Optional[str],
    level: Optional[str],
    tech_focus: Optional[str],
    stack: Tuple[str, ...],
    duration: Optional[str],
    count: int,
) -> GenerationRequest:
    """Convert CLI flags into a GenerationRequest, exiting on invalid values."""
    try:
        return GenerationRequest(
            domain=domain,
            level=level,
            tech_focus=tech_focus,
            stack=list(stack),
            duration=duration,
            count=count,
        )
    except ValidationError as e:
        _fail(f"Invalid arguments: {e}")


def request_options(func):
    """Flags shared by generate and stream."""
    options = [
        click.option("--domain", "-d", help="Business domain, e.g. fintech"),
        click.option(
            "--level", "-l",
            type=click.Choice([m.value for m in Level]),
            help="Target developer level",
        ),
        click.option(
            "--tech-focus", "-t",
            type=click.Choice([m.value for m in TechFocus]),
            help="frontend, backend or fullstack",
        ),
        click.option(
            "--stack", "-s",
            multiple=True,
            help="Technology; repeat the flag or pass a comma-separated list",
        ),
        click.option("--duration", help="Expected duration, e.g. '2 weeks'"),
        click.option(
            "--count", "-n",
            type=click.IntRange(1, settings.max_briefs_per_request),
            default=1,
            show_default=True,
            help="Number of briefs to generate",
        ),
        click.option(
            "--provider", "-p",
            type=click.Choice(["openai", "litellm", "anthropic", "gemini", "deepseek"]),
            default=None,
            help=f"LLM provider (default: {settings.default_provider})",
        ),
        click.option("--model", "-m", default=None, help=f"Model name (default: {settings.default_model})"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def cli(verbose: bool):
    """Brief Factory: synthetic project briefs for developer assessments."""
    setup_logging("DEBUG" if verbose else settings.log_level)


@cli.command()
@request_options
@click.option("--output", "-o", "output_dir", default=None, help="Output directory (default: ./outputs)")
@click.option("--skip-db", is_flag=True, help="Skip embedding and datastore insert")
def generate(
    domain: Optional[str],
    level: Optional[str],
    tech_focus: Optional[str],
    stack: Tuple[str, ...],
    duration: Optional[str],
    count: int,
    provider: Optional[str],
    model: Optional[str],
    output_dir: Optional[str],
    skip_db: bool,
):
    """Generate briefs, validate, embed, store and save them."""
    request = build_request(domain, level, tech_focus, stack, duration, count)

    console.print(Panel.fit(
        "[bold blue]Brief Factory[/bold blue]\n"
        "[dim]Generate → validate → embed → store[/dim]",
        border_style="blue"
    ))

    try:
        pipeline = BriefPipeline(
            agent=BriefAgent(model=model, provider=provider),
            output_dir=output_dir,
            skip_db=skip_db,
        )
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task(f"Generating {count} brief(s)...", total=None)
            result = pipeline.run(request)
            progress.update(task, completed=True)
    except BriefValidationError as e:
        console.print("[red]Error:[/red] generated brief failed validation")
        _print_field_errors(e.errors)
        sys.exit(1)
    except json.JSONDecodeError as e:
        _fail(f"LLM response is not valid JSON: {e}")
    except (BriefFactoryError, OpenAIError) as e:
        _fail(str(e))

    console.print("\n" + "=" * 60)
    console.print(f"[green]Run ID:[/green] {result['run_id']}")
    console.print(f"[green]Model:[/green] {result['model']} ({result['provider']})")
    console.print(f"[green]Briefs:[/green] {len(result['briefs'])}")

    if result["insertions"]:
        table = Table(title="Inserted briefs")
        table.add_column("ID")
        table.add_column("Domain")
        table.add_column("Level")
        table.add_column("User stories", justify="right")
        for summary in result["insertions"]:
            table.add_row(
                str(summary.brief_id),
                str(summary.brief.get("domain", "")),
                str(summary.brief.get("level", "")),
                str(summary.user_stories_inserted),
            )
        console.print(table)

    usage = result["token_usage"]
    console.print(f"[dim]Tokens:[/dim] {usage['input_tokens']:,} in / {usage['output_tokens']:,} out")
    console.print(f"\n[bold]Briefs saved to:[/bold] {result['output_path']}")
    console.print("=" * 60)


@cli.command()
@request_options
def stream(
    domain: Optional[str],
    level: Optional[str],
    tech_focus: Optional[str],
    stack: Tuple[str, ...],
    duration: Optional[str],
    count: int,
    provider: Optional[str],
    model: Optional[str],
):
    """Stream generated briefs to the console without validation or storage."""
    request = build_request(domain, level, tech_focus, stack, duration, count)

    try:
        agent = BriefAgent(model=model, provider=provider)
        for chunk in agent.stream(request):
            console.out(chunk, end="", highlight=False)
    except (BriefFactoryError, OpenAIError) as e:
        console.print()
        _fail(str(e))
    console.print()


@cli.command()
@click.argument("dataset", required=False, type=click.Path(dir_okay=False))
def validate(dataset: Optional[str]):
    """Validate every brief in a JSON dataset file."""
    path = Path(dataset) if dataset else settings.get_dataset_path()

    try:
        data = load_briefs_file(path)
        report = validate_batch(data)
    except (OSError, json.JSONDecodeError, ValueError) as e:
        _fail(f"Error reading or parsing dataset {path}: {e}")

    console.print(f"Validating {report.total} briefs...\n")
    for result in report.invalid:
        index = result.errors[0].index
        console.print(f"[red]Brief #{index + 1} failed validation:[/red]")
        _print_field_errors(result.errors)
        console.print()

    console.print(f"[green]{report.valid_count} briefs valid[/green]")
    if report.invalid_count:
        console.print(f"[yellow]{report.invalid_count} briefs invalid[/yellow]")
        sys.exit(1)
    console.print("All briefs passed validation!")


@cli.command("providers")
def providers_command():
    """List LLM providers and whether their API keys are set."""
    console.print("[bold]Available LLM Providers:[/bold]\n")
    for name, available in get_available_providers().items():
        status = "[green]✓ Ready[/green]" if available else "[red]✗ No API key[/red]"
        console.print(f"  {name:12} {status}")
    console.print("\n[dim]Set API keys via environment variables:[/dim]")
    console.print("  OPENAI_API_KEY, ANTHROPIC_API_KEY, GOOGLE_API_KEY, DEEPSEEK_API_KEY")


if __name__ == "__main__":
    cli()
