"""CLI interface for boundedlayers using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from boundedlayers import __description__, __version__
from boundedlayers.config import (
    BoundedLayersConfig,
    LogLevel,
    build_configuration,
    check_examples,
    find_config_file,
    load_config,
    rule_file_schema,
)
from boundedlayers.exceptions import BoundedLayersError, ViolationError
from boundedlayers.models import Graph
from boundedlayers.parser.solution import SolutionParser
from boundedlayers.validation import ValidationReport

app = typer.Typer(
    name="boundedlayers",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()
err_console = Console(stderr=True)

LOG_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}

VALID_FORMATS = ["table", "json", "markdown"]
PROJECT_FORMATS = ["table", "json"]


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"boundedlayers version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """boundedlayers - Architecture conformance checks for project dependency graphs."""


def _setup_logging(level: str, verbose: bool) -> None:
    """Route library logging through rich at the configured level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else LOG_LEVELS[LogLevel(level)],
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def _load_rules(config: Path | None) -> tuple[BoundedLayersConfig, Path]:
    """Load the rule file, searching parent directories when no path is given."""
    config_path = config or find_config_file()
    if config_path is None:
        raise FileNotFoundError("No .boundedlayers.json found in current directory or its parents")
    return load_config(config_path), config_path


def _resolve_solution(solution: Path | None, rules: BoundedLayersConfig, config_path: Path | None) -> Path:
    """Pick the solution file: argument, then rule file, then current directory."""
    if solution is not None:
        return solution.resolve()
    if rules.solution and config_path is not None:
        return (config_path.parent / rules.solution).resolve()

    found = SolutionParser.find_solution_file(Path.cwd())
    if found is None:
        raise FileNotFoundError(f"No solution file specified or found in {Path.cwd()}")
    return found


def _output_report_table(report: ValidationReport) -> None:
    status_color = "green" if report.exit_code == 0 else "red"
    console.print(f"[{status_color}]Validation Status: {report.status.value.upper()}[/{status_color}]")

    counter_table = Table()
    counter_table.add_column("Metric", style="cyan")
    counter_table.add_column("Count", style="white", justify="right")
    for key, value in report.counters.items():
        counter_table.add_row(key.replace("_", " ").title(), str(value))
    console.print(counter_table)

    if not report.violations:
        console.print("\n[green]No violations found![/green]")
        return

    console.print("\n[blue]Violations Found:[/blue]")
    violations_table = Table()
    violations_table.add_column("Kind", style="cyan")
    violations_table.add_column("Project", style="white")
    violations_table.add_column("Referenced", style="white")
    violations_table.add_column("Message", style="red")
    for violation in report.violations:
        violations_table.add_row(
            violation.kind,
            violation.node,
            getattr(violation, "referenced", ""),
            violation.message,
        )
    console.print(violations_table)


def _output_report_markdown(report: ValidationReport) -> None:
    console.print("# Architecture Validation Report")
    console.print(f"**Status:** {report.status.value}")
    console.print(f"**Exit Code:** {report.exit_code}")
    console.print()

    console.print("## Counters")
    for key, value in report.counters.items():
        console.print(f"- {key}: {value}")
    console.print()

    if report.violations:
        console.print("## Violations")
        for violation in report.violations:
            console.print(f"- {violation.message}", markup=False, soft_wrap=True)


@app.command()
def validate(
    solution: Annotated[
        Optional[Path],
        typer.Argument(help="Solution file (default: from rule file, else the .sln in the current directory)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Rule file path (default: search for .boundedlayers.json)")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json, markdown (default: table)")
    ] = "table",
    fail_fast: Annotated[
        bool,
        typer.Option("--fail-fast", help="Report only the first violation")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Validate a solution's project references against the layer rules."""
    if format not in VALID_FORMATS:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(VALID_FORMATS)}")
        raise typer.Exit(1)

    try:
        rules, config_path = _load_rules(config)
        _setup_logging(rules.logging.level, verbose)
        configuration = build_configuration(rules)
        check_examples(configuration, rules)

        solution_path = _resolve_solution(solution, rules, config_path)
        graph = SolutionParser.parse_solution(solution_path)
        violations = configuration.validate(graph)
    except ViolationError as e:
        console.print(f"Example failed: {e}", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1)
    except (BoundedLayersError, FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    if fail_fast:
        violations = violations[:1]
    report = ValidationReport(violations=violations, nodes=len(graph))

    if format == "json":
        console.print(jsonlib.dumps(report.to_dict(), indent=2), markup=False, highlight=False, soft_wrap=True)
    elif format == "markdown":
        _output_report_markdown(report)
    else:
        _output_report_table(report)

    raise typer.Exit(report.exit_code)


@app.command()
def examples(
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Rule file path (default: search for .boundedlayers.json)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Check the example assertions of a rule file without loading a solution."""
    try:
        rules, _ = _load_rules(config)
        _setup_logging(rules.logging.level, verbose)
        count = check_examples(build_configuration(rules), rules)
    except ViolationError as e:
        console.print(f"Example failed: {e}", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1)
    except (BoundedLayersError, FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    console.print(f"[green]All {count} examples hold[/green]")


def _output_projects_table(graph: Graph) -> None:
    table = Table(title=f"Projects ({len(graph)})")
    table.add_column("Project", style="cyan", no_wrap=True)
    table.add_column("Id", style="white", overflow="fold")
    table.add_column("References", style="white", overflow="fold")
    for node in graph:
        table.add_row(node.name, node.id, "\n".join(node.references) or "-")
    console.print(table)


@app.command()
def projects(
    solution: Annotated[
        Optional[Path],
        typer.Argument(help="Solution file (default: from rule file, else the .sln in the current directory)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Rule file used to locate the solution (optional)")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = "table",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """List the projects of a solution with the ids they reference."""
    if format not in PROJECT_FORMATS:
        console.print(f"[red]Error:[/red] Invalid format '{format}'. Must be one of: {', '.join(PROJECT_FORMATS)}")
        raise typer.Exit(1)

    try:
        config_path = None
        rules = BoundedLayersConfig()
        if solution is None:
            config_path = config or find_config_file()
            if config_path is not None:
                rules = load_config(config_path)
        _setup_logging(rules.logging.level, verbose)

        solution_path = _resolve_solution(solution, rules, config_path)
        graph = SolutionParser.parse_solution(solution_path)
    except (BoundedLayersError, FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    if format == "json":
        data = {
            "solution": str(solution_path),
            "projects": [node.model_dump(mode="json") for node in graph],
        }
        console.print(jsonlib.dumps(data, indent=2), markup=False, highlight=False, soft_wrap=True)
    else:
        _output_projects_table(graph)


@app.command()
def schema(
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the schema to this file instead of stdout")
    ] = None,
) -> None:
    """Print the JSON Schema of the rule file."""
    content = jsonlib.dumps(rule_file_schema(), indent=2)
    if output is None:
        console.print(content, markup=False, highlight=False, soft_wrap=True)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content + "\n", encoding="utf-8")
    console.print(f"[green]Schema written to[/green] {output}")


if __name__ == "__main__":
    app()
