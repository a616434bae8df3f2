#!/usr/bin/env python3
"""Command line entry point for regenerating the monorepo docs."""

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from readme_forge.aggregator import build_and_write_readme, propagate_changelog
from readme_forge.config import DEFAULT_TEMPLATE, TEMPLATES, get_template

app = typer.Typer(help="Combine package READMEs into the root README and share the root CHANGELOG", add_completion=False)
console = Console()


def list_templates() -> None:
    """Print the built-in README templates."""
    table = Table(title="README templates")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for name, template in TEMPLATES.items():
        marker = " (default)" if name == DEFAULT_TEMPLATE else ""
        table.add_row(f"{name}{marker}", template.description)
    console.print(table)


@app.command()
def update(
    template: str = typer.Option(DEFAULT_TEMPLATE, "--template", "-t", help="Built-in README template to use"),
    show_templates: bool = typer.Option(False, "--list-templates", help="List built-in templates and exit"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress log output"),
):
    """Rebuild README.md from the package READMEs and copy CHANGELOG.md into each package."""
    if show_templates:
        list_templates()
        raise typer.Exit()

    try:
        readme_template = get_template(template)
    except KeyError as e:
        raise typer.BadParameter(e.args[0], param_hint="--template")

    # Only this package's records are muted, and only for this run.
    if quiet:
        logger.disable("readme_forge")
    try:
        run_update(readme_template)
    finally:
        if quiet:
            logger.enable("readme_forge")


def run_update(readme_template) -> None:
    """Write the README and changelog copies, exiting 1 on any I/O failure."""
    try:
        output = build_and_write_readme(template=readme_template)
        console.print(f"[green]✅ README written: {output}[/green]")
        for dest in propagate_changelog():
            console.print(f"[green]✅ Changelog copied: {dest}[/green]")
    except OSError as e:
        logger.error(f"Docs update failed: {e}")
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def main():
    """Main entry point for the docs update CLI."""
    app()


if __name__ == "__main__":
    main()
