"""Typer-based CLI for editing worksheet run configurations."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import ConfigError, ProjectContext, RunConfiguration, load_config, load_project, save_config
from .form import MODULE, RUNTIME_OPTIONS, SCRIPT_PATH, WORKING_DIRECTORY, ConfigurationForm
from .pickers import directory_picker, script_picker

app = typer.Typer(help="Edit run configurations for interactive worksheet sessions.")
console = Console()


def _configure_logging(level: str, log_file: Path | None = None) -> None:
    logger.remove()
    logger.add(console.print, level=level)
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level)


def _load_project(project: Optional[Path]) -> Optional[ProjectContext]:
    if project is None:
        return None
    return load_project(project)


@app.command()
def init(
    path: Path = typer.Argument(..., resolve_path=True),
    name: str = typer.Option("Worksheet", "--name", help="Run configuration name"),
    project: Optional[Path] = typer.Option(None, "--project", help="Project YAML supplying defaults"),
) -> None:
    """Write a default run configuration to PATH."""

    _configure_logging("INFO")
    try:
        context = _load_project(project)
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=4)

    config = RunConfiguration(name=name)
    form = ConfigurationForm(context)
    form.load(config)
    form.apply(config)
    save_config(config, path)
    console.print(f"[green]Wrote run configuration to {path}[/green]")


@app.command()
def show(path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True)) -> None:
    """Print the run configuration stored at PATH."""

    _configure_logging("INFO")
    try:
        config = load_config(path)
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=4)

    table = Table(title=config.name)
    table.add_column("Field")
    table.add_column("Value", overflow="fold")
    table.add_row("VM options", config.runtime_options)
    table.add_row("Working directory", config.working_directory)
    table.add_row("Worksheet", config.script_path)
    table.add_row("Module", config.module or "")
    console.print(table)


@app.command("set")
def set_fields(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    options: Optional[str] = typer.Option(None, "--options", help="Runtime options string"),
    workdir: Optional[str] = typer.Option(None, "--workdir", help="Working directory"),
    script: Optional[str] = typer.Option(None, "--script", help="Worksheet file"),
    module: Optional[str] = typer.Option(None, "--module", help="Module providing the classpath"),
    project: Optional[Path] = typer.Option(None, "--project", help="Project YAML supplying defaults"),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level"),
) -> None:
    """Update fields of the run configuration at PATH."""

    _configure_logging(log_level.upper())
    try:
        config = load_config(path)
        context = _load_project(project)
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=4)

    form = ConfigurationForm(context)
    form.load(config)
    edits = {
        RUNTIME_OPTIONS: options,
        WORKING_DIRECTORY: workdir,
        SCRIPT_PATH: script,
        MODULE: module,
    }
    for field, value in edits.items():
        if value is not None:
            form.set_field(field, value)
    form.apply(config)
    save_config(config, path)
    console.print(f"[green]Updated {path}[/green]")


@app.command()
def browse(
    directory: Path = typer.Argument(..., file_okay=False),
    kind: str = typer.Option("script", "--kind", help="Picker to emulate: directory or script"),
    show_hidden: bool = typer.Option(False, "--show-hidden", help="Include hidden entries"),
) -> None:
    """List the entries a picker would offer in DIRECTORY."""

    _configure_logging("INFO")
    form = ConfigurationForm()
    if kind == "directory":
        picker = directory_picker(form)
    elif kind == "script":
        picker = script_picker(form)
    else:
        console.print(f"[red]Unknown picker kind:[/red] {kind}")
        raise typer.Exit(code=2)

    for entry in picker.list_entries(directory, show_hidden=show_hidden):
        # undecodable bytes surface as lone surrogates
        name = os.fsencode(entry.name).decode(errors="replace")
        suffix = "/" if entry.is_directory else ""
        console.print(f"{name}{suffix}", markup=False, highlight=False)


@app.command()
def edit(
    path: Path = typer.Argument(..., resolve_path=True),
    project: Optional[Path] = typer.Option(None, "--project", help="Project YAML supplying defaults"),
) -> None:
    """Open the run configuration editor window."""

    from .gui.app import launch

    raise typer.Exit(code=launch(path, project))


if __name__ == "__main__":
    app()
