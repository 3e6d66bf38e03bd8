"""Application bootstrap for the run configuration editor."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger
from PySide6.QtWidgets import QApplication, QMessageBox

from ..config import ConfigError, RunConfiguration, load_config, load_project
from .forms import RunConfigurationDialog


def _init_logging() -> None:
    """Configure loguru to play nicely with the GUI."""

    # Remove default stderr handler so log messages flow through custom sinks.
    logger.remove()
    log_dir = Path.home() / ".worksheet_config"
    log_dir.mkdir(parents=True, exist_ok=True)
    logger.add(log_dir / "gui.log", rotation="1 week", retention=5, level="INFO")


def launch(config_path: Path, project_path: Path | None = None) -> int:
    """Show the editor for ``config_path``; a missing file starts from defaults."""

    _init_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Worksheet Run Configuration")
    try:
        project = load_project(project_path) if project_path else None
        config = load_config(config_path) if config_path.exists() else RunConfiguration()
    except ConfigError as exc:
        logger.exception("Failed to load run configuration")
        QMessageBox.critical(None, "Config error", str(exc))
        return 4
    dialog = RunConfigurationDialog(config, config_path, project)
    return 0 if dialog.exec() == RunConfigurationDialog.DialogCode.Accepted else 1


def main(argv: list[str] | None = None) -> int:
    """Entry point used by the ``worksheet-config-gui`` script."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Run configuration YAML file.")
    parser.add_argument("--project", type=Path, help="Project YAML supplying defaults.")
    args = parser.parse_args(argv)
    return launch(args.config.resolve(), args.project)


if __name__ == "__main__":
    raise SystemExit(main())
