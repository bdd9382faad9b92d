"""CLI entrypoint for safe-emitter."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ui.cli import commands

app = typer.Typer(help="Rule-based Python linter built on an isolated event emitter")
rules_app = typer.Typer(help="Rule commands")
config_app = typer.Typer(help="Configuration commands")

_CONFIG_DIR_HELP = "Directory holding default.yaml and rules.yaml"


@app.command("lint")
def lint_cmd(
    path: Path = typer.Argument(..., exists=True, help="File or directory to lint"),
    config_dir: Optional[Path] = typer.Option(None, "--config-dir", help=_CONFIG_DIR_HELP),
) -> None:
    """Lint Python sources."""
    commands.lint(path=path, config_dir=config_dir)


@rules_app.command("list")
def rules_list_cmd(
    config_dir: Optional[Path] = typer.Option(None, "--config-dir", help=_CONFIG_DIR_HELP),
) -> None:
    """List rule status."""
    commands.rules_list(config_dir=config_dir)


@config_app.command("show")
def config_show_cmd(
    config_dir: Optional[Path] = typer.Option(None, "--config-dir", help=_CONFIG_DIR_HELP),
) -> None:
    """Show effective configuration."""
    commands.config_show(config_dir=config_dir)


app.add_typer(rules_app, name="rules")
app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
