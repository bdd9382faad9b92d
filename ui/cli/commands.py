"""Typer command handlers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from core.config import configure_logging
from core.linter import RuleError
from core.orchestrator import Orchestrator, RuntimeBundle

logger = logging.getLogger("se.cli")


def _runtime(config_dir: Path | None = None) -> RuntimeBundle:
    try:
        bundle = Orchestrator(config_dir=config_dir).build()
        configure_logging(bundle.config)
    except ValueError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    return bundle


def lint(path: Path, config_dir: Path | None = None) -> None:
    """Lint a file or directory and exit non-zero on errors."""
    bundle = _runtime(config_dir)
    try:
        messages = bundle.linter.lint_path(path)
    except RuleError as exc:
        logger.error("%s", exc)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    for message in messages:
        typer.echo(message.format())
    errors = sum(1 for message in messages if message.severity == "error")
    warnings = len(messages) - errors
    typer.echo(f"{errors} error(s), {warnings} warning(s)")
    if errors:
        raise typer.Exit(code=1)


def rules_list(config_dir: Path | None = None) -> None:
    """List rules and enabled flags."""
    bundle = _runtime(config_dir)
    for rule in bundle.rule_registry.list_rules():
        status = "enabled" if rule.enabled else "disabled"
        typer.echo(f"{rule.rule_id}: {status} ({rule.severity})")


def config_show(config_dir: Path | None = None) -> None:
    """Show effective runtime config."""
    bundle = _runtime(config_dir)
    typer.echo(json.dumps(bundle.config, indent=2, default=str))
