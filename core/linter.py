"""Runs rule plugins over Python sources through a per-file emitter."""

from __future__ import annotations

import ast
import io
import logging
import tokenize
from pathlib import Path

from core.messages import LintMessage
from core.safe_emitter import create_safe_emitter, dispatcher, registrar
from core.traverser import Traverser
from rules.base_rule import RuleContext
from rules.rule_registry import RuleRegistry

logger = logging.getLogger("se.linter")


class RuleError(RuntimeError):
    """A rule listener raised while a file was being linted."""


def _syntax_error(path: str, message: str, line: int, column: int) -> LintMessage:
    return LintMessage(
        rule_id="syntax-error",
        message=message,
        line=line,
        column=column,
        severity="error",
        path=path,
    )


def decode_source(data: bytes) -> str:
    """Decode file bytes using the BOM or coding cookie, defaulting to UTF-8."""
    encoding, _ = tokenize.detect_encoding(io.BytesIO(data).readline)
    return data.decode(encoding)


class Linter:
    """Lints source text with every enabled rule in a registry.

    Every file gets a fresh emitter. Rules only receive a register-only view
    of it plus their own context, and the traversal only receives an
    emit-only view.
    """

    def __init__(self, registry: RuleRegistry, pattern: str = "*.py") -> None:
        self.registry = registry
        self.pattern = pattern

    def lint_source(self, source: str, path: str = "<string>") -> list[LintMessage]:
        try:
            tree = ast.parse(source, filename=path)
        except SyntaxError as exc:
            logger.info("Syntax error in %s: %s", path, exc.msg)
            return [_syntax_error(path, exc.msg or "invalid syntax", exc.lineno or 1, exc.offset or 1)]

        emitter = create_safe_emitter()
        source_lines = source.splitlines()
        contexts: list[RuleContext] = []
        for rule in self.registry.enabled_rules():
            context = RuleContext(
                rule_id=rule.rule_id,
                path=path,
                severity=rule.severity,
                settings=dict(rule.settings),
                source_lines=list(source_lines),
            )
            rule.create(context, registrar(emitter))
            contexts.append(context)

        logger.debug("Linting %s with %d rules", path, len(contexts))
        try:
            Traverser(dispatcher(emitter)).traverse(tree)
        except Exception as exc:
            raise RuleError(f"Rule listener failed while linting {path}: {exc}") from exc

        messages = [message for context in contexts for message in context.messages()]
        return sorted(messages, key=lambda m: (m.line, m.column))

    def lint_file(self, path: Path) -> list[LintMessage]:
        data = path.read_bytes()
        try:
            source = decode_source(data)
        except SyntaxError as exc:
            logger.info("Cannot determine encoding of %s: %s", path, exc.msg)
            return [_syntax_error(str(path), exc.msg or "invalid encoding", exc.lineno or 1, 1)]
        except UnicodeDecodeError as exc:
            logger.info("Cannot decode %s: %s", path, exc)
            line_start = data.rfind(b"\n", 0, exc.start) + 1
            line = data.count(b"\n", 0, exc.start) + 1
            column = exc.start - line_start + 1
            return [_syntax_error(str(path), f"cannot decode source: {exc.reason}", line, column)]
        return self.lint_source(source, path=str(path))

    def lint_path(self, path: Path) -> list[LintMessage]:
        """Lint one file, or every matching file below a directory."""
        if path.is_dir():
            files = sorted(p for p in path.rglob(self.pattern) if p.is_file())
        else:
            files = [path]
        messages: list[LintMessage] = []
        for file_path in files:
            messages.extend(self.lint_file(file_path))
        logger.info("Linted %d files, %d messages", len(files), len(messages))
        return messages
