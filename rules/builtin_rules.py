"""Rules shipped with the linter."""

from __future__ import annotations

import ast
from typing import Any

from core.safe_emitter import ListenerRegistrar
from core.traverser import exit_event
from rules.base_rule import BaseRule, RuleContext

_FUNCTION_NODES = ("FunctionDef", "AsyncFunctionDef")


def _non_negative_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("expected an integer, got a boolean")
    number = int(value)
    if number < 0:
        raise ValueError("expected a non-negative integer")
    return number


def _parameter_names(args: ast.arguments) -> list[str]:
    params = [*args.posonlyargs, *args.args, *args.kwonlyargs]
    if args.vararg is not None:
        params.append(args.vararg)
    if args.kwarg is not None:
        params.append(args.kwarg)
    return [param.arg for param in params]


class NoBareExceptRule(BaseRule):
    """Flags ``except:`` clauses that catch everything."""

    rule_id = "no-bare-except"
    description = "Disallow except clauses without an exception type."

    def create(self, context: RuleContext, registrar: ListenerRegistrar) -> None:
        def check_handler(node: ast.ExceptHandler, parent: ast.AST | None, _: Any) -> None:
            if node.type is None:
                context.report(node, "Bare 'except:' catches every exception; name the type.")

        registrar.on("ExceptHandler", check_handler)


class MaxArgsRule(BaseRule):
    """Flags functions that declare too many named parameters."""

    rule_id = "max-args"
    description = "Limit the number of named parameters a function declares."
    option_types = {"max": _non_negative_int}

    def create(self, context: RuleContext, registrar: ListenerRegistrar) -> None:
        limit = context.settings.get("max", 5)

        def check_function(node: ast.FunctionDef, parent: ast.AST | None, _: Any) -> None:
            args = node.args
            count = len(args.posonlyargs) + len(args.args) + len(args.kwonlyargs)
            if count > limit:
                context.report(
                    node,
                    f"Function '{node.name}' has {count} parameters (max {limit}).",
                )

        for node_type in _FUNCTION_NODES:
            registrar.on(node_type, check_function)


class NoPrintRule(BaseRule):
    """Flags calls to the builtin ``print``.

    A function parameter named ``print`` shadows the builtin for the body of
    that function.
    """

    rule_id = "no-print"
    description = "Disallow calls to the builtin print."
    default_severity = "warning"

    def create(self, context: RuleContext, registrar: ListenerRegistrar) -> None:
        shadowed: list[bool] = []

        def enter_function(node: ast.FunctionDef, parent: ast.AST | None, _: Any) -> None:
            shadowed.append("print" in _parameter_names(node.args))

        def leave_function(node: ast.FunctionDef, parent: ast.AST | None, _: Any) -> None:
            shadowed.pop()

        def check_call(node: ast.Call, parent: ast.AST | None, _: Any) -> None:
            if any(shadowed):
                return
            if isinstance(node.func, ast.Name) and node.func.id == "print":
                context.report(node, "Unexpected call to print().")

        for node_type in _FUNCTION_NODES:
            registrar.on(node_type, enter_function)
            registrar.on(exit_event(node_type), leave_function)
        registrar.on("Call", check_call)


class NoMutableDefaultRule(BaseRule):
    """Flags list, dict and set literals used as parameter defaults."""

    rule_id = "no-mutable-default"
    description = "Disallow mutable literals as default parameter values."

    _MUTABLE = (ast.List, ast.Dict, ast.Set, ast.ListComp, ast.DictComp, ast.SetComp)

    def create(self, context: RuleContext, registrar: ListenerRegistrar) -> None:
        def check_defaults(node: ast.FunctionDef, parent: ast.AST | None, _: Any) -> None:
            defaults = [*node.args.defaults, *node.args.kw_defaults]
            for default in defaults:
                if isinstance(default, self._MUTABLE):
                    context.report(
                        default,
                        f"Mutable default value in '{node.name}' is shared between calls.",
                    )

        for node_type in _FUNCTION_NODES:
            registrar.on(node_type, check_defaults)


BUILTIN_RULES: tuple[type[BaseRule], ...] = (
    NoBareExceptRule,
    MaxArgsRule,
    NoPrintRule,
    NoMutableDefaultRule,
)
