"""Traversal event ordering tests."""

from __future__ import annotations

import ast
from typing import Any

from core.safe_emitter import create_safe_emitter, dispatcher
from core.traverser import Traverser, exit_event


def test_enter_and_exit_events_are_nested() -> None:
    tree = ast.parse("def f():\n    return 1\n")
    emitter = create_safe_emitter()
    order: list[str] = []
    for name in ("Module", "FunctionDef", "Return"):
        emitter.on(name, lambda node, parent, _, name=name: order.append(name))
        emitter.on(exit_event(name), lambda node, parent, _, name=name: order.append(exit_event(name)))

    Traverser(dispatcher(emitter)).traverse(tree)

    assert order == [
        "Module",
        "FunctionDef",
        "Return",
        "Return:exit",
        "FunctionDef:exit",
        "Module:exit",
    ]


def test_listeners_receive_node_and_parent() -> None:
    tree = ast.parse("x = 1\n")
    emitter = create_safe_emitter()
    seen: list[tuple[Any, Any, Any]] = []
    emitter.on("Module", lambda *args: seen.append(args))
    emitter.on("Assign", lambda *args: seen.append(args))

    Traverser(dispatcher(emitter)).traverse(tree)

    assert seen[0] == (tree, None, None)
    assert seen[1] == (tree.body[0], tree, None)


def test_siblings_are_visited_in_source_order() -> None:
    tree = ast.parse("a = 1\nb = 2\nc = 3\n")
    emitter = create_safe_emitter()
    names: list[str] = []
    emitter.on("Name", lambda node, parent, _: names.append(node.id))

    Traverser(dispatcher(emitter)).traverse(tree)

    assert names == ["a", "b", "c"]
