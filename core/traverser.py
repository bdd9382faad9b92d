"""Depth-first syntax tree walk that reports node entry and exit as events."""

from __future__ import annotations

import ast

from core.safe_emitter import EventDispatcher

EXIT_SUFFIX = ":exit"


def exit_event(node_type: str) -> str:
    """Event name emitted after a node's children have been visited."""
    return f"{node_type}{EXIT_SUFFIX}"


class Traverser:
    """Emits ``<NodeType>`` before and ``<NodeType>:exit`` after each subtree."""

    def __init__(self, events: EventDispatcher) -> None:
        self.events = events

    def traverse(self, tree: ast.AST) -> None:
        # Explicit stack; deeply nested sources would overflow recursion.
        stack: list[tuple[ast.AST, ast.AST | None, bool]] = [(tree, None, False)]
        while stack:
            node, parent, leaving = stack.pop()
            node_type = type(node).__name__
            if leaving:
                self.events.emit(exit_event(node_type), node, parent)
                continue
            self.events.emit(node_type, node, parent)
            stack.append((node, parent, True))
            children = list(ast.iter_child_nodes(node))
            for child in reversed(children):
                stack.append((child, node, False))
