"""Safe emitter behavior tests."""

from __future__ import annotations

from typing import Any

import pytest

from core.safe_emitter import (
    Emitter,
    EventDispatcher,
    ListenerRegistrar,
    SafeEmitter,
    create_safe_emitter,
    dispatcher,
    registrar,
)


def test_emit_without_listeners_is_silent() -> None:
    emitter = create_safe_emitter()

    assert emitter.emit("Unregistered") is None
    assert emitter.event_names() == []


def test_listeners_run_in_registration_order_with_three_args() -> None:
    emitter = create_safe_emitter()
    calls: list[tuple[str, tuple[Any, ...]]] = []
    emitter.on("Program", lambda *args: calls.append(("f", args)))
    emitter.on("Program", lambda *args: calls.append(("g", args)))

    node = object()
    emitter.emit("Program", node)

    assert calls == [("f", (node, None, None)), ("g", (node, None, None))]


def test_all_three_arguments_are_passed_positionally() -> None:
    emitter = create_safe_emitter()
    received: list[tuple[Any, ...]] = []
    emitter.on("e", lambda a, b, c: received.append((a, b, c)))

    emitter.emit("e", 1, "two", [3])

    assert received == [(1, "two", [3])]


def test_duplicate_registration_invokes_listener_twice() -> None:
    emitter = create_safe_emitter()
    hits: list[int] = []

    def listener(a: Any, b: Any, c: Any) -> None:
        hits.append(a)

    emitter.on("tick", listener)
    emitter.on("tick", listener)
    emitter.emit("tick", 7)

    assert hits == [7, 7]


def test_event_names_lists_each_registered_name_once() -> None:
    emitter = create_safe_emitter()
    noop = lambda a, b, c: None  # noqa: E731
    emitter.on("y", noop)
    emitter.on("x", noop)
    emitter.on("y", noop)
    emitter.on("x", noop)

    names = emitter.event_names()

    assert set(names) == {"x", "y"}
    assert names == ["y", "x"]


def test_event_names_does_not_register_emitted_names() -> None:
    emitter = create_safe_emitter()
    emitter.emit("nothing")
    emitter.on("x", lambda a, b, c: None)
    emitter.emit("other")

    assert emitter.event_names() == ["x"]


def test_listener_error_propagates_and_stops_later_listeners() -> None:
    emitter = create_safe_emitter()
    second_called: list[bool] = []

    def failing(a: Any, b: Any, c: Any) -> None:
        raise ValueError("boom")

    emitter.on("e", failing)
    emitter.on("e", lambda a, b, c: second_called.append(True))

    with pytest.raises(ValueError, match="boom"):
        emitter.emit("e")
    assert second_called == []


def test_non_callable_listener_fails_only_on_emit() -> None:
    emitter = create_safe_emitter()
    emitter.on("e", 42)  # type: ignore[arg-type]

    assert emitter.event_names() == ["e"]
    with pytest.raises(TypeError):
        emitter.emit("e")


def test_listener_added_during_emit_waits_for_next_emit() -> None:
    emitter = create_safe_emitter()
    calls: list[str] = []

    def late(a: Any, b: Any, c: Any) -> None:
        calls.append("late")

    def first(a: Any, b: Any, c: Any) -> None:
        calls.append("first")
        if "late" not in calls:
            emitter.on("e", late)

    emitter.on("e", first)
    emitter.emit("e")
    assert calls == ["first"]

    emitter.emit("e")
    assert calls == ["first", "first", "late"]


def test_registry_is_not_reachable_as_a_public_attribute() -> None:
    emitter = create_safe_emitter()
    emitter.on("e", lambda a, b, c: None)

    assert isinstance(emitter, Emitter)
    assert not hasattr(emitter, "__dict__")
    assert not any(name.startswith("listeners") for name in dir(emitter))
    with pytest.raises(AttributeError):
        emitter.listeners = {}  # type: ignore[attr-defined]


def test_emitter_interface_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError):
        Emitter()  # type: ignore[abstract]


def test_registrar_facet_only_registers() -> None:
    emitter = SafeEmitter()
    view = registrar(emitter)
    seen: list[Any] = []
    view.on("e", lambda a, b, c: seen.append(a))

    emitter.emit("e", "payload")

    assert isinstance(view, ListenerRegistrar)
    assert seen == ["payload"]
    assert not hasattr(view, "emit")
    assert not hasattr(view, "event_names")


def test_dispatcher_facet_only_emits_and_lists() -> None:
    emitter = SafeEmitter()
    seen: list[Any] = []
    emitter.on("e", lambda a, b, c: seen.append((a, b, c)))
    view = dispatcher(emitter)

    view.emit("e", 1, 2)

    assert isinstance(view, EventDispatcher)
    assert seen == [(1, 2, None)]
    assert view.event_names() == ["e"]
    assert not hasattr(view, "on")


def test_emitters_are_independent() -> None:
    first = create_safe_emitter()
    second = create_safe_emitter()
    hits: list[str] = []
    first.on("e", lambda a, b, c: hits.append("first"))

    second.emit("e")

    assert hits == []
    assert second.event_names() == []
