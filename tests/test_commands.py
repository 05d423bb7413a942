# tests/test_commands.py

from __future__ import annotations

from task_tracker.cli.commands import CommandRegistry, ConsoleSession, registry


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def h(state, session, args):
        called.append(args)
        return "ok"

    reg.register("a", h, "a", aliases=["x"])

    session = ConsoleSession(caller="alice")
    assert reg.handle(state, session, '/a one "two words"') == "ok"
    assert reg.handle(state, session, "/X") == "ok"
    assert called == [["one", "two words"], []]
    assert "/a - a" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    session = ConsoleSession(caller="alice")
    assert reg.handle(state, session, "hello") is None
    assert "Unknown command" in (reg.handle(state, session, "/nope") or "")
    assert "Empty command" in (reg.handle(state, session, "/") or "")
    assert "Cannot parse" in (reg.handle(state, session, '/a "unterminated') or "")


def test_console_flow_add_show_switch_caller(state) -> None:
    session = ConsoleSession(caller="alice")

    out = registry.handle(state, session, '/add "Fix login" "Users get 500" bob 2026-01-01')
    assert out is not None and out.startswith("t1  Fix login <In Progress>")

    assert "Fix login" in (registry.handle(state, session, "/show t1") or "")
    assert "t1" in (registry.handle(state, session, "/overdue") or "")

    registry.handle(state, session, "/as mallory")
    assert session.caller == "mallory"
    assert (registry.handle(state, session, "/show t1") or "").startswith("[NotAuthorized]")
    assert (registry.handle(state, session, "/delete t1") or "").startswith("[NotAuthorized]")

    comment = registry.handle(state, session, "/comment t1 looks good to me")
    assert "#1: looks good to me" in (comment or "")


def test_console_update_and_tag(state) -> None:
    session = ConsoleSession(caller="alice")
    registry.handle(state, session, '/add "Title" "Desc" bob 2026-02-01')

    out = registry.handle(state, session, '/update t1 title="New title" due_date=2026-03-01')
    assert "New title" in (out or "") and "due=2026-03-01" in (out or "")
    assert "Expected field=value" in (registry.handle(state, session, "/update t1 bogus=1") or "")

    tagged = registry.handle(state, session, "/tag t1 urgent backend")
    assert "[tags: urgent, backend]" in (tagged or "")
    assert "t1" in (registry.handle(state, session, "/bytag urgent") or "")
    assert registry.handle(state, session, "/bytag nothing") == "No tasks."
