# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable
from dataclasses import dataclass

from ..core.result import Result
from ..core.runtime import iso_from_ns
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import PAYLOAD_FIELDS, Principal, Task, TaskPayload

logger = logging.getLogger(__name__)


@dataclass
class ConsoleSession:
    """Per-console caller identity; /as switches it."""

    caller: Principal


CommandHandler = Callable[[AppState, ConsoleSession, list[str]], str]


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, session: ConsoleSession, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Cannot parse command: {e}"
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."
        return handler(state, session, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def format_task(task: Task) -> str:
    tags = f" [tags: {', '.join(task.tags)}]" if task.tags else ""
    prio = f" (priority: {task.priority})" if task.priority else ""
    lines = [
        f"{task.id}  {task.title} <{task.status}>{prio}{tags}",
        f"    {task.description}",
        f"    creator={task.creator} assignee={task.assigned_to} due={task.due_date}"
        f" created={iso_from_ns(task.created_date)}"
        + (f" updated={iso_from_ns(task.updated_at)}" if task.updated_at is not None else ""),
    ]
    for i, c in enumerate(task.comments, start=1):
        lines.append(f"    #{i}: {c}")
    return "\n".join(lines)


def render(result: Result) -> str:
    if not result.ok:
        return f"[{result.error_kind}] {result.error_message}"
    value = result.value
    if isinstance(value, Task):
        return format_task(value)
    if isinstance(value, list):
        if not value:
            return "No tasks."
        return "\n".join(format_task(t) for t in value)
    return str(value)


# ---- handlers ----


def cmd_help(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    return registry.build_help()


def cmd_whoami(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    return f"Acting as: {session.caller}"


def cmd_as(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    if not args:
        return "Usage: /as <principal>"
    session.caller = args[0]
    logger.debug("Console caller switched to %s", session.caller)
    return f"Now acting as: {session.caller}"


def cmd_list(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    return render(task_api.get_initial_tasks(state))


def cmd_more(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    if len(args) != 2:
        return "Usage: /more <offset> <limit>"
    return render(task_api.load_more_tasks(state, args[0], args[1]))


def cmd_show(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /show <id>"
    return render(task_api.get_task(state, args[0], session.caller))


def cmd_add(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    """
    /add <title> <description> <assignee> <due_date>
    Quote multi-word values: /add "Fix login" "Users get 500" bob 2026-11-01
    """
    if len(args) != 4:
        return 'Usage: /add "<title>" "<description>" <assignee> <due_date (ISO 8601)>'
    payload = TaskPayload(title=args[0], description=args[1], assigned_to=args[2], due_date=args[3])
    return render(task_api.add_task(state, payload, session.caller))


def cmd_update(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    """/update <id> title=... description=... assigned_to=... due_date=..."""
    if len(args) < 2:
        return "Usage: /update <id> field=value ... (fields: title, description, assigned_to, due_date)"
    changes: dict[str, str] = {}
    for pair in args[1:]:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or key not in PAYLOAD_FIELDS:
            return f"Expected field=value with field in {', '.join(PAYLOAD_FIELDS)}, got: {pair}"
        changes[key] = value
    return render(task_api.update_task(state, args[0], changes, session.caller))


def cmd_tag(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /tag <id> <tag> [<tag> ...]"
    return render(task_api.add_tags(state, args[0], args[1:], session.caller))


def cmd_bytag(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /bytag <tag>"
    return render(task_api.get_task_by_tags(state, args[0]))


def cmd_search(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    if not args:
        return "Usage: /search <text>"
    return render(task_api.search_tasks(state, " ".join(args)))


def cmd_status(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    if not args:
        return 'Usage: /status <status>  (e.g. /status "In Progress")'
    return render(task_api.get_tasks_by_status(state, " ".join(args)))


def cmd_mine(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    return render(task_api.get_tasks_by_creator(state, session.caller))


def cmd_by(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /by <creator>"
    return render(task_api.get_tasks_by_creator(state, args[0]))


def cmd_overdue(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    return render(task_api.get_overdue_tasks(state))


def cmd_done(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /done <id>"
    return render(task_api.completed_task(state, args[0]))


def cmd_priority(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    if len(args) != 2:
        return "Usage: /priority <id> <value>"
    return render(task_api.set_task_priority(state, args[0], args[1], session.caller))


def cmd_comment(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /comment <id> <text>"
    return render(task_api.add_task_comment(state, args[0], " ".join(args[1:])))


def cmd_remind(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /remind <id>"
    return render(task_api.send_due_date_reminder(state, args[0]))


def cmd_delete(state: AppState, session: ConsoleSession, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /delete <id>"
    return render(task_api.delete_task(state, args[0], session.caller))


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("whoami", cmd_whoami, help_text="Show the principal commands run as.")
registry.register("as", cmd_as, help_text="Act as another principal: /as <principal>.")
registry.register("list", cmd_list, help_text="Show the first page of tasks.", aliases=["ls"])
registry.register("more", cmd_more, help_text="Page through tasks: /more <offset> <limit>.")
registry.register("show", cmd_show, help_text="Show one of your tasks: /show <id>.")
registry.register("add", cmd_add, help_text='Create a task: /add "<title>" "<desc>" <assignee> <due>.')
registry.register("update", cmd_update, help_text="Edit a task: /update <id> field=value ...")
registry.register("tag", cmd_tag, help_text="Append tags: /tag <id> <tag> ...")
registry.register("bytag", cmd_bytag, help_text="Tasks carrying a tag: /bytag <tag>.")
registry.register("search", cmd_search, help_text="Search title/description: /search <text>.")
registry.register("status", cmd_status, help_text="Tasks with a status: /status <status>.")
registry.register("mine", cmd_mine, help_text="Tasks you created.")
registry.register("by", cmd_by, help_text="Tasks created by someone: /by <creator>.")
registry.register("overdue", cmd_overdue, help_text="Tasks past due and not completed.")
registry.register("done", cmd_done, help_text="Mark a task completed: /done <id>.")
registry.register("priority", cmd_priority, help_text="Set priority: /priority <id> <value>.")
registry.register("comment", cmd_comment, help_text="Comment on a task: /comment <id> <text>.")
registry.register("remind", cmd_remind, help_text="Due-date reminder: /remind <id>.")
registry.register("delete", cmd_delete, help_text="Delete one of your tasks: /delete <id>.", aliases=["rm"])
