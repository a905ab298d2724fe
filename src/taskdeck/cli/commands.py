# src/taskdeck/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import Task, TaskFilter

CommandEmitter = Callable[[str], None]
CommandHandler3 = Callable[[AppState, list[str], str], str]
CommandHandler4 = Callable[[AppState, list[str], str, CommandEmitter | None], str]
CommandHandler = CommandHandler3 | CommandHandler4

logger = logging.getLogger(__name__)

POSTS_SHOWN_LIMIT = 20


class CommandRegistry:
    """Slash-command registry used by the console (/help, /add, ...)."""

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

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Handlers get the split args and the raw remainder after the command name.
        """
        if not line.startswith("/"):
            return None

        head, _, rest = line[1:].partition(" ")
        name = head.strip().lower()
        if not name:
            return "Empty command. Use /help to list available commands."

        rest = rest.strip()
        args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 4

        if nparams >= 4:
            h4 = cast(CommandHandler4, handler)
            return h4(state, args, rest, emit)

        h3 = cast(CommandHandler3, handler)
        return h3(state, args, rest)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  Any other line adds a task. /exit to quit.")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(task: Task, position: int | None = None) -> str:
    mark = "x" if task.completed else " "
    prefix = f"#{position} " if position is not None else ""
    return f"{prefix}[{mark}] {task.text}  (id={task.id})"


def resolve_task_ref(state: AppState, ref: str) -> int | None:
    """
    "#n" -> id of the n-th task in the current filtered view (1-based);
    digits -> the id itself; anything else -> None.
    """
    ref = ref.strip()
    if ref.startswith("#"):
        try:
            pos = int(ref[1:])
        except ValueError:
            return None
        view = state.tasks.filtered_view()
        if 1 <= pos <= len(view):
            return view[pos - 1].id
        return None
    try:
        return int(ref)
    except ValueError:
        return None


def render_task_list(state: AppState) -> str:
    mgr = state.tasks
    view = mgr.filtered_view()
    header = f"Tasks [{mgr.filter.value}] {len(view)}/{len(mgr.tasks)}:"
    if not view:
        return f"{header}\n  (nothing here)"
    return "\n".join([header] + [f"  {format_task(t, i)}" for i, t in enumerate(view, start=1)])


def cmd_help(state: AppState, args: list[str], rest: str) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str], rest: str) -> str:
    c = state.tasks.counts()
    settings = state.settings
    saved = "OK" if state.tasks.last_save_ok else "FAILED (changes kept in memory)"
    return (
        "Status:\n"
        f"  Tasks: {c['total']} total, {c['active']} active, {c['completed']} completed\n"
        f"  Filter: {state.tasks.filter.value}\n"
        f"  Theme: {state.theme}\n"
        f"  Store: {getattr(settings, 'store_backend', '?')} "
        f"({getattr(settings, 'store_path', '?')})\n"
        f"  Last save: {saved}"
    )


def cmd_add(state: AppState, args: list[str], rest: str) -> str:
    task = state.tasks.add_task(rest)
    if task is None:
        return "Usage: /add <text> (text must not be empty)."
    return f"Added: {format_task(task)}"


def cmd_list(state: AppState, args: list[str], rest: str) -> str:
    return render_task_list(state)


def cmd_toggle(state: AppState, args: list[str], rest: str) -> str:
    if not args:
        return "Usage: /toggle <id | #n>."
    task_id = resolve_task_ref(state, args[0])
    task = state.tasks.toggle_task(task_id) if task_id is not None else None
    if task is None:
        return f"No such task: {args[0]}."
    return f"{'Completed' if task.completed else 'Reopened'}: {format_task(task)}"


def cmd_delete(state: AppState, args: list[str], rest: str) -> str:
    if not args:
        return "Usage: /delete <id | #n>."
    task_id = resolve_task_ref(state, args[0])
    task = state.tasks.delete_task(task_id) if task_id is not None else None
    if task is None:
        return f"No such task: {args[0]}."
    return f"Deleted: {task.text}"


def cmd_filter(state: AppState, args: list[str], rest: str) -> str:
    """
    /filter                      -> show current filter
    /filter all|active|completed -> switch and show the view
    """
    if not args:
        options = " | ".join(f.value.lower() for f in TaskFilter)
        return f"Filter is {state.tasks.filter.value}. Use /filter {options}."
    try:
        state.tasks.set_filter(args[0])
    except ValueError:
        return f"Unknown filter: {args[0]}. Use all, active or completed."
    return render_task_list(state)


def cmd_theme(state: AppState, args: list[str], rest: str) -> str:
    return f"Theme: {state.toggle_theme()}."


def cmd_posts(
    state: AppState,
    args: list[str],
    rest: str,
    emit: CommandEmitter | None = None,
) -> str:
    """
    /posts          -> list posts (fetched once)
    /posts <query>  -> list posts whose title contains query
    /posts refresh  -> refetch
    """
    browser = state.posts

    if args and args[0].lower() == "refresh":
        if emit:
            with contextlib.suppress(Exception):
                emit("[POSTS] Refreshing...")
        browser.refresh()
        browser.set_query("")
    else:
        if not browser.loaded and emit:
            with contextlib.suppress(Exception):
                emit("[POSTS] Loading...")
        browser.ensure_loaded()
        browser.set_query(rest)

    if browser.error:
        return "Error loading data."

    posts = browser.visible()
    if not posts:
        return f"No posts match {browser.query!r}." if browser.query else "No posts."

    lines = [f"Posts ({len(posts)}):"]
    for p in posts[:POSTS_SHOWN_LIMIT]:
        lines.append(f"  {p.id}. {p.title}")
    if len(posts) > POSTS_SHOWN_LIMIT:
        lines.append(f"  ... {len(posts) - POSTS_SHOWN_LIMIT} more (narrow with /posts <query>)")
    return "\n".join(lines)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task counts, filter, theme and store.")
registry.register("add", cmd_add, help_text="Add a task: /add <text>.")
registry.register("list", cmd_list, help_text="Show tasks in the current filter.", aliases=["ls"])
registry.register(
    "toggle", cmd_toggle, help_text="Complete/reopen a task: /toggle <id | #n>.", aliases=["done"]
)
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id | #n>.", aliases=["rm"])
registry.register("filter", cmd_filter, help_text="Set view filter: /filter all | active | completed.")
registry.register("theme", cmd_theme, help_text="Toggle light/dark theme.")
registry.register(
    "posts", cmd_posts, help_text="Browse remote posts: /posts [query] | /posts refresh."
)
