"""
Command-line front end for the task client.

Usage::

    python -m task_client list
    python -m task_client add "Buy milk"
    python -m task_client done 3
    python -m task_client undo 3
    python -m task_client delete 3

Exit codes follow the same convention as the rest of the tooling:

- ``0`` — the call succeeded
- ``1`` — the task server answered with an error or could not be reached
- ``2`` — bad arguments (raised by argparse itself)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import requests

from task_client.api import TaskApiClient, TaskApiError
from task_client.models import Task

EXIT_OK = 0
EXIT_API_ERROR = 1

logger = logging.getLogger(__name__)


def format_task(task: Task) -> str:
    """Render one task as ``[x] id  title``."""
    mark = "x" if task.get("completed") else " "
    return f"[{mark}] {task.get('id')}  {task.get('title')}"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the task client."""
    parser = argparse.ArgumentParser(prog="task_client", description="Manage tasks on a task server.")
    parser.add_argument("--base-url", help="Task server root URL (default: TASK_API_URL)")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every request")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("list", help="List all tasks")
    add = commands.add_parser("add", help="Create a task")
    add.add_argument("title")
    for name, help_text in (
        ("delete", "Delete a task"),
        ("done", "Mark a task completed"),
        ("undo", "Mark a task not completed"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("task_id")
    return parser.parse_args(argv)


def run(args: argparse.Namespace, client: TaskApiClient) -> int:
    """Execute the parsed command against *client* and print the result."""
    try:
        if args.command == "list":
            for task in client.fetch_tasks():
                print(format_task(task))
        elif args.command == "add":
            print(format_task(client.create_task(args.title)))
        elif args.command == "delete":
            client.delete_task(args.task_id)
            print(f"Deleted task {args.task_id}")
        else:
            print(format_task(client.toggle_task(args.task_id, args.command == "done")))
    except TaskApiError as error:
        print(f"Error: {error}", file=sys.stderr)
        return EXIT_API_ERROR
    except requests.RequestException as error:
        logger.debug("Task server unreachable", exc_info=True)
        print(f"Error: {error}", file=sys.stderr)
        return EXIT_API_ERROR
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for ``python -m task_client``."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    options = {} if args.timeout is None else {"timeout": args.timeout}
    client = TaskApiClient(base_url=args.base_url, **options)
    logger.debug("Using task server %s", client.base_url)
    return run(args, client)


if __name__ == "__main__":
    sys.exit(main())
