#!/usr/bin/env python3
"""User Directory Viewer.

Renders one page of the user directory, plus the dashboard summary,
as rich tables in the terminal.

Usage:
    uv run python scripts/show_directory.py --page 2 --query wong --role user

Environment Variables:
    USER_DIRECTORY_GATEWAY: http or memory (default: http)
    USER_DIRECTORY_BASE_URL: Remote users service (default: https://reqres.in/api)
    USER_DIRECTORY_API_KEY: Optional API key for the remote service
"""

import argparse
import asyncio
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path / "src" / "api"))

from directory.application.store import DirectoryStore  # noqa: E402
from directory.dependencies import (  # noqa: E402
    get_directory_store,
    get_notifier,
    get_user_gateway,
)
from directory.domain.filtering import UserFilter  # noqa: E402
from directory.infrastructure.http_gateway import HttpUserGateway  # noqa: E402
from directory.presentation.badges import role_badge, status_badge  # noqa: E402
from infrastructure.logging import configure_logging  # noqa: E402
from infrastructure.settings import get_settings  # noqa: E402


console = Console()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show one page of the user directory",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--page", type=int, default=1, help="1-based page number")
    parser.add_argument("--query", default="", help="Search first name, last name or email")
    parser.add_argument("--role", default="", help="Only show this role")
    parser.add_argument("--status", default="", help="Only show this status")
    return parser.parse_args()


def render_users(store: DirectoryStore, user_filter: UserFilter) -> Table:
    state = store.state
    table = Table(
        title=f"Users - page {state.current_page} of {max(state.total_pages, 1)}",
        box=box.ROUNDED,
    )
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Email")
    table.add_column("Role")
    table.add_column("Status")

    for user in user_filter.apply(state.users):
        role = role_badge(user.role)
        status = status_badge(user.status)
        table.add_row(
            str(user.id),
            user.full_name,
            user.email,
            Text(role.label, style=role.color),
            Text(status.label, style=status.color),
        )
    return table


def render_summary(store: DirectoryStore) -> Table:
    stats = store.statistics()
    table = Table(title="Summary", box=box.SIMPLE)
    table.add_column("Metric")
    table.add_column("Count", justify="right")
    table.add_row("Total users", str(stats.total))
    for status, count in stats.by_status.items():
        table.add_row(status_badge(status).label, str(count))
    for role, count in stats.by_role.items():
        table.add_row(f"{role_badge(role).label}s", str(count))
    return table


async def run(args: argparse.Namespace) -> int:
    try:
        user_filter = UserFilter.from_inputs(args.query, args.role, args.status)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        return 2

    notifier = get_notifier()
    gateway = get_user_gateway(notifier)
    store = get_directory_store(notifier=notifier, gateway=gateway)
    try:
        await store.fetch_page(args.page)
    finally:
        if isinstance(gateway, HttpUserGateway):
            await gateway.aclose()

    if store.state.error:
        console.print(f"[red]{store.state.error}[/red]")
        return 1

    console.print(render_users(store, user_filter))
    console.print(render_summary(store))
    return 0


def main():
    args = parse_args()
    configure_logging(debug=get_settings().debug)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
