#!/usr/bin/env python3
"""List users from the Users API.

Usage:
    ./scripts/list_users.py                 # every user
    ./scripts/list_users.py 3               # just user 3
    ./scripts/list_users.py --api-url http://staging:4000
"""

import argparse
import sys
from pathlib import Path

import httpx
from rich.console import Console

root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path / "src" / "api"))

from client.user_list import (  # noqa: E402
    DEFAULT_API_URL,
    UnexpectedStatusError,
    UserListClient,
    render,
)

console = Console()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="List users delivered by the Users API",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "user_id",
        nargs="?",
        type=int,
        help="Show only this user",
    )
    parser.add_argument(
        "--api-url",
        default=DEFAULT_API_URL,
        help="Base URL of the API",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    with UserListClient(base_url=args.api_url) as client:
        try:
            users = client.fetch(args.user_id)
        except UnexpectedStatusError as e:
            console.print(f"[yellow]{e}[/yellow]")
            return 1
        except httpx.HTTPError as e:
            console.print(f"[red]Request to {args.api_url} failed: {e}[/red]")
            return 1

    render(console, users, args.user_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
