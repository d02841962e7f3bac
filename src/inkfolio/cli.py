import argparse
import asyncio
import sys

import httpx
from rich import print as rprint

from .config import Settings
from .core.security import hash_password
from .database import create_engine_for, create_session_maker, init_db
from .log import configure_logging
from .seed import seed


async def init_database(settings: Settings) -> None:
    engine = create_engine_for(settings.DATABASE_URL)
    try:
        await init_db(engine)
    finally:
        await engine.dispose()


async def seed_database(settings: Settings, force: bool = False) -> int:
    engine = create_engine_for(settings.DATABASE_URL)
    try:
        await init_db(engine)
        async with create_session_maker(engine)() as session:
            return await seed(session, force=force)
    finally:
        await engine.dispose()


def check_health(url: str, timeout: float = 5.0) -> bool:
    """Probe the health endpoint and print the result."""
    try:
        response = httpx.get(url, timeout=timeout)
    except httpx.HTTPError as e:
        rprint(f"[bold red]✗ {url}: {e}")
        return False

    if response.status_code != 200:
        rprint(f"[bold yellow]⚠ {url}: HTTP {response.status_code}")
        return False

    body = response.json()
    rprint(f"[bold green]✓ {url}: {body.get('status')} (version {body.get('version')})")
    return True


def main(argv: list[str] | None = None) -> int:
    """
    Command-line interface (CLI) entry point for the Inkfolio API.
    """
    parser = argparse.ArgumentParser(description="Inkfolio blog and portfolio API")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Serve command
    subparsers.add_parser("serve", help="Run the API server")

    # Hash-password command
    hash_parser = subparsers.add_parser(
        "hash-password", help="Print a bcrypt hash to use as ADMIN_PASSWORD"
    )
    hash_parser.add_argument("password", type=str, help="Admin password to hash")

    # Init-db command
    subparsers.add_parser("init-db", help="Create database tables")

    # Seed command
    seed_parser = subparsers.add_parser("seed", help="Insert sample content")
    seed_parser.add_argument(
        "--force",
        action="store_true",
        help="Clear tables that already have rows before seeding",
    )

    # Check-health command
    settings = Settings()
    health_parser = subparsers.add_parser("check-health", help="Probe a running server")
    health_parser.add_argument(
        "--url",
        type=str,
        default=f"http://localhost:{settings.API_PORT}/api/health",
        help="Health endpoint URL",
    )

    args = parser.parse_args(argv)
    configure_logging(settings.LOG_LEVEL)

    if args.command == "hash-password":
        rprint("\n[bold]--- Hashed Password ---")
        print(hash_password(args.password))
        rprint("[bold]-----------------------\n")
        rprint("Set this value as ADMIN_PASSWORD in your .env or deployment environment.")
        return 0
    elif args.command == "init-db":
        asyncio.run(init_database(settings))
        rprint(f"[bold green]Tables created in {settings.DATABASE_URL}")
        return 0
    elif args.command == "seed":
        inserted = asyncio.run(seed_database(settings, force=args.force))
        rprint(f"[bold green]Seed completed: {inserted} rows inserted")
        return 0
    elif args.command == "check-health":
        return 0 if check_health(args.url) else 1
    elif args.command == "serve":
        from .server import run
        run(settings)
        return 0
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
