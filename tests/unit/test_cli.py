"""Unit tests for the command-line interface."""

import asyncio

from inkfolio.cli import check_health, main
from inkfolio.config import Settings
from inkfolio.core.security import verify_password
from inkfolio.database import Post, create_engine_for, create_session_maker
from inkfolio.repositories import PostRepository


def test_hash_password_prints_usable_hash(capsys):
    assert main(["hash-password", "s3cret"]) == 0

    lines = [line.strip() for line in capsys.readouterr().out.splitlines()]
    hashed = next(line for line in lines if line.startswith("$2"))
    assert verify_password("s3cret", hashed)


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()


def test_seed_command(monkeypatch, database_url):
    monkeypatch.setenv("DATABASE_URL", database_url)

    assert main(["seed"]) == 0
    assert main(["seed"]) == 0

    async def count_posts():
        engine = create_engine_for(Settings().DATABASE_URL)
        async with create_session_maker(engine)() as session:
            posts = await PostRepository(Post, session).get_multi()
        await engine.dispose()
        return len(posts)

    assert asyncio.run(count_posts()) == 1


def test_init_db_command(monkeypatch, database_url, tmp_path):
    monkeypatch.setenv("DATABASE_URL", database_url)

    assert main(["init-db"]) == 0
    assert (tmp_path / "inkfolio.db").exists()


def test_check_health_unreachable():
    assert check_health("http://127.0.0.1:9/api/health", timeout=0.5) is False
