from __future__ import annotations

import asyncio
from collections.abc import Iterator
from datetime import datetime, timezone
from pathlib import Path

import pytest

from scripts.leaderboard_report import main
from trivia.core.config import get_settings
from trivia.db.session import build_engine, build_sessionmaker, get_engine, get_sessionmaker, init_models
from trivia.economy.progress.service import ProgressService
from trivia.game.modes.types import ModeKind
from tests.economy.progress_fixtures import run_result

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _clear_caches() -> None:
    get_settings.cache_clear()
    get_engine.cache_clear()
    get_sessionmaker.cache_clear()


@pytest.fixture
def database_url(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    url = f"sqlite+aiosqlite:///{tmp_path / 'leaderboard.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    _clear_caches()
    yield url
    _clear_caches()


async def _seed(database_url: str) -> None:
    engine = build_engine(database_url)
    await init_models(engine)
    async with build_sessionmaker(engine).begin() as session:
        for user_id, score in ((7, 4), (8, 11)):
            await ProgressService.record_game_result(
                session,
                user_id=user_id,
                result=run_result(ModeKind.SURVIVAL, score=score, points=score * 100),
                now_utc=NOW,
            )
    await engine.dispose()


def test_engine_follows_configured_database_url(database_url: str) -> None:
    engine = get_engine()

    assert str(engine.url) == database_url
    assert get_sessionmaker().kw["bind"] is engine


def test_leaderboard_report_prints_ranked_players(database_url: str, capsys: pytest.CaptureFixture[str]) -> None:
    asyncio.run(_seed(database_url))

    assert main(["survival", "--limit", "5"]) == 0

    output = capsys.readouterr().out.splitlines()
    assert "leaderboard_report mode=survival entries=2" in output
    assert "leaderboard_report rank=1 user_id=8 best_score=11 best_points=1100" in output
    assert "leaderboard_report rank=2 user_id=7 best_score=4 best_points=400" in output


def test_leaderboard_report_on_empty_database(database_url: str, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["timeAttack"]) == 0

    assert "leaderboard_report mode=timeAttack entries=0" in capsys.readouterr().out
