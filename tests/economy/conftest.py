from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from trivia.db.session import build_engine, build_sessionmaker, init_models


@pytest.fixture
async def db_session(tmp_path: Path) -> AsyncIterator[AsyncSession]:
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'progress.db'}")
    await init_models(engine)
    session_factory = build_sessionmaker(engine)

    async with session_factory() as session:
        yield session

    await engine.dispose()
