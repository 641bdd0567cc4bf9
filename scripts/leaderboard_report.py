from __future__ import annotations

import argparse
import asyncio

from trivia.core.logging import configure_logging_from_settings
from trivia.db.session import get_engine, get_sessionmaker, init_models
from trivia.economy.progress.service import ProgressService
from trivia.game.modes.catalog import GAME_MODES_CONFIG


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the best players of one game mode.")
    parser.add_argument("mode", choices=sorted(GAME_MODES_CONFIG))
    parser.add_argument("--limit", type=int, default=10)
    return parser.parse_args(argv)


async def _run(mode_code: str, limit: int) -> int:
    engine = get_engine()
    await init_models(engine)
    try:
        async with get_sessionmaker()() as session:
            entries = await ProgressService.list_leaderboard(session, mode_code=mode_code, limit=limit)
    finally:
        await engine.dispose()

    print(f"leaderboard_report mode={mode_code} entries={len(entries)}")  # noqa: T201
    for entry in entries:
        print(  # noqa: T201
            f"leaderboard_report rank={entry.rank} user_id={entry.user_id} "
            f"best_score={entry.best_score} best_points={entry.best_points}"
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging_from_settings()
    return asyncio.run(_run(args.mode, args.limit))


if __name__ == "__main__":
    raise SystemExit(main())
