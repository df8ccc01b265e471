from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

from kungfu import Error, Nothing, Ok, Option, Result, Some

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class DbError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class NotFound(Exception):
    user_id: int


@dataclass(frozen=True, slots=True)
class Unavailable(Exception):
    reason: str


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str


def _empty_users() -> dict[int, User]:
    return {}


@dataclass(slots=True)
class FakeRepo:
    users: dict[int, User] = field(default_factory=_empty_users)
    delay_seconds: float = 0.0
    down: bool = False

    async def find_user(self, user_id: int) -> Result[Option[User], DbError]:
        await asyncio.sleep(self.delay_seconds)
        if self.down:
            return Error(DbError("db: connection refused"))
        user = self.users.get(user_id)
        if user is None:
            return Ok(Nothing())
        return Ok(Some(user))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
