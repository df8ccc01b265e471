from __future__ import annotations

from _infra import FakeRepo, NotFound, Unavailable, User, banner, run

from composable import async_map, lift as L, unwrap_or_err, unwrap_or_map_err
from kungfu import Error, Ok, Some


async def greet(user: User) -> str:
    return f"hello, {user.name}"


async def main() -> None:
    banner("01_collapse: unwrap_or_* + async_map + lift")

    repo = FakeRepo(users={42: User(id=42, name="ada")})

    # Found / missing collapse to one Result
    for user_id in (42, 7):
        match unwrap_or_err(await repo.find_user(user_id), NotFound(user_id)):
            case Ok(user):
                print(f"found: {user.name}")
            case Error(err):
                print(f"error: {err!r}")

    # Keep the database error instead of dropping it
    repo.down = True
    result = unwrap_or_map_err(
        await repo.find_user(42),
        NotFound(42),
        lambda e: Unavailable(str(e)),
    )
    print(f"down: {result!r}")
    repo.down = False

    # Async transformation over an Option
    greeting = await async_map(Some(User(id=1, name="grace")), greet)
    print(f"mapped: {greeting!r}")

    # Same lookup as a lazy pipeline step
    pipeline = L.call_collapsed(repo.find_user, 42)(error=lambda: NotFound(42)).map(lambda u: u.name)
    print(f"pipeline: {await pipeline()!r}")


if __name__ == "__main__":
    run(main)
