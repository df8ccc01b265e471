"""
Lift helpers for composite-returning async functions.

    from composable import lift as L

    user = L.collapsed(lambda: repo.find_user(42), error=lambda: NotFound(42))
    user = L.call_collapsed(repo.find_user, 42)(error=lambda: NotFound(42))

    @L.lifted_collapsed(error=lambda: NotFound())
    async def find_user(user_id: int) -> Result[Option[User], DbError]: ...
"""

from __future__ import annotations

from .call import call_collapsed, collapsed, lifted_collapsed

__all__ = (
    "collapsed",
    "call_collapsed",
    "lifted_collapsed",
)
