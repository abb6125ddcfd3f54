import asyncio
from typing import Coroutine, Set
from structlog import get_logger

logger = get_logger()

class ScopeCancelledError(RuntimeError):
    """Raised when work is launched into a scope that was already cancelled."""

class TaskScope:
    """Group of asyncio tasks sharing one cancellation.

    The owner creates the scope once, launches work into it and calls
    ``cancel()`` exactly once when it is torn down. Tasks leave the scope as
    soon as they finish.
    """

    def __init__(self, name: str = "scope"):
        self.name = name
        self._tasks: Set[asyncio.Task] = set()
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def active(self) -> int:
        return len(self._tasks)

    def launch(self, coro: Coroutine) -> asyncio.Task:
        if self._cancelled:
            coro.close()
            raise ScopeCancelledError(f"{self.name} is cancelled")
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        task = loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        pending = [task for task in self._tasks if not task.done()]
        for task in pending:
            task.cancel()
        logger.info("Task scope cancelled", scope=self.name, cancelled_tasks=len(pending))

    async def join(self) -> None:
        # Tasks launched while waiting are picked up by the next round
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
