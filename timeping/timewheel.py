"""A hashed timing wheel: slots of tasks grouped by the lap they fire on."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable

from timeping.tlist import Node, Tlist, TlistError

logger = logging.getLogger(__name__)

DEFAULT_POOL_SIZE = 1000


@dataclass(frozen=True)
class TaskRequest:
    """A task to place on the wheel: slot ``position`` on lap ``rounds``."""

    task_id: int
    position: int
    rounds: int


@dataclass
class _Round:
    rounds: int
    tasks: Tlist


class TimeWheel:
    """Timing wheel whose task nodes come from a fixed pool."""

    def __init__(
        self,
        size: int,
        pool_size: int = DEFAULT_POOL_SIZE,
        executor: Callable[[int], object] | None = None,
    ) -> None:
        if size <= 0:
            raise ValueError(f"wheel size must be positive, got {size}")
        if pool_size < 0:
            raise ValueError(f"pool size must not be negative, got {pool_size}")
        self.size = size
        self._slots: list[list[_Round]] = [[] for _ in range(size)]
        self._unused = Tlist()
        for _ in range(pool_size):
            self._unused.push_back(Node())
        self._executor = executor
        self._index = 0
        self._wheel = 0
        self._lock = threading.Lock()

    @property
    def index(self) -> int:
        """The slot the next tick will look at."""
        return self._index

    @property
    def wheel(self) -> int:
        """The current lap."""
        return self._wheel

    @property
    def free(self) -> int:
        """Number of task nodes still available."""
        with self._lock:
            return len(self._unused)

    def _slot(self, position: int) -> list[_Round]:
        if not 0 <= position < self.size:
            raise IndexError(f"position {position} outside wheel of size {self.size}")
        return self._slots[position]

    def add_task(self, request: TaskRequest) -> None:
        """Place a task in its slot, keeping laps in ascending order."""
        with self._lock:
            slot = self._slot(request.position)
            if self._unused.is_empty():
                raise TlistError("no free task nodes")
            node = self._unused.pop_front()
            node.value = request.task_id
            for at, group in enumerate(slot):
                if group.rounds == request.rounds:
                    group.tasks.push_back(node)
                    return
                if group.rounds > request.rounds:
                    slot.insert(at, self._new_round(request.rounds, node))
                    return
            slot.append(self._new_round(request.rounds, node))

    @staticmethod
    def _new_round(rounds: int, node: Node) -> _Round:
        tasks = Tlist()
        tasks.push_back(node)
        return _Round(rounds, tasks)

    def delete_task(self, request: TaskRequest) -> bool:
        """Remove a task; return False if it was not on the wheel."""
        with self._lock:
            slot = self._slot(request.position)
            for group in slot:
                if group.rounds != request.rounds:
                    continue
                for node in group.tasks:
                    if node.value == request.task_id:
                        node.move()
                        node.value = None
                        self._unused.push_back(node)
                        if group.tasks.is_empty():
                            slot.remove(group)
                        return True
        logger.warning("未找到对应的任务，可能已经被删除")
        return False

    def tick(self) -> list[int]:
        """Fire the current slot's tasks for this lap and advance one slot."""
        with self._lock:
            slot = self._slots[self._index]
            executed: list[int] = []
            for group in [g for g in slot if g.rounds == self._wheel]:
                for node in group.tasks:
                    executed.append(node.value)
                    node.move()
                    node.value = None
                    self._unused.push_back(node)
                slot.remove(group)
            self._index += 1
            if self._index == self.size:
                self._index = 0
                self._wheel += 1
        if self._executor is not None:
            for task_id in executed:
                self._executor(task_id)
        return executed

    def pending(self, position: int) -> list[TaskRequest]:
        """Tasks waiting in slot ``position``, by lap then insertion order."""
        with self._lock:
            return [
                TaskRequest(node.value, position, group.rounds)
                for group in self._slot(position)
                for node in group.tasks
            ]

    def run(self, interval: float, stop_event: threading.Event) -> None:
        """Tick every ``interval`` seconds until ``stop_event`` is set."""
        while not stop_event.wait(interval):
            self.tick()