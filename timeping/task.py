"""A fixed pool of task slots handed out from a queue of unused nodes."""

from __future__ import annotations

from dataclasses import dataclass, field

from timeping.tlist import Node, Tlist, TlistError


@dataclass(eq=False)
class TaskNode:
    """One task slot; its ``tnode`` links it into the pool's queues."""

    used: bool = False
    task_id: int = 0
    tnode: Node = field(default_factory=Node)

    def __post_init__(self) -> None:
        self.tnode.value = self


class TaskPool:
    """Preallocated task slots, all of them queued as unused at first."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"pool size must not be negative, got {size}")
        self.tasks: list[TaskNode] = [TaskNode(task_id=i) for i in range(size)]
        self.unused = Tlist()
        for task in self.tasks:
            self.unused.push_back(task.tnode)

    def get_node(self) -> Node:
        """Take the next unused node off the queue."""
        if self.unused.is_empty():
            raise TlistError("empty")
        return self.unused.pop_front()

    def task_of(self, node: Node) -> TaskNode:
        """Return the task slot that owns ``node``."""
        task = node.value
        if (
            not isinstance(task, TaskNode)
            or task.task_id >= len(self.tasks)
            or self.tasks[task.task_id] is not task
        ):
            raise ValueError("node does not belong to this pool")
        return task