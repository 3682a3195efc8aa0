import logging
from typing import List, Optional
from ..models.task import Task, utc_now

logger = logging.getLogger(__name__)

EXAMPLE_TASK = {"title": "示例任务", "description": "第一个任务", "completed": False}


class TaskStore:
    """任务存储（内存，按插入顺序）"""

    def __init__(self):
        self._tasks: List[Task] = []
        self._next_id = 1

    def seed(self) -> Task:
        """写入示例任务（启动时调用一次）"""
        task = self.add(**EXAMPLE_TASK)
        logger.info(f"已写入示例任务: {task.id}")
        return task

    def add(self, title: str, description: str = "", completed: bool = False) -> Task:
        task = Task(
            id=self._next_id,
            title=title,
            description=description,
            completed=completed,
            created_at=utc_now(),
        )
        self._next_id += 1
        self._tasks.append(task)
        return task.model_copy()

    def get(self, task_id: int) -> Optional[Task]:
        index = self._index_of(task_id)
        if index is None:
            return None
        return self._tasks[index].model_copy()

    def list_all(self) -> List[Task]:
        return [task.model_copy() for task in self._tasks]

    def replace(self, task: Task) -> bool:
        """原位替换同 id 的任务，保持顺序"""
        index = self._index_of(task.id)
        if index is None:
            return False
        self._tasks[index] = task.model_copy()
        return True

    def remove(self, task_id: int) -> Optional[Task]:
        index = self._index_of(task_id)
        if index is None:
            return None
        return self._tasks.pop(index)

    def count(self) -> int:
        return len(self._tasks)

    def _index_of(self, task_id: int) -> Optional[int]:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        return None
