import logging
from typing import List, Tuple, Union
from ..exceptions import TaskNotFoundError, TaskValidationError
from ..models.task import Task, TaskCreateRequest, TaskUpdateRequest, utc_now
from ..storage.task_store import TaskStore

logger = logging.getLogger(__name__)


def parse_task_id(raw: Union[int, str]) -> int:
    """解析路径中的任务 ID，只接受 ASCII 数字，其余一律视为不存在"""
    if isinstance(raw, int):
        return raw
    if not (raw.isascii() and raw.isdigit()):
        raise TaskNotFoundError(raw)
    return int(raw)


class TaskService:
    def __init__(self, store: TaskStore):
        self.store = store

    def list_tasks(self) -> Tuple[List[Task], int]:
        """列出全部任务及总数"""
        tasks = self.store.list_all()
        return tasks, len(tasks)

    def get_task(self, task_id: Union[int, str]) -> Task:
        """按 ID 查询任务"""
        task = self.store.get(parse_task_id(task_id))
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def create_task(self, request: TaskCreateRequest) -> Task:
        """创建任务，未提供的可选字段使用默认值"""
        if not request.title:
            logger.warning("创建任务被拒绝: 缺少 title")
            raise TaskValidationError('字段 "title" 为必填项')

        task = self.store.add(
            title=request.title,
            description=request.description if request.description is not None else "",
            completed=request.completed if request.completed is not None else False,
        )
        logger.info(f"任务已创建: {task.id}, 标题: {task.title}")
        return task

    def update_task(self, task_id: Union[int, str], request: TaskUpdateRequest) -> Task:
        """部分更新：只合并请求中出现的字段"""
        task = self.get_task(task_id)

        changes = request.provided_fields()
        changes["updated_at"] = utc_now()

        updated = task.model_copy(update=changes)
        self.store.replace(updated)
        logger.info(f"任务已更新: {updated.id}, 字段: {sorted(changes)}")
        return updated

    def delete_task(self, task_id: Union[int, str]) -> Task:
        """删除任务并返回被删除的记录"""
        removed = self.store.remove(parse_task_id(task_id))
        if removed is None:
            raise TaskNotFoundError(task_id)
        logger.info(f"任务已删除: {removed.id}")
        return removed
