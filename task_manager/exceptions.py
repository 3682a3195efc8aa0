"""任务管理自定义异常"""


class TaskManagerError(Exception):
    """任务处理基础异常"""
    pass


class TaskValidationError(TaskManagerError):
    """请求数据校验失败"""
    pass


class TaskNotFoundError(TaskManagerError):
    """任务不存在"""

    def __init__(self, task_id):
        self.task_id = task_id
        super().__init__("任务不存在")
