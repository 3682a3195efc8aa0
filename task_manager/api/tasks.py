from typing import Annotated, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Path, Request

from ..exceptions import TaskNotFoundError, TaskValidationError
from ..models.task import (
    ErrorResponse,
    TaskCreateRequest,
    TaskListResponse,
    TaskResponse,
    TaskUpdateRequest,
)
from ..services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["任务"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "任务不存在"}}

# 按字符串接收，非数字返回 404 而不是 422；文档中显示为整数
TaskId = Annotated[str, Path(
    description="任务 ID",
    examples=[1],
    json_schema_extra={"type": "integer"},
)]


def get_task_service(request: Request) -> TaskService:
    """从应用状态中取出任务存储"""
    return TaskService(request.app.state.task_store)


def require_existing_task(
    task_id: TaskId,
    service: TaskService = Depends(get_task_service)
) -> str:
    """先确认任务存在，再校验请求体"""
    try:
        service.get_task(task_id)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return task_id


@router.get(
    "",
    response_model=TaskListResponse,
    response_model_exclude_none=True,
    summary="列出所有任务",
    description="按创建顺序返回全部任务及总数"
)
async def list_tasks(service: TaskService = Depends(get_task_service)):
    tasks, total = service.list_tasks()
    return TaskListResponse(data=tasks, total=total)


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
    summary="按 ID 查询任务"
)
async def get_task(task_id: TaskId, service: TaskService = Depends(get_task_service)):
    """
    查询单个任务

    - **task_id**: 任务 ID（整数，非数字同样返回 404）
    """
    try:
        task = service.get_task(task_id)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return TaskResponse(data=task)


@router.post(
    "",
    status_code=201,
    response_model=TaskResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse, "description": "请求数据无效"}},
    summary="创建任务"
)
async def create_task(
    request: TaskCreateRequest,
    service: TaskService = Depends(get_task_service)
):
    """
    创建新任务

    - **title**: 任务标题（必填，不能为空）
    - **description**: 任务描述，默认为空字符串
    - **completed**: 是否完成，默认为 false
    """
    try:
        task = service.create_task(request)
    except TaskValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return TaskResponse(message="任务创建成功", data=task)


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
    summary="更新任务"
)
async def update_task(
    task_id: str = Depends(require_existing_task),
    request: Optional[TaskUpdateRequest] = Body(None),
    service: TaskService = Depends(get_task_service)
):
    """
    更新任务（部分更新）

    - 只修改请求中出现的字段，`false` 和空字符串同样会被写入
    - 每次更新都会刷新 **updatedAt**
    - 请求体可以省略，等同于空对象
    """
    try:
        task = service.update_task(task_id, request if request is not None else TaskUpdateRequest())
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return TaskResponse(message="任务更新成功", data=task)


@router.delete(
    "/{task_id}",
    response_model=TaskResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
    summary="删除任务"
)
async def delete_task(task_id: TaskId, service: TaskService = Depends(get_task_service)):
    """删除任务，返回被删除的记录"""
    try:
        task = service.delete_task(task_id)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return TaskResponse(message="任务删除成功", data=task)
