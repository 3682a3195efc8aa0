from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Task(BaseModel):
    """任务模型"""
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="任务ID（由服务端分配）")
    title: str = Field(..., description="任务标题")
    description: str = Field(default="", description="任务描述")
    completed: bool = Field(default=False, description="是否已完成")
    created_at: datetime = Field(
        default_factory=utc_now, alias="createdAt", description="创建时间"
    )
    updated_at: Optional[datetime] = Field(
        None, alias="updatedAt", description="最后更新时间（更新后才出现）"
    )


class TaskCreateRequest(BaseModel):
    """创建任务请求"""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "我的任务",
                "description": "任务描述",
                "completed": False,
            }
        }
    )

    # title 的必填校验放在服务层，缺失时返回 400 而不是 422
    title: Optional[str] = Field(None, description="任务标题（必填）")
    description: Optional[str] = Field(None, description="任务描述")
    completed: Optional[bool] = Field(None, description="是否已完成")


class TaskUpdateRequest(BaseModel):
    """更新任务请求（只合并显式提供的字段）"""
    title: Optional[str] = Field(None, description="任务标题")
    description: Optional[str] = Field(None, description="任务描述")
    completed: Optional[bool] = Field(None, description="是否已完成")

    def provided_fields(self) -> dict:
        """请求中显式给出且不为 null 的字段"""
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class TaskResponse(BaseModel):
    """单个任务响应"""
    success: bool = True
    message: Optional[str] = None
    data: Task


class TaskListResponse(BaseModel):
    """任务列表响应"""
    success: bool = True
    data: List[Task]
    total: int


class ErrorResponse(BaseModel):
    """错误响应"""
    success: bool = False
    message: str
