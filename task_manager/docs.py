"""OpenAPI 文档元数据（/api-docs 使用）"""

from typing import Dict, List

from .config import Settings

API_DESCRIPTION = "完整的任务 CRUD 系统：创建、查询、更新、删除任务"

OPENAPI_TAGS = [
    {"name": "任务", "description": "任务的增删改查"},
    {"name": "系统", "description": "服务信息与健康检查"},
]

# 根路径返回的接口索引
ENDPOINTS = {
    "GET /api/tasks": "列出所有任务",
    "GET /api/tasks/:id": "按 ID 查询任务",
    "POST /api/tasks": "创建任务",
    "PUT /api/tasks/:id": "更新任务",
    "DELETE /api/tasks/:id": "删除任务",
}


def build_servers(settings: Settings) -> List[Dict[str, str]]:
    """本地地址始终在列，配置了 PUBLIC_URL 时追加生产地址"""
    servers = [{"url": settings.local_url, "description": "本地服务"}]
    if settings.public_url:
        servers.append({"url": settings.public_url, "description": "生产服务"})
    return servers
