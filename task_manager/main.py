import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from .config import Settings, settings
from .docs import API_DESCRIPTION, ENDPOINTS, OPENAPI_TAGS, build_servers
from .api import tasks
from .storage.task_store import TaskStore

# 配置日志
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

DOCS_URL = "/api-docs"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 启动时初始化
    config = app.state.settings
    logger.info(f"🚀 任务管理 API 启动, 端口: {config.port}")
    logger.info(f"📚 文档: {config.local_url}{DOCS_URL}")
    yield
    # 关闭时清理
    logger.info(f"👋 任务管理 API 关闭, 剩余任务数: {app.state.task_store.count()}")


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return "请求数据无效: " + "; ".join(parts)


def create_app(config: Optional[Settings] = None, store: Optional[TaskStore] = None) -> FastAPI:
    """创建应用，任务存储随应用生命周期存在"""
    config = config or settings

    if store is None:
        store = TaskStore()
        if config.seed_example_task:
            store.seed()

    app = FastAPI(
        title=config.app_title,
        description=API_DESCRIPTION,
        version=config.app_version,
        lifespan=lifespan,
        servers=build_servers(config),
        openapi_tags=OPENAPI_TAGS,
        docs_url=DOCS_URL,
        redoc_url=None,
        openapi_url="/openapi.json",
    )
    app.state.settings = config
    app.state.task_store = store

    # CORS 配置
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(f"请求校验失败 {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": _describe_validation_errors(exc)},
        )

    # 路由注册
    app.include_router(tasks.router)

    @app.get("/", summary="服务信息", tags=["系统"])
    async def root():
        """获取 API 接口索引"""
        return {
            "message": config.app_title,
            "documentation": DOCS_URL,
            "endpoints": ENDPOINTS,
        }

    @app.get("/health", summary="健康检查", tags=["系统"])
    async def health():
        """检查服务健康状态"""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "task_manager.main:app",
        host=settings.host,
        port=settings.port,
    )
