#!/usr/bin/env python3
"""
启动任务管理后端服务
任务保存在进程内存中，只能使用单 worker
"""
import sys
import os

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

if __name__ == "__main__":
    import uvicorn
    from task_manager.config import settings

    print("=" * 50)
    print("🚀 启动任务管理 API")
    print("=" * 50)
    print(f"Host: {settings.host}")
    print(f"Port: {settings.port}")
    print(f"文档: {settings.local_url}/api-docs")
    print("注意: 数据仅保存在内存中，重启后丢失")
    print("=" * 50)

    uvicorn.run(
        "task_manager.main:app",
        host=settings.host,
        port=settings.port,
        workers=1,
        log_level=settings.log_level.lower()
    )
