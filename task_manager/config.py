from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """服务配置（环境变量 / .env）"""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_title: str = "任务管理 API"
    app_version: str = "1.0.0"

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # 生产环境地址，出现在 OpenAPI servers 列表中
    public_url: str = ""

    seed_example_task: bool = True

    @property
    def local_url(self) -> str:
        return f"http://localhost:{self.port}"


settings = Settings()
