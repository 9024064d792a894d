"""应用配置模块

使用 Pydantic Settings 管理应用配置，支持从 .env 文件加载环境变量
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置类"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # 应用配置
    APP_TITLE: str = "生产跟踪系统"
    APP_DESCRIPTION: str = "塑料袋工厂订单与卷材生产跟踪API"
    APP_VERSION: str = "1.0.0"

    # 日志级别
    LOG_LEVEL: str = "INFO"

    # MySQL 配置 - 仅在设置 MYSQL_USER 时使用
    MYSQL_USER: str = ""
    MYSQL_PASSWORD: str = ""
    MYSQL_HOST: str = "127.0.0.1"
    MYSQL_PORT: str = "3306"
    MYSQL_DB: str = "rolltrack"

    # 数据库配置 - 优先使用DATABASE_URL，否则从MySQL配置构建
    DATABASE_URL: str = ""
    ECHO_SQL: bool = False  # 是否打印SQL日志

    # 业务配置
    DEFAULT_OVERRUN_PERCENTAGE: float = 5.0  # 生产单默认超产比例（%）
    MAX_DELIVERY_DAYS: int = 365  # 交货期上限（天）

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # 如果没有显式设置DATABASE_URL，从MySQL配置构建，否则退回本地sqlite
        if not self.DATABASE_URL:
            if self.MYSQL_USER:
                self.DATABASE_URL = (
                    f"mysql+pymysql://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}"
                    f"@{self.MYSQL_HOST}:{self.MYSQL_PORT}/{self.MYSQL_DB}"
                )
            else:
                self.DATABASE_URL = "sqlite:///./rolltrack.db"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


# 创建全局配置实例
settings = Settings()
