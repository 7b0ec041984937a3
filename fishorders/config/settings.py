"""应用配置模块

使用 Pydantic Settings 管理应用配置，支持从 .env 文件加载环境变量
"""

from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置类"""

    # 应用配置
    APP_TITLE: str = "鱼品订单系统"
    APP_DESCRIPTION: str = "鱼品零售订单定价与账目汇总API"
    APP_VERSION: str = "1.0.0"

    # 定价配置（单位：每公斤价格）
    PRICE_PER_KG: Decimal = Field(default=Decimal("500000"), ge=0)
    DAMAGE_PRICE_PER_KG: Decimal = Field(default=Decimal("250000"), ge=0)
    # 员工折扣率，0.2 表示 20%
    STAFF_DISCOUNT_RATE: Decimal = Field(default=Decimal("0.2"), ge=0, le=1)

    # 发票编号起始值
    INVOICE_START_NUMBER: int = Field(default=6311, ge=1)

    # 日志级别
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


# 创建全局配置实例
settings = Settings()
