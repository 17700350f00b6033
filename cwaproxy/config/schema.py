"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from cwaproxy.config.defaults import CWA_BASE_URL, CWA_FORECAST_DATASET


class CwaConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    base_url: str = CWA_BASE_URL
    dataset_id: str = CWA_FORECAST_DATASET
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    cors_origins: list[str] = ["*"]


class ProxyConfig(BaseModel):
    model_config = {"extra": "forbid"}

    cwa: CwaConfig = CwaConfig()
    server: ServerConfig = ServerConfig()
    default_city: str = "kaohsiung"
    log_level: str = "INFO"
