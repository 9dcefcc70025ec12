from decimal import Decimal
from pathlib import Path
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field
from pizzeria.core.ioc import component, ProviderType
from dotenv import load_dotenv
import os
import yaml


config: Optional["Config"] = None

ENVIRONMENTS = ("development", "production", "testing")
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config.yaml"

load_dotenv()


class TagConfig(BaseModel):
    prefix: str
    description: Optional[str] = None


class OpenApiConfig(BaseModel):
    title: str
    version: str
    summary: Optional[str] = None
    description: Optional[str] = None
    tags: Dict[str, TagConfig]


class DatabaseConfig(BaseModel):
    url: str
    echo: bool = False


class TelemetryConfig(BaseModel):
    enabled: bool = False


class EnvConfig(BaseModel):
    openapi: bool
    log_level: str = "INFO"
    database: DatabaseConfig
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)


class PricingConfig(BaseModel):
    margin: Decimal = Decimal("1.2")


def read_config(path: str | Path, env_name: str) -> "Config":
    """Parses ``path`` keeping only the ``env_name`` environment section."""
    with open(path, "r", encoding="utf-8") as f:
        data: Dict[str, Any] = yaml.safe_load(f)

    if env_name not in data:
        raise RuntimeError(f"Environment '{env_name}' is not defined in {path}")

    filtered_data = {k: v for k, v in data.items() if k not in ENVIRONMENTS}
    filtered_data["env"] = EnvConfig(**data[env_name])
    return Config(**filtered_data)


def load_config(path: Optional[str] = None) -> "Config":
    global config
    if config is None:
        path = path or os.getenv("CONFIG_PATH") or DEFAULT_CONFIG_PATH
        config = read_config(path, os.getenv("APP_ENV", "production"))
    return config


def _load_config():
    return load_config()


@component(provider_type=ProviderType.FACTORY, factory=_load_config)
class Config(BaseModel):
    name: str
    version: str = "0.1.0"
    openapi: OpenApiConfig
    features: str
    port: int = 8080
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    env: EnvConfig
