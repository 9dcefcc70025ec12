from .config import (
    Config,
    EnvConfig,
    DatabaseConfig,
    TelemetryConfig,
    PricingConfig,
    load_config,
    read_config,
)

__all__ = [
    "Config",
    "EnvConfig",
    "DatabaseConfig",
    "TelemetryConfig",
    "PricingConfig",
    "load_config",
    "read_config",
]
