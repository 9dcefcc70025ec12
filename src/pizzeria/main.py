from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from pizzeria.core.config import Config, load_config
from pizzeria.core.server import AppBuilder, CustomFastApi
from pizzeria.core.telemetry import setup_tracing
from pizzeria.domain import Pizza


def create_builder(config: Config | None = None) -> AppBuilder:
    config = config or load_config()
    Pizza.use_margin(config.pricing.margin)

    if config.env.telemetry.enabled:
        setup_tracing(config.name, config.version)

    builder = AppBuilder(config=config).build()

    if config.env.telemetry.enabled:
        FastAPIInstrumentor.instrument_app(
            builder.app, excluded_urls="/docs.*,/redoc,/openapi.json,/health"
        )
    return builder


def create_app(config: Config | None = None) -> CustomFastApi:
    return create_builder(config).app


if __name__ == "__main__":
    create_builder().run()
