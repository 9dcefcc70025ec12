from fastapi import APIRouter
from pizzeria.core.config import Config, load_config


def build_router(tag: str, config: Config | None = None) -> APIRouter:
    config = config or load_config()
    try:
        tag_conf = config.openapi.tags[tag]
    except KeyError:
        raise RuntimeError(f"Feature '{tag}' is not declared in config.yaml")
    return APIRouter(prefix=tag_conf.prefix, tags=[tag])
