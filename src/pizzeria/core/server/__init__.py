from .features import get_feature_routers
from .appbuilder import AppBuilder
from .build_router import build_router
from .custom_fastapi import CustomFastApi
from .empty_response import no_content

__all__ = [
    "AppBuilder",
    "CustomFastApi",
    "build_router",
    "get_feature_routers",
    "no_content",
]
