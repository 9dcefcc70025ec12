import importlib
import pkgutil
from typing import List

from fastapi import APIRouter


def get_feature_routers(
    features_path: str = "features", router_var_name: str = "router"
) -> List[APIRouter]:
    """
    Imports every module below the ``features_path`` package and returns the
    routers they expose.

    Args:
        features_path: dotted package name, e.g. ``pizzeria.features``.
        router_var_name: module attribute holding the router.

    Returns:
        The routers found, in module name order.
    """
    try:
        package = importlib.import_module(features_path)
    except ImportError as e:
        raise RuntimeError(f"Features package not found: {features_path}") from e

    routers = []
    modules = sorted(
        pkgutil.walk_packages(package.__path__, prefix=f"{package.__name__}."),
        key=lambda info: info.name,
    )
    for module_info in modules:
        short_name = module_info.name.rsplit(".", 1)[-1]
        if short_name.startswith("_") or short_name.startswith("test_"):
            continue

        try:
            module = importlib.import_module(module_info.name)
        except Exception as e:
            raise RuntimeError(f"Error importing {module_info.name}: {e}") from e

        router = getattr(module, router_var_name, None)
        if isinstance(router, APIRouter):
            routers.append(router)

    return routers
