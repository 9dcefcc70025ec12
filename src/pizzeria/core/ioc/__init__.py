from .component import component, ProviderType, get_component_key
from .container import container, AppContainer
from .deps import deps
from .inject import inject

__all__ = [
    "AppContainer",
    "ProviderType",
    "component",
    "container",
    "deps",
    "get_component_key",
    "inject",
]
