import inspect
from collections import defaultdict, deque
from typing import Iterable, get_origin, get_args, Type, TypeVar
from dependency_injector import containers, providers
from pizzeria.core.ioc.component import ProviderType, get_component_key, component
from pizzeria.core.context import context

T = TypeVar("T")


class AppContainer(containers.DynamicContainer):
    def __init__(self):
        super().__init__()
        self._built = False

    def _collect_dependencies(self, cls, provider_type, component_registry):
        deps = set()
        param_map = {}

        if provider_type == ProviderType.OBJECT:
            return deps, param_map

        # classes and factory callables
        if inspect.isclass(cls):
            sig = inspect.signature(cls.__init__)
            params = [p for p in sig.parameters.values() if p.name != "self"]
        elif callable(cls):
            params = list(inspect.signature(cls).parameters.values())
        else:
            params = []

        for p in params:
            if p.annotation is inspect.Parameter.empty:
                continue
            dep_key = get_component_key(p.annotation)
            if dep_key not in component_registry:
                raise ValueError(f"Missing dependency: {dep_key}")
            deps.add(dep_key)
            param_map[dep_key] = p.name

        return deps, param_map

    def _collect_list_members(self, key, list_type, component_registry):
        if not (hasattr(list_type, "__origin__") and get_origin(list_type) is list):
            raise ValueError(f"LIST component {key} must be of type List[BaseClass]")

        base_class = get_args(list_type)[0]
        members = []
        for comp_key, comp_meta in component_registry.items():
            comp_cls = comp_meta["cls"]
            if (
                comp_key != key
                and inspect.isclass(comp_cls)
                and comp_cls is not base_class
                and issubclass(comp_cls, base_class)
                and comp_meta["provider_type"] != ProviderType.LIST
            ):
                members.append(comp_key)
        return members

    def _create_provider(self, info):
        provider_type = info["provider_type"]
        cls = info["cls"]

        kwargs = {}
        for dep_key, param_name in info["param_map"].items():
            dep_provider = getattr(self, dep_key, None)
            if dep_provider is None:
                raise AttributeError(f"Dependency provider '{dep_key}' not found")
            kwargs[param_name] = dep_provider

        if provider_type == ProviderType.SINGLETON:
            return providers.Singleton(cls, **kwargs)
        if provider_type == ProviderType.FACTORY:
            return providers.Factory(cls, **kwargs)
        if provider_type == ProviderType.RESOURCE:
            return providers.Resource(cls, **kwargs)
        if provider_type == ProviderType.OBJECT:
            return providers.Object(info["value"])
        if provider_type == ProviderType.LIST:
            return providers.List(*(getattr(self, m) for m in info["list_members"]))
        raise ValueError(f"Unsupported provider type: {provider_type}")

    def _build(self):
        component_registry = context.component_registry

        node_info = {}
        for key, meta in component_registry.items():
            deps, param_map = self._collect_dependencies(
                meta["cls"], meta["provider_type"], component_registry
            )
            node_info[key] = {
                "cls": meta["cls"],
                "provider_type": meta["provider_type"],
                "value": meta.get("value"),
                "deps": deps,
                "param_map": param_map,
                "list_members": [],
            }

        # a LIST depends on every registered subclass of its base
        for key, info in node_info.items():
            if info["provider_type"] == ProviderType.LIST:
                members = self._collect_list_members(key, info["cls"], component_registry)
                info["list_members"] = members
                info["deps"].update(members)

        dependents_by_dep = defaultdict(set)
        for node, info in node_info.items():
            for dep in info["deps"]:
                dependents_by_dep[dep].add(node)

        indegree = {key: len(info["deps"]) for key, info in node_info.items()}
        queue = deque(key for key in component_registry if indegree[key] == 0)
        resolved = set()

        while queue:
            key = queue.popleft()
            provider = self._create_provider(node_info[key])
            setattr(self, key, provider)
            component_registry[key]["provider"] = provider
            resolved.add(key)

            for dependent in dependents_by_dep.get(key, ()):
                indegree[dependent] -= 1
                if indegree[dependent] == 0 and dependent not in resolved:
                    queue.append(dependent)

        if len(resolved) != len(component_registry):
            pending = [k for k in component_registry if k not in resolved]
            details = {k: sorted(node_info[k]["deps"]) for k in pending}
            raise RuntimeError(
                f"Unresolved components (possible cycle or missing deps): {pending}. "
                f"Deps: {details}"
            )

        self._built = True

    def get(self, cls: Type[T]) -> T:
        """Returns the instance the container holds for a registered type."""
        key = get_component_key(cls)

        if key not in context.component_registry:
            raise ValueError(f"Component {cls} is not registered")

        provider = getattr(self, key, None)
        if provider is None:
            raise RuntimeError(f"Provider for {cls} is not built yet")

        return provider()

    def wire(self, modules: Iterable[str]):
        if not self._built:
            self._build()
        super().wire(modules=modules)

    async def start(self) -> None:
        """Initialises RESOURCE components (database engine and the like)."""
        if not self._built:
            self._build()
        result = self.init_resources()
        if inspect.isawaitable(result):
            await result

    async def stop(self) -> None:
        result = self.shutdown_resources()
        if inspect.isawaitable(result):
            await result


container = AppContainer()

component(AppContainer, provider_type=ProviderType.OBJECT, value=container)
