from fastapi import FastAPI
from pizzeria.core.config import Config
from pizzeria.core.context import Context
from pizzeria.core.ioc import AppContainer


class CustomFastApi(FastAPI):
    """FastAPI application that carries the kernel objects it was built from."""

    def __init__(
        self,
        *,
        config: Config,
        context: Context,
        container: AppContainer,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._config = config
        self._context = context
        self._container = container

    @property
    def config(self) -> Config:
        return self._config

    @property
    def context(self) -> Context:
        return self._context

    @property
    def container(self) -> AppContainer:
        return self._container
