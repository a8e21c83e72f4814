from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from core.contracts import LoaderInfo, LoaderNotFoundError, ModelLoader, ModelLoaderRegistry


class DuplicateLoaderError(ValueError):
    pass


@dataclass
class DictLoaderRegistry(ModelLoaderRegistry):
    loaders: dict[str, ModelLoader] = field(default_factory=dict)

    @classmethod
    def of(cls, *loaders: ModelLoader) -> DictLoaderRegistry:
        """Build a registry keyed by each loader's `info.key`."""
        registry = cls()
        for loader in loaders:
            registry.register(loader)
        return registry

    def register(self, loader: ModelLoader) -> None:
        key = loader.info.key
        if key in self.loaders:
            raise DuplicateLoaderError(f"A loader is already registered for key '{key}'")
        self.loaders[key] = loader

    def get(self, loader_key: str) -> ModelLoader:
        try:
            return self.loaders[loader_key]
        except KeyError as e:
            raise LoaderNotFoundError(loader_key) from e

    def list(self) -> Iterable[LoaderInfo]:
        return [loader.info for loader in self.loaders.values()]
