from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from dependency_injector import containers, providers
from loguru import logger

from kibkit.application.ports import Closable, Disposable
from kibkit.domain.exceptions import NotFoundError

T = TypeVar("T")

Factory = Callable[["ScopedProvider"], T]


class ScopedProvider:
    """Dependencies supplied to one part of the component tree only.

    Each supplied type is created lazily on first ``resolve`` and then shared
    within the scope. Lookups that miss fall through to the parent scope, so
    a child only overrides what it supplies itself.
    """

    def __init__(self, parent: ScopedProvider | None = None) -> None:
        self.parent = parent
        self._container = containers.DynamicContainer()
        self._names: dict[type, str] = {}
        self._created: list[object] = []

    def supply(self, type_: type[T], factory: Factory[T]) -> ScopedProvider:
        name = self._names.get(type_) or f"provider_{len(self._names)}"
        self._container.set_provider(
            name, providers.Singleton(self._create, factory)
        )
        self._names[type_] = name
        return self

    def supply_many(self, factories: Mapping[type, Factory[Any]]) -> ScopedProvider:
        for type_, factory in factories.items():
            self.supply(type_, factory)
        return self

    def supplies(self, type_: type) -> bool:
        return type_ in self._names

    def resolve(self, type_: type[T]) -> T:
        scope: ScopedProvider | None = self
        while scope is not None:
            name = scope._names.get(type_)
            if name is not None:
                return scope._container.providers[name]()
            scope = scope.parent
        raise NotFoundError(
            f"No provider supplied for {type_.__name__}",
            context={"type": type_.__qualname__},
        )

    def child(self) -> ScopedProvider:
        return ScopedProvider(parent=self)

    def dispose(self) -> None:
        """Release everything this scope created, newest first."""
        created, self._created = self._created, []
        for instance in reversed(created):
            if isinstance(instance, Disposable):
                instance.dispose()
            elif isinstance(instance, Closable):
                instance.close()
        self._container.reset_singletons()
        logger.debug(f"scope disposed, released {len(created)} instance(s)")

    def __enter__(self) -> ScopedProvider:
        return self

    def __exit__(self, *_: object) -> None:
        self.dispose()

    def _create(self, factory: Factory[T]) -> T:
        instance = factory(self)
        self._created.append(instance)
        return instance


def with_provider(
    type_: type[T], factory: Factory[T], parent: ScopedProvider | None = None
) -> ScopedProvider:
    """Open a child scope of *parent* that supplies a single *type_*."""
    return ScopedProvider(parent=parent).supply(type_, factory)


def with_providers(
    factories: Mapping[type, Factory[Any]], parent: ScopedProvider | None = None
) -> ScopedProvider:
    """Open a child scope of *parent* that supplies several types at once."""
    return ScopedProvider(parent=parent).supply_many(factories)
