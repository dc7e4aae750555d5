"""Dependency injection container.

A small registry of factories, without external frameworks. It lets
the pipeline resolve a fully wired RoutePlannerService while tests
swap in their own graph repository.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        planner = container.resolve(RoutePlannerService)

        # Testing
        container = Container.create_default()
        container.register(GraphRepositoryPort, lambda: InMemoryRepository(graph))
        planner = container.resolve(RoutePlannerService)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.cache import InMemoryCache
        from .adapters.graph import CSVGraphRepository, DijkstraDistanceOracle
        from .ports.cache import CachePort
        from .ports.graph import DistanceOraclePort, GraphRepositoryPort
        from .services import RoutePlannerService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            CachePort,
            lambda: InMemoryCache(
                max_size=config.search.distance_cache_size, name="distances"
            ),
        )
        container.register(
            GraphRepositoryPort,
            lambda: CSVGraphRepository(config.graph),
        )
        container.register(
            DistanceOraclePort,
            lambda: DijkstraDistanceOracle(
                graph=container.resolve(GraphRepositoryPort).load(),
                cache=container.resolve(CachePort),
            ),
        )

        def create_route_planner() -> RoutePlannerService:
            return RoutePlannerService(
                graph_repository=container.resolve(GraphRepositoryPort),
                search_config=config.search,
                oracle=container.resolve(DistanceOraclePort),
            )

        container.register(RoutePlannerService, create_route_planner)

        return container
