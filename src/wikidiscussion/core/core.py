from __future__ import annotations

import importlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, cast

from wikidiscussion.config import Config
from wikidiscussion.core.storage import WikiStorage

if TYPE_CHECKING:
    from wikidiscussion.core.modules.access.service import AccessService
    from wikidiscussion.core.modules.changelog.service import ChangelogService
    from wikidiscussion.core.modules.comment.service import CommentService
    from wikidiscussion.core.modules.page.service import PageService
    from wikidiscussion.core.modules.recent.service import RecentCommentService
    from wikidiscussion.core.modules.thread.service import ThreadService


class Service:
    """Base class for services with direct data directory access."""

    def __init__(self, storage: WikiStorage) -> None:
        self.storage = storage
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        """Set the core application context."""
        self._core = core


class Services:
    """Service registry that automatically discovers and initializes services."""

    access: AccessService
    page: PageService
    comment: CommentService
    changelog: ChangelogService
    thread: ThreadService
    recent: RecentCommentService

    def __init__(self, storage: WikiStorage) -> None:
        """Initialize all services automatically using service configuration."""
        self._services: list[Service] = []
        self._storage = storage

        # Service configuration: (attribute_name, module_path, class_name)
        # Collaborators first, the two feed services depend on them
        service_configs = [
            ("access", "wikidiscussion.core.modules.access.service", "AccessService"),
            ("page", "wikidiscussion.core.modules.page.service", "PageService"),
            ("comment", "wikidiscussion.core.modules.comment.service", "CommentService"),
            ("changelog", "wikidiscussion.core.modules.changelog.service", "ChangelogService"),
            ("thread", "wikidiscussion.core.modules.thread.service", "ThreadService"),
            ("recent", "wikidiscussion.core.modules.recent.service", "RecentCommentService"),
        ]

        # Dynamically import and instantiate services
        for attr_name, module_path, class_name in service_configs:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(storage)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    def set_core(self, core: Core) -> None:
        """Set core reference for all services."""
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        """Start all services that have startup logic."""
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        """Stop all services that have cleanup logic."""
        for service in self._services:
            await service.on_stop()


class Core:
    """Container providing config, data directory paths, and all service instances."""

    config: Config
    storage: WikiStorage
    services: Services

    def __init__(self, config: Config) -> None:
        """Initialize core with config and storage paths, and auto-register services."""
        self.config = config
        self.storage = WikiStorage(config.pages_path, config.meta_path)
        self.services = Services(self.storage)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        """Start all services on application startup."""
        await self.services.start_all()

    async def on_stop(self) -> None:
        """Stop all services on shutdown."""
        await self.services.stop_all()
