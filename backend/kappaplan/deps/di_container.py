"""
Dependency injection container using dependency-injector.
Wires the process-wide health service and its controller; request scoped
services are built per request from the database session.
"""

from typing import Optional

from dependency_injector import containers, providers

from kappaplan.core.config import settings
from kappaplan.services.health_service import HealthService
from kappaplan.controllers.health_controller import HealthController


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    config = providers.Configuration()

    # One instance per process so uptime counts from startup
    health_service = providers.Singleton(HealthService)

    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )


_container: Optional[Container] = None


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        _container = Container()
        _container.config.from_dict({
            "database_path": settings.DATABASE_PATH,
            "backup_dir": settings.BACKUP_DIR,
        })
    return _container
