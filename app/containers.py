# DI container for the local job queue
from typing import Optional

from dependency_injector import containers, providers

from core.config.settings import Settings, load_settings
from services.brokerages.registry import create_default_registry
from services.job_queue.acknowledgment import JobAcknowledger
from services.job_queue.locator import AlgorithmLocator
from services.job_queue.handler import JobQueue


class AppContainer(containers.DeclarativeContainer):
    """Application dependency injection container"""

    # Configuration
    settings = providers.Singleton(Settings)

    # Brokerage factories are registered once at startup and read while jobs are built
    brokerage_registry = providers.Singleton(create_default_registry, settings=settings)

    algorithm_locator = providers.Singleton(AlgorithmLocator)

    job_acknowledger = providers.Singleton(JobAcknowledger, settings=settings)

    job_queue = providers.Singleton(
        JobQueue,
        settings=settings,
        brokerages=brokerage_registry,
        locator=algorithm_locator,
        acknowledger=job_acknowledger,
    )


def create_container(config_file: Optional[str] = None) -> AppContainer:
    """Container whose settings are read from ``config_file`` when given."""
    container = AppContainer()
    if config_file is not None:
        container.settings.override(providers.Object(load_settings(config_file)))
    return container
