from infoarena_companion.config import Settings, configure_logging, load_settings
from infoarena_companion.services.task import TaskService


def create_task_service(settings: Settings | None = None) -> TaskService:
    """
    Factory function to create task service with all dependencies.

    Without explicit settings, settings are loaded from the environment and
    loguru is reconfigured via ``configure_logging``, which removes every
    handler already registered on the global logger. Hosts that manage their
    own loguru handlers should pass ``settings``.
    """
    from infoarena_companion.infrastructure.parsers import InfoArenaProblemParser

    if settings is None:
        settings = load_settings()
        configure_logging(settings.log_level)

    parser = InfoArenaProblemParser(
        judge_name=settings.judge_name,
        java_main_class=settings.java_main_class,
    )

    return TaskService(parser=parser)


__all__ = ["TaskService", "create_task_service"]
