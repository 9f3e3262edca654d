from todo_api.infrastructure.configuration.main_settings import Settings

__all__ = ["Settings"]
