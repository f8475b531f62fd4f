"""Handler-level configuration models."""

from catalog.handlers.models.env_vars import CatalogHandlerEnvVars, get_handler_env_vars

__all__ = [
    "CatalogHandlerEnvVars",
    "get_handler_env_vars",
]
