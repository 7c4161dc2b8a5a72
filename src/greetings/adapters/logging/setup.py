"""lib_log_rich runtime bootstrap for every greetings entry point.

``greetings``, ``python -m greetings`` and ``greetings-quote`` all reach
:func:`init_logging` through the root command, so the runtime is set up
once per process from the ``[lib_log_rich]`` configuration section.
"""

from __future__ import annotations

from collections.abc import Mapping

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from greetings import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section.

    Only ``service`` and ``environment`` are interpreted here; any other key
    is handed to ``RuntimeConfig`` untouched.

    Example:
        >>> LoggingConfigModel(environment="staging", console_level="DEBUG").model_extra
        {'console_level': 'DEBUG'}
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Translate the ``[lib_log_rich]`` section into a RuntimeConfig.

    The package name is used when no ``service`` is configured.
    """
    section = config.get("lib_log_rich", default={})
    settings = LoggingConfigModel.model_validate(dict(section) if isinstance(section, Mapping) else {})
    passthrough = {key: value for key, value in (settings.model_extra or {}).items() if value is not None}
    return lib_log_rich.runtime.RuntimeConfig(
        service=settings.service or __init__conf__.name,
        environment=settings.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Start lib_log_rich unless it is already running.

    ``.env`` files are honoured for ``LOG_*`` variables, and stdlib
    ``logging`` is bridged so module loggers end up in the same runtime.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
