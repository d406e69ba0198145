"""
Client configuration.

Settings are resolved in three layers: built-in defaults, an optional
YAML file and finally environment variables (a ``.env`` file in the
working directory is loaded first via python-dotenv).  The recognised
variables are ``RESUMESCAN_ENDPOINT``, ``RESUMESCAN_TIMEOUT`` and
``RESUMESCAN_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from typing import Dict, Optional

import yaml  # type: ignore
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://your-api-gateway-endpoint.amazonaws.com/dev/process"

ENV_ENDPOINT = "RESUMESCAN_ENDPOINT"
ENV_TIMEOUT = "RESUMESCAN_TIMEOUT"
ENV_LOG_LEVEL = "RESUMESCAN_LOG_LEVEL"


@dataclass
class ClientConfig:
    """Settings used by the form client and the CLI.

    ``timeout`` is ``None`` by default, which lets ``requests`` wait
    for the endpoint indefinitely.
    """

    endpoint: str = DEFAULT_ENDPOINT
    timeout: Optional[float] = None
    log_level: str = "INFO"


def _parse_timeout(value: object) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid timeout value: {value!r}") from exc
    if timeout <= 0:
        raise ValueError(f"Timeout must be positive, got {timeout}")
    return timeout


def _parse_log_level(value: object) -> str:
    level = str(value or "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Invalid log level: {value!r}")
    return level


def _load_yaml(path: str) -> Dict[str, object]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


def load_config(path: Optional[str] = None) -> ClientConfig:
    """Build a :class:`ClientConfig` from defaults, YAML and environment.

    Args:
        path: Optional path to a YAML file with ``endpoint``,
            ``timeout`` and ``log_level`` keys.

    Returns:
        The resolved configuration.

    Raises:
        FileNotFoundError: If ``path`` is given but does not exist.
        ValueError: If the file is not a mapping or the timeout or log
            level is invalid.
    """
    load_dotenv()
    config = ClientConfig()
    if path:
        known = {f.name for f in fields(ClientConfig)}
        for key, value in _load_yaml(path).items():
            if key not in known:
                logger.warning("Ignoring unknown config key '%s' in %s", key, path)
                continue
            setattr(config, key, value)
        logger.debug("Loaded config file %s", path)
    endpoint = os.getenv(ENV_ENDPOINT)
    if endpoint:
        config.endpoint = endpoint
    env_timeout = os.getenv(ENV_TIMEOUT)
    if env_timeout:
        config.timeout = env_timeout  # type: ignore[assignment]
    log_level = os.getenv(ENV_LOG_LEVEL)
    if log_level:
        config.log_level = log_level
    if not config.endpoint:
        raise ValueError("No analysis endpoint configured")
    config.timeout = _parse_timeout(config.timeout)
    config.log_level = _parse_log_level(config.log_level)
    return config
