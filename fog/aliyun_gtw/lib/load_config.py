import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel

from .constants import CONFIG_PATH, CONFIG_PATH_ENV, DEFAULT_HOST, DEFAULT_LOG_LEVEL, DEFAULT_PORT

logger = logging.getLogger(__name__)


class GatewayConfig(BaseModel):
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL  # Possible values: "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Explicit path, then $FOG_ALIYUN_GTW_CONFIG, then the default path"""
    if path:
        return Path(path)
    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)
    return Path(CONFIG_PATH)


def load_gateway_config(path: Optional[Union[str, Path]] = None) -> GatewayConfig:
    """Load gateway configuration file"""

    config_path = resolve_config_path(path)
    logger.debug("Reading gateway configuration file %r...", str(config_path))
    if config_path == Path(CONFIG_PATH) and not config_path.exists():
        logger.info("Gateway configuration file %r not found, using defaults", str(config_path))
        return GatewayConfig()

    try:
        return GatewayConfig(**json.loads(config_path.read_text(encoding="utf-8")))
    except Exception as e:
        logger.error("Error reading gateway configuration file: %r", e)
        raise
