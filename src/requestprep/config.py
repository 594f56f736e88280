from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from .hosts import AllowedHostsValidator
from .log import get_logger

logger = get_logger(__name__)


class Settings(BaseModel):
    allowed_hosts: list[str] = Field(default_factory=list)


def load_config(path: Optional[str] = None) -> Settings:
    if not path:
        return Settings()
    cfg_path = Path(path)
    if not cfg_path.exists():
        logger.warning("Config file %s not found, allowed hosts are unrestricted", cfg_path)
        return Settings()
    data = yaml.safe_load(cfg_path.read_text()) or {}
    settings = Settings(**data)
    logger.info("Loaded %d allowed hosts from %s", len(settings.allowed_hosts), cfg_path)
    return settings


def build_host_validator(settings: Settings) -> AllowedHostsValidator:
    return AllowedHostsValidator(settings.allowed_hosts)
