from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from esm_bridge import __version__


@dataclass(frozen=True, slots=True)
class BridgeSettings:
    log_level: str
    extension_version: str


def settings_from_env() -> BridgeSettings:
    log_level = os.environ.get("ESM_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in logging.getLevelNamesMapping():
        raise RuntimeError(f"ESM_LOG_LEVEL must be a logging level name, got {log_level!r}")

    return BridgeSettings(
        log_level=log_level,
        extension_version=os.environ.get("ESM_EXTENSION_VERSION", __version__),
    )


def configure_logging(settings: BridgeSettings) -> None:
    logging.basicConfig(level=logging.getLevelNamesMapping()[settings.log_level])
