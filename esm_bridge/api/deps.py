from __future__ import annotations

from esm_bridge.config import BridgeSettings, settings_from_env


def get_settings() -> BridgeSettings:
    return settings_from_env()
