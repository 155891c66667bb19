# asset_tracker/services/settings.py
import json
import os
from typing import Dict, Any

SETTINGS_PATH = os.getenv("SETTINGS_PATH", "data/settings.json")
ASSETS_PATH = os.getenv("ASSET_TRACKER_ASSETS", "data/assets.xml")
FX_TIMEOUT = float(os.getenv("ASSET_TRACKER_FX_TIMEOUT", 5))  # seconds

DEFAULTS: Dict[str, Any] = {
    "assets_path": ASSETS_PATH,
    "fx_timeout": FX_TIMEOUT,
}

def load_settings(path: str = None) -> Dict[str, Any]:
    """Defaults merged with the optional JSON settings file."""
    path = path or SETTINGS_PATH
    out = DEFAULTS.copy()
    if not os.path.exists(path):
        return out
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError):
        # corrupted file -> run on defaults
        return out
    if isinstance(data, dict):
        out.update({k: v for k, v in data.items() if k in DEFAULTS})
    try:
        out["fx_timeout"] = float(out["fx_timeout"])
    except (TypeError, ValueError):
        out["fx_timeout"] = FX_TIMEOUT
    return out
