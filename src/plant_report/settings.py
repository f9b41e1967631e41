"""Persistent CLI defaults, stored as JSON via platformdirs."""

from __future__ import annotations

import contextlib
import json
import logging
import math
import os
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path

import platformdirs

logger = logging.getLogger("plant_report.settings")

_APP_NAME = "plant-report"
_SETTINGS_FILE = "settings.json"

OUTPUT_FORMATS = ("png", "pdf")

# Expected types for each field; wrong-typed JSON values are dropped
_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "device_pixel_ratio": (int, float),
    "output_format": (str,),
    "last_output_dir": (str,),
}


def _config_path() -> Path:
    """Return the platform-appropriate config directory."""
    return Path(platformdirs.user_config_dir(_APP_NAME))


@dataclass
class Settings:
    """Defaults used when the CLI is not given explicit options."""

    device_pixel_ratio: float = 2.0
    output_format: str = "png"
    last_output_dir: str = ""

    def save(self) -> None:
        """Write settings to disk atomically.  Logs warnings on failure."""
        try:
            config_dir = _config_path()
            config_dir.mkdir(parents=True, exist_ok=True)
            filepath = config_dir / _SETTINGS_FILE
            payload = json.dumps(asdict(self), indent=2, ensure_ascii=False)
            fd, tmp = tempfile.mkstemp(dir=config_dir, prefix=".settings-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp, filepath)
            except Exception:
                with contextlib.suppress(OSError):
                    os.unlink(tmp)
                raise
        except OSError as exc:
            logger.warning("Failed to save settings: %s", exc)

    @classmethod
    def load(cls) -> Settings:
        """Load settings from disk.  Returns defaults on any failure."""
        try:
            filepath = _config_path() / _SETTINGS_FILE
            if not filepath.exists():
                return cls()
            data = json.loads(filepath.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning("Settings file is corrupted, using defaults: %s", _config_path() / _SETTINGS_FILE)
            return cls()
        except OSError as exc:
            logger.warning("Cannot read settings file: %s", exc)
            return cls()

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format, using defaults")
            return cls()

        filtered: dict[str, object] = {}
        for key, value in data.items():
            expected = _FIELD_TYPES.get(key)
            # bool is an int subclass; never accept it as a ratio
            if expected is None or isinstance(value, bool) or not isinstance(value, expected):
                continue
            filtered[key] = value

        ratio = filtered.get("device_pixel_ratio")
        if ratio is not None and (not math.isfinite(ratio) or ratio <= 0):
            logger.warning("Ignoring invalid device_pixel_ratio %s", ratio)
            filtered.pop("device_pixel_ratio")
        if filtered.get("output_format", "png") not in OUTPUT_FORMATS:
            filtered.pop("output_format")
        return cls(**filtered)  # type: ignore[arg-type]
