# config_manager.py - JSON config manager for the command line front end

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_PATH = "fuzzy_index.json"
DEFAULTS = {
    "max_distance": 2,   # edit budget when -d isn't given
    "limit": 25,         # rows shown by `match`
    "log_level": "INFO",
    "log_file": None,
}


class Config:
    def __init__(self, path=DEFAULT_PATH):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning("ignoring config %s: %s", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("ignoring config %s: expected a JSON object", self.path)
                return
            for key, val in loaded.items():
                if key not in DEFAULTS:
                    self.data[key] = val
                    continue
                try:
                    self.data[key] = _coerce(DEFAULTS[key], val)
                except (TypeError, ValueError) as e:
                    logger.warning("ignoring config %s: bad value for %s: %s", self.path, key, e)
        else:
            self.save()

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def as_dict(self):
        return dict(self.data)

    def set(self, key, val):
        """Set a known option, converted to the type of its default, and save."""
        if key not in DEFAULTS:
            raise KeyError(f"no such option: {key}")
        self.data[key] = _coerce(DEFAULTS[key], val)
        self.save()


def _coerce(default, val):
    if default is None:
        if val is None or isinstance(val, str):
            return val
        raise ValueError(f"expected a string or null, got {val!r}")
    if isinstance(val, bool) and not isinstance(default, bool):
        raise ValueError(f"expected {type(default).__name__}, got {val!r}")
    if isinstance(val, type(default)):
        return val
    if isinstance(default, bool):
        text = str(val).strip().lower()
        if text in ("1", "true", "yes", "on"):
            return True
        if text in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"not a boolean: {val!r}")
    return type(default)(val)
