import os
import json
import logging

from .constants import DEFAULT_BUNDLE_URL, EXPECTED_SHRINES_SIZE

logger = logging.getLogger("bundlepeek.storage")

_TRUE_STRINGS = ("1", "true", "yes", "on")


class StorageManager:
    def __init__(self, data_dir=None):
        if data_dir:
            self.data_dir = data_dir
        else:
            self.data_dir = os.path.join(os.getcwd(), "data")

        self.config_file = os.path.join(self.data_dir, "config.json")
        self.config = self.load_config()

    def ensure_directories(self):
        if not os.path.exists(self.data_dir):
            os.makedirs(self.data_dir)

    def load_config(self):
        default = {
            "bundle_url": DEFAULT_BUNDLE_URL,
            "extractor_url": "",
            "expected_size": EXPECTED_SHRINES_SIZE,
            "verify_first_block": False,
            "log_file": ""
        }
        if os.path.exists(self.config_file):
            try:
                with open(self.config_file, 'r') as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning(f"Ignoring unreadable config {self.config_file}: {e}")
                return default
            if not isinstance(data, dict):
                logger.warning(f"Ignoring config {self.config_file}: expected an object, got {type(data).__name__}")
                return default
            default.update(data)
        return default

    def save_config(self, new_config):
        self.config.update(new_config)
        self.ensure_directories()
        with open(self.config_file, 'w') as f:
            json.dump(self.config, f, indent=2)
        return {"status": "success"}

    def get_flag(self, key):
        """Config booleans, tolerating hand-edited strings like "false"."""
        value = self.config.get(key, False)
        if isinstance(value, str):
            return value.strip().lower() in _TRUE_STRINGS
        return bool(value)

    def log_path(self):
        """Log file inside the data dir, or None when file logging is off (the default)."""
        name = self.config.get("log_file")
        if not name:
            return None
        self.ensure_directories()
        return os.path.join(self.data_dir, name)
