"""Settings for the command line: load/save a JSON file over defaults."""
import json
import logging
import os
from pathlib import Path

from .boundaries import InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "normalize_input": False,
    "max_oracle_length": 64,
    "log_level": "INFO",
}

CONFIG_PATH = Path(os.environ.get("SUFFIXTEXT_CONFIG", "suffixtext.json"))


def load_config(path: str | Path | None = None) -> dict:
    path = Path(path) if path is not None else CONFIG_PATH
    cfg = dict(DEFAULT_CONFIG)
    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read config %s, using defaults: %s", path, e)
            data = {}
        if not isinstance(data, dict):
            logger.warning("Config %s is not a JSON object, using defaults", path)
            data = {}
        cfg.update(data)
    limit = cfg["max_oracle_length"]
    if not isinstance(limit, int) or isinstance(limit, bool) or limit < 0:
        raise InvalidArgumentError(f"max_oracle_length must be a non-negative int, got {limit!r}")
    return cfg


def save_config(cfg: dict, path: str | Path | None = None) -> None:
    path = Path(path) if path is not None else CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(cfg, f, indent=2)
