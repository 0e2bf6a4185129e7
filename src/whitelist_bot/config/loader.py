from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict

CONFIG_PATH_ENV = "WHITELIST_BOT_CONFIG"
DEFAULT_CONFIG_PATH = Path("config.toml")
SECTION = "whitelist_bot"


def load_raw_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Return the ``[whitelist_bot]`` table of the TOML config file.

    The file is ``path`` when given, else ``$WHITELIST_BOT_CONFIG``, else
    ``config.toml`` in the working directory. A missing file or section yields
    an empty dict and every setting falls back to environment variables.
    """
    target = Path(path or os.getenv(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)
    if not target.is_file():
        return {}

    with target.open("rb") as handle:
        section = tomllib.load(handle).get(SECTION, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{SECTION}] in {target} must be a table")
    return section


__all__ = ["load_raw_config", "CONFIG_PATH_ENV", "DEFAULT_CONFIG_PATH"]
