from __future__ import annotations

import json
import logging
from pathlib import Path

from result import Err, Ok, Result

from filepattern.config.defaults import default_config
from filepattern.config.schema import AppConfig

CONFIG_PATH = Path("~/.config/filepattern/config.json").expanduser()

logger = logging.getLogger(__name__)


def load_config(path: Path | str | None = None) -> Result[AppConfig, str]:
    """Read named rules for match_rules() from a JSON file.

    The library never reads this on its own.  Applications pass *path*;
    without one, the per-user file at ``CONFIG_PATH`` is used, and a missing
    file gives the defaults.
    """
    resolved = Path(path).expanduser() if path is not None else CONFIG_PATH
    if not resolved.exists():
        logger.debug("No config at %s, using defaults", resolved)
        return Ok(default_config())

    try:
        payload = json.loads(resolved.read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            return Err(f"Config at {resolved} must be a JSON object.")
        return Ok(AppConfig.from_dict(payload, default_config()))
    except Exception as exc:  # noqa: BLE001
        return Err(f"Failed reading config at {resolved}: {exc}.")


def sample_config_json() -> str:
    return json.dumps(default_config().to_dict(), indent=2)
