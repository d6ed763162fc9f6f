"""Durable key-value slot for dashboard preferences.

One JSON document per store name under ``CLIENT_STATE_DIR``. It survives
restarts and never touches the server. Unreadable content is treated as
empty so a corrupt file only costs the user their preferences.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

from peoplehub.config import settings

logger = logging.getLogger(__name__)

STORE_NAME = "peoplehub-dashboard"


class ClientStore:
    def __init__(
        self,
        directory: Optional[Union[str, Path]] = None,
        name: str = STORE_NAME,
    ) -> None:
        base = Path(directory).expanduser() if directory else settings.client_state_path
        self.path = base / f"{name}.json"

    def load(self) -> dict[str, Any]:
        """Stored document, or ``{}`` when missing or unreadable."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError as exc:
            logger.warning("Ignoring undecodable store %s: %s", self.path, exc)
            return {}
        except OSError as exc:
            logger.warning("Cannot read %s: %s", self.path, exc)
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Ignoring corrupt store %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, data: dict[str, Any]) -> None:
        """Replace the stored document atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2, sort_keys=True)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.debug("Saved %s", self.path)
