"""JSON key-value store for autosaving calculator sessions."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from roi_engine.config.settings import Settings
from roi_engine.session import CalculatorSession

logger = logging.getLogger(__name__)


class SessionStore:
    """Persists one CalculatorSession per key as ``<directory>/<key>.json``.

    Only the inputs and current step are stored; results are recomputed.
    """

    def __init__(
        self,
        directory: Path | str | None = None,
        key: str | None = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or Settings()
        self._directory = Path(directory or settings.storage_dir)
        self._key = key or settings.storage_key

    @property
    def path(self) -> Path:
        return self._directory / f"{self._key}.json"

    def save(self, session: CalculatorSession) -> Path:
        """Write the session, creating the directory if needed."""
        self._directory.mkdir(parents=True, exist_ok=True)
        self.path.write_text(session.model_dump_json(indent=2))
        logger.info("Saved calculator session to %s", self.path)
        return self.path

    def load(self) -> Optional[CalculatorSession]:
        """Return the saved session, or None if absent or unreadable."""
        if not self.path.exists():
            return None

        try:
            raw = json.loads(self.path.read_text())
            return CalculatorSession.model_validate(raw)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning("Discarding unreadable session at %s: %s", self.path, e)
            return None

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
            logger.info("Cleared calculator session at %s", self.path)
