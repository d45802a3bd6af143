"""JSON file repository for goal settings."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from meal_tracker.adapters.atomic_file import write_atomic
from meal_tracker.services.goals import GoalsRepository

_logger = logging.getLogger(__name__)


@dataclass
class JsonGoalsRepository(GoalsRepository):
    """Stores integer settings as a flat JSON object."""

    path: Path

    def get_int(self, key: str) -> int | None:
        """Return the stored integer for key, or None when absent or invalid."""
        value = self._read().get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    def set_int(self, key: str, value: int) -> None:
        """Store value under key, keeping other keys."""
        values = self._read()
        values[key] = value
        data = json.dumps(values, indent=2, sort_keys=True).encode("utf-8")
        write_atomic(self.path, data)

    def _read(self) -> dict[str, object]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except (OSError, UnicodeDecodeError) as exc:
            _logger.error("Ignoring unreadable goals file: %s: %s", self.path, exc)
            return {}
        try:
            values = json.loads(raw)
        except json.JSONDecodeError:
            _logger.error("Ignoring unreadable goals file: %s", self.path)
            return {}
        if not isinstance(values, dict):
            _logger.error("Ignoring goals file without an object: %s", self.path)
            return {}
        return values
