"""Dependency container wiring for the application."""

from dataclasses import dataclass

from meal_tracker.adapters.json_entry_repository import JsonEntryRepository
from meal_tracker.adapters.json_goals_repository import JsonGoalsRepository
from meal_tracker.config import Settings, parse_timezone
from meal_tracker.services.entries import DecodePolicy, EntryStore
from meal_tracker.services.goals import GoalsService
from meal_tracker.services.journal import EntryLog


@dataclass
class AppContainer:
    """Holds session-wide dependencies."""

    settings: Settings
    entry_store: EntryStore
    entry_log: EntryLog
    goals_service: GoalsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    entry_store = EntryStore(
        repository=JsonEntryRepository(resolved_settings.entries_path),
        decode_policy=DecodePolicy(resolved_settings.decode_policy),
    )
    entry_log = EntryLog(
        store=entry_store,
        tz=parse_timezone(resolved_settings.timezone),
    )
    goals_service = GoalsService(JsonGoalsRepository(resolved_settings.goals_path))
    return AppContainer(
        settings=resolved_settings,
        entry_store=entry_store,
        entry_log=entry_log,
        goals_service=goals_service,
    )
