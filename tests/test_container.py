"""Tests for container wiring."""

from meal_tracker.adapters.json_entry_repository import JsonEntryRepository
from meal_tracker.config import Settings
from meal_tracker.containers import build_container
from meal_tracker.services.entries import DecodePolicy


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.entry_log.store is container.entry_store
    assert container.entry_store.decode_policy is DecodePolicy.FAIL_OPEN
    assert isinstance(container.entry_store.repository, JsonEntryRepository)
    assert container.entry_store.repository.path == settings.entries_path
    assert container.entry_log.load() == ()
    assert container.goals_service.get_goals().calories == 2300


def test_build_container_honours_fail_closed(settings: Settings) -> None:
    settings.decode_policy = "fail_closed"

    container = build_container(settings)

    assert container.entry_store.decode_policy is DecodePolicy.FAIL_CLOSED
