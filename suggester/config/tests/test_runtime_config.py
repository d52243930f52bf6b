from __future__ import annotations

from datetime import timedelta

from suggester.config import runtime_config
from suggester.search_analytics.repository import InMemorySearchRecordRepository
from suggester.search_analytics.service import SearchAnalyticsService


def test_defaults(monkeypatch):
    for name in (
        "ENV",
        "APP_ENV",
        "SEARCH_ANALYTICS_BACKEND",
        "SEARCH_ANALYTICS_CAPACITY",
        "SEARCH_ANALYTICS_WINDOW_HOURS",
        "SEARCH_ANALYTICS_SEED_DEMO",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    assert runtime_config.get_env() == "dev"
    assert runtime_config.get_search_analytics_backend() == "memory"
    assert runtime_config.get_search_analytics_capacity() == 1000
    assert runtime_config.get_search_analytics_window_hours() == 24
    assert runtime_config.search_analytics_seed_demo_enabled() is False
    assert runtime_config.get_log_level() == "INFO"


def test_invalid_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("SEARCH_ANALYTICS_CAPACITY", "lots")
    assert runtime_config.get_search_analytics_capacity() == 1000
    monkeypatch.setenv("SEARCH_ANALYTICS_CAPACITY", "-5")
    assert runtime_config.get_search_analytics_capacity() == 1000
    monkeypatch.setenv("SEARCH_ANALYTICS_CAPACITY", "50")
    assert runtime_config.get_search_analytics_capacity() == 50


def test_seed_flag_truthy_values(monkeypatch):
    for value, expected in (("1", True), ("Yes", True), ("true", True), ("0", False), ("", False)):
        monkeypatch.setenv("SEARCH_ANALYTICS_SEED_DEMO", value)
        assert runtime_config.search_analytics_seed_demo_enabled() is expected


def test_service_picks_up_environment(monkeypatch):
    monkeypatch.setenv("SEARCH_ANALYTICS_CAPACITY", "3")
    monkeypatch.setenv("SEARCH_ANALYTICS_WINDOW_HOURS", "2")
    svc = SearchAnalyticsService(repo=InMemorySearchRecordRepository(), logger=lambda entry: {"status": "accepted"})
    assert svc.capacity == 3
    assert svc.window == timedelta(hours=2)
    for i in range(5):
        svc.record(f"q{i}", ["Input"])
    assert [r.query for r in svc.repo.snapshot()] == ["q2", "q3", "q4"]


def test_firestore_backend_without_client_falls_back(monkeypatch):
    monkeypatch.setenv("SEARCH_ANALYTICS_BACKEND", "firestore")
    monkeypatch.delenv("GCP_PROJECT_ID", raising=False)
    monkeypatch.delenv("GCP_PROJECT", raising=False)
    svc = SearchAnalyticsService(logger=lambda entry: {"status": "accepted"})
    assert isinstance(svc.repo, InMemorySearchRecordRepository)
