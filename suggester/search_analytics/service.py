from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional
from uuid import uuid4

from suggester.catalog.service import get_component_catalog
from suggester.config import runtime_config
from suggester.logging.event_log import EventLogEntry, EventLogger, default_event_logger
from suggester.search_analytics.models import PopularQuery, SearchRecord, SearchStats
from suggester.search_analytics.repository import (
    FirestoreSearchRecordRepository,
    InMemorySearchRecordRepository,
    SearchRecordRepository,
)

logger = logging.getLogger(__name__)

POPULAR_QUERY_LIMIT = 5

DEMO_QUERIES = (
    "login form",
    "user profile",
    "dashboard",
    "search form",
    "contact form",
    "data table",
    "navigation menu",
    "checkout form",
    "settings page",
    "admin panel",
)


class SearchAnalyticsError(Exception):
    """Base search analytics error."""


class SearchAnalyticsValidationError(SearchAnalyticsError):
    """Raised when a submission is missing its query or components."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _default_repo() -> SearchRecordRepository:
    backend = runtime_config.get_search_analytics_backend()
    if backend == "firestore":
        try:
            return FirestoreSearchRecordRepository()
        except Exception as exc:
            logger.warning("Firestore search analytics unavailable, using in-memory store: %s", exc)
            return InMemorySearchRecordRepository()
    return InMemorySearchRecordRepository()


class SearchAnalyticsService:
    def __init__(
        self,
        repo: Optional[SearchRecordRepository] = None,
        capacity: Optional[int] = None,
        window: Optional[timedelta] = None,
        clock: Optional[Callable[[], datetime]] = None,
        id_fn: Optional[Callable[[], str]] = None,
        logger: Optional[EventLogger] = None,
        total_components: Optional[int] = None,
    ) -> None:
        self.repo = repo if repo is not None else _default_repo()
        if capacity is None:
            capacity = runtime_config.get_search_analytics_capacity()
        if window is None:
            window = timedelta(hours=runtime_config.get_search_analytics_window_hours())
        self.capacity = capacity
        self.window = window
        self._clock = clock or _utc_now
        self._id_fn = id_fn or (lambda: uuid4().hex)
        self._logger = logger or default_event_logger
        self._total_components = total_components

    @property
    def total_components(self) -> int:
        if self._total_components is None:
            return get_component_catalog().total_components
        return self._total_components

    def record(
        self,
        query: Optional[str],
        components: Optional[Iterable[str]],
        user_agent: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> SearchRecord:
        if not query or not query.strip() or components is None:
            raise SearchAnalyticsValidationError("Missing required fields: query and components")
        record = SearchRecord(
            id=self._id_fn(),
            query=query.strip(),
            components=[str(c) for c in components],
            timestamp=self._clock(),
            user_agent=user_agent,
            metadata=dict(metadata or {}),
        )
        self.repo.append(record, self.capacity)
        self._emit(record)
        return record

    def aggregate(self) -> SearchStats:
        records = self.repo.snapshot()
        cutoff = self._clock() - self.window
        today = sum(1 for r in records if r.timestamp > cutoff)

        counts: Dict[str, int] = {}
        for r in records:
            counts[r.query] = counts.get(r.query, 0) + 1
        # sorted() is stable, so ties keep first-seen order
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:POPULAR_QUERY_LIMIT]

        return SearchStats(
            total_queries=len(records),
            today_queries=today,
            total_components=self.total_components,
            popular_queries=[PopularQuery(query=q, count=c) for q, c in ranked],
        )

    def seed_demo_records(self, count: int = 100, rng: Optional[random.Random] = None) -> List[SearchRecord]:
        """Load sample history: three fixed searches plus ``count`` random ones from the past week.

        Does nothing when the store already holds records, so repeated app
        construction in one process seeds at most once.
        """
        if self.repo.snapshot():
            logger.info("Search records already present, skipping demo seed")
            return []
        rng = rng or random.Random()
        now = self._clock()
        seeded = [
            SearchRecord(
                id="1",
                query="login form",
                components=["EmailInput", "PasswordInput", "Checkbox", "SubmitButton"],
                timestamp=now - timedelta(days=1),
            ),
            SearchRecord(
                id="2",
                query="user profile",
                components=["Avatar", "Input", "EmailInput", "Button"],
                timestamp=now - timedelta(hours=1),
            ),
            SearchRecord(
                id="3",
                query="dashboard",
                components=["ContentCard", "Banner", "Table", "Progress"],
                timestamp=now - timedelta(minutes=30),
            ),
        ]
        for i in range(count):
            seeded.append(
                SearchRecord(
                    id=f"mock-{i}",
                    query=rng.choice(DEMO_QUERIES),
                    components=["Input", "Button"],
                    timestamp=now - timedelta(seconds=rng.random() * 7 * 24 * 3600),
                )
            )
        for record in seeded:
            self.repo.append(record, self.capacity)
        logger.info("Seeded %d demo search records", len(seeded))
        return seeded

    def reset(self) -> None:
        self.repo.clear()

    def _emit(self, record: SearchRecord) -> None:
        entry = EventLogEntry(
            event_type="search_analytics.recorded",
            asset_type="search_record",
            asset_id=record.id,
            surface="search_analytics",
            metadata={"query": record.query, "components": record.components},
        )
        try:
            self._logger(entry)
        except Exception as exc:
            logger.warning("Search analytics event logging failed", exc_info=exc)


_default_service: Optional[SearchAnalyticsService] = None


def get_search_analytics_service() -> SearchAnalyticsService:
    global _default_service
    if _default_service is None:
        _default_service = SearchAnalyticsService()
    return _default_service


def set_search_analytics_service(service: Optional[SearchAnalyticsService]) -> None:
    global _default_service
    _default_service = service
