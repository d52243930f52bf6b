from __future__ import annotations

import threading
from collections import deque
from typing import Deque, List, Optional, Protocol

from suggester.search_analytics.models import SearchRecord


class SearchRecordRepository(Protocol):
    def append(self, record: SearchRecord, capacity: int) -> SearchRecord: ...
    def snapshot(self) -> List[SearchRecord]: ...
    def clear(self) -> None: ...


class InMemorySearchRecordRepository:
    """Process-lifetime record list, oldest first.

    One lock serializes appends, evictions and snapshots so aggregation never
    observes a half-applied write.
    """

    def __init__(self) -> None:
        self._items: Deque[SearchRecord] = deque()
        self._lock = threading.Lock()

    def append(self, record: SearchRecord, capacity: int) -> SearchRecord:
        with self._lock:
            self._items.append(record)
            while len(self._items) > capacity:
                self._items.popleft()
        return record

    def snapshot(self) -> List[SearchRecord]:
        with self._lock:
            return list(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class FirestoreSearchRecordRepository:
    """Firestore implementation.

    Writes, evictions and reads share one process-local lock, so a snapshot
    taken while an append is evicting never sees more than ``capacity`` rows.
    """

    _DESCENDING = "DESCENDING"

    def __init__(self, client: Optional[object] = None) -> None:
        if client is None:
            try:
                from google.cloud import firestore  # type: ignore
            except Exception as exc:  # pragma: no cover - optional dep
                raise RuntimeError("google-cloud-firestore not installed") from exc
            from suggester.config import runtime_config

            project = runtime_config.get_firestore_project()
            if not project:
                raise RuntimeError("GCP project is required for Firestore search analytics")
            client = firestore.Client(project=project)  # pragma: no cover - needs GCP
        self._client = client
        self._collection = "search_records"
        self._lock = threading.Lock()

    def _col(self):
        return self._client.collection(self._collection)

    def append(self, record: SearchRecord, capacity: int) -> SearchRecord:
        with self._lock:
            self._col().document(record.id).set(record.model_dump())
            overflow = self._col().order_by("timestamp", direction=self._DESCENDING).offset(capacity)
            for snap in overflow.stream():
                snap.reference.delete()
        return record

    def snapshot(self) -> List[SearchRecord]:
        with self._lock:
            docs = list(self._col().order_by("timestamp").stream())
        return [SearchRecord(**d.to_dict()) for d in docs]

    def clear(self) -> None:
        with self._lock:
            for snap in self._col().stream():
                snap.reference.delete()
