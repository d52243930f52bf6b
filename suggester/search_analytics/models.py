from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SearchRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex)
    query: str
    components: List[str] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=_now)
    user_agent: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


class SearchRecordRequest(BaseModel):
    # Presence is checked by the service so a missing field is reported as a
    # domain validation failure instead of a schema error.
    query: Optional[str] = None
    components: Optional[List[str]] = None


class RecordSearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "Search recorded successfully"
    record_id: str = Field(alias="recordId")


class PopularQuery(BaseModel):
    query: str
    count: int


class SearchStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_queries: int = Field(alias="totalQueries")
    today_queries: int = Field(alias="todayQueries")
    total_components: int = Field(alias="totalComponents")
    popular_queries: List[PopularQuery] = Field(default_factory=list, alias="popularQueries")
