from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Header

from suggester.common.error_envelope import error_response
from suggester.search_analytics.models import RecordSearchResponse, SearchRecordRequest, SearchStats
from suggester.search_analytics.service import SearchAnalyticsValidationError, get_search_analytics_service

router = APIRouter(prefix="/api/search-analytics", tags=["search_analytics"])


@router.post("", response_model=RecordSearchResponse)
def record_search(payload: SearchRecordRequest, user_agent: Optional[str] = Header(default=None)):
    try:
        record = get_search_analytics_service().record(payload.query, payload.components, user_agent=user_agent)
        return RecordSearchResponse(record_id=record.id)
    except SearchAnalyticsValidationError as exc:
        error_response(
            code="search_analytics.missing_fields",
            message=str(exc),
            status_code=400,
            resource_kind="search_record",
        )


@router.get("", response_model=SearchStats)
def get_search_stats():
    return get_search_analytics_service().aggregate()
