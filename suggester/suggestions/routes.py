from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Header

from suggester.catalog.models import UnknownComponentError
from suggester.common.error_envelope import error_response
from suggester.suggestions.models import ComponentList, ComponentSnippet, SuggestionRequest, SuggestionResult
from suggester.suggestions.service import get_suggestion_service

router = APIRouter(prefix="/api", tags=["suggestions"])


@router.post("/suggestions", response_model=SuggestionResult)
def suggest_components(payload: SuggestionRequest, user_agent: Optional[str] = Header(default=None)):
    return get_suggestion_service().suggest(payload.query, record=payload.record, user_agent=user_agent)


@router.get("/components", response_model=ComponentList)
def list_components():
    return get_suggestion_service().list_components()


@router.get("/components/{name}", response_model=ComponentSnippet)
def get_component_snippet(name: str):
    try:
        return get_suggestion_service().component_snippet(name)
    except UnknownComponentError as exc:
        error_response(
            code="catalog.component_not_found",
            message=str(exc),
            status_code=404,
            resource_kind="component",
            details={"name": exc.name},
        )
