"""End-to-end suggestion flow: resolve a query, build its snippet, report usage."""
from __future__ import annotations

import logging
from typing import Optional

from suggester.catalog.service import ComponentCatalog, get_component_catalog
from suggester.resolver.service import ComponentResolver, get_component_resolver
from suggester.search_analytics.service import SearchAnalyticsService, get_search_analytics_service
from suggester.snippets.service import SnippetAssembler, get_snippet_assembler
from suggester.suggestions.models import ComponentList, ComponentSnippet, SuggestionResult

logger = logging.getLogger(__name__)


class SuggestionService:
    def __init__(
        self,
        resolver: Optional[ComponentResolver] = None,
        assembler: Optional[SnippetAssembler] = None,
        analytics: Optional[SearchAnalyticsService] = None,
        catalog: Optional[ComponentCatalog] = None,
    ) -> None:
        self.resolver = resolver or get_component_resolver()
        self.assembler = assembler or get_snippet_assembler()
        self._analytics = analytics
        self.catalog = catalog or get_component_catalog()

    @property
    def analytics(self) -> SearchAnalyticsService:
        return self._analytics or get_search_analytics_service()

    def suggest(self, query: str, record: bool = True, user_agent: Optional[str] = None) -> SuggestionResult:
        text = (query or "").strip()
        if not text:
            # Blank input shows nothing and is never reported
            return SuggestionResult(query=text)

        components = [c.value for c in self.resolver.resolve(text)]
        snippet = self.assembler.assemble(components)
        record_id: Optional[str] = None
        if record and components:
            try:
                record_id = self.analytics.record(text, components, user_agent=user_agent).id
            except Exception as exc:
                logger.warning("Failed to record search analytics for %r", text, exc_info=exc)
        return SuggestionResult(query=text, components=components, snippet=snippet, record_id=record_id)

    def list_components(self) -> ComponentList:
        return ComponentList(
            total_components=self.catalog.total_components,
            components=self.catalog.component_names(),
        )

    def component_snippet(self, name: str) -> ComponentSnippet:
        return ComponentSnippet(name=name, snippet=self.assembler.render_component(name))


_default_service: Optional[SuggestionService] = None


def get_suggestion_service() -> SuggestionService:
    global _default_service
    if _default_service is None:
        _default_service = SuggestionService()
    return _default_service


def set_suggestion_service(service: Optional[SuggestionService]) -> None:
    global _default_service
    _default_service = service
