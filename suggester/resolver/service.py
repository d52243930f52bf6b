"""Maps a free-text UI description onto catalog components.

Matching runs in two tiers. Phrase rules are checked first against the whole
normalized query; if any fires, keyword rules are skipped entirely. Keyword
rules match each whitespace token either exactly or by substring containment
in either direction, so a short token like ``"a"`` pulls in every keyword
containing that letter. That permissive behavior is kept as-is.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from suggester.catalog.models import ComponentName
from suggester.catalog.service import ComponentCatalog, get_component_catalog


def normalize_query(query: Optional[str]) -> str:
    return (query or "").lower().strip()


class ComponentResolver:
    def __init__(self, catalog: Optional[ComponentCatalog] = None) -> None:
        self.catalog = catalog or get_component_catalog()

    def resolve(self, query: Optional[str]) -> List[ComponentName]:
        normalized = normalize_query(query)
        # dict keys give us an insertion-ordered set
        found: Dict[ComponentName, None] = {}

        for phrase, components in self.catalog.phrase_rules.items():
            if phrase in normalized:
                self._add(found, components)

        if not found:
            keyword_rules = self.catalog.keyword_rules
            for token in normalized.split():
                self._match_token(found, token, keyword_rules)

        if not found:
            return list(self.catalog.fallback)
        return list(found)

    def _match_token(
        self,
        found: Dict[ComponentName, None],
        token: str,
        keyword_rules: Mapping[str, Iterable[ComponentName]],
    ) -> None:
        exact = keyword_rules.get(token)
        if exact:
            self._add(found, exact)
        for keyword, components in keyword_rules.items():
            if token in keyword or keyword in token:
                self._add(found, components)

    @staticmethod
    def _add(found: Dict[ComponentName, None], components: Iterable[ComponentName]) -> None:
        for component in components:
            found.setdefault(component, None)


_default_resolver: Optional[ComponentResolver] = None


def get_component_resolver() -> ComponentResolver:
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = ComponentResolver()
    return _default_resolver


def set_component_resolver(resolver: Optional[ComponentResolver]) -> None:
    global _default_resolver
    _default_resolver = resolver
