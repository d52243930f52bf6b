"""Read-only component catalog shared by the resolver and the snippet assembler."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple, Union

from suggester.catalog import rules, snippets
from suggester.catalog.models import CatalogError, ComponentName
from suggester.catalog.rules import ComponentSet


@dataclass(frozen=True)
class ComponentCatalog:
    snippets: Mapping[ComponentName, str]
    keyword_rules: Mapping[str, ComponentSet]
    phrase_rules: Mapping[str, ComponentSet]
    fallback: ComponentSet
    icon_names: Tuple[str, ...]
    package_order: Tuple[str, ...]

    def __post_init__(self) -> None:
        # Freeze whatever mappings the caller handed us
        object.__setattr__(self, "snippets", MappingProxyType(dict(self.snippets)))
        object.__setattr__(self, "keyword_rules", MappingProxyType(dict(self.keyword_rules)))
        object.__setattr__(self, "phrase_rules", MappingProxyType(dict(self.phrase_rules)))
        object.__setattr__(self, "fallback", tuple(self.fallback))
        object.__setattr__(self, "icon_names", tuple(self.icon_names))
        object.__setattr__(self, "package_order", tuple(self.package_order))
        self.validate()

    def validate(self) -> None:
        missing = [name.value for name in ComponentName if name not in self.snippets]
        if missing:
            raise CatalogError(f"components without a snippet template: {missing}")
        if not self.fallback:
            raise CatalogError("fallback components must not be empty")
        for table_name, table in (("keyword", self.keyword_rules), ("phrase", self.phrase_rules)):
            for trigger, components in table.items():
                if trigger != trigger.lower():
                    raise CatalogError(f"{table_name} rule '{trigger}' must be lowercase")
                unknown = [c for c in components if c not in self.snippets]
                if unknown:
                    raise CatalogError(f"{table_name} rule '{trigger}' references unknown components {unknown}")

    def get_snippet(self, name: Union[ComponentName, str]) -> Optional[str]:
        try:
            key = ComponentName(name)
        except ValueError:
            return None
        return self.snippets.get(key)

    def component_names(self) -> List[str]:
        return [name.value for name in self.snippets]

    @property
    def total_components(self) -> int:
        return len(self.snippets)


@lru_cache(maxsize=1)
def default_catalog() -> ComponentCatalog:
    return ComponentCatalog(
        snippets=snippets.COMPONENT_SNIPPETS,
        keyword_rules=rules.KEYWORD_RULES,
        phrase_rules=rules.PHRASE_RULES,
        fallback=rules.FALLBACK_COMPONENTS,
        icon_names=snippets.ICON_NAMES,
        package_order=snippets.PACKAGE_ORDER,
    )


_default_catalog: Optional[ComponentCatalog] = None


def get_component_catalog() -> ComponentCatalog:
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = default_catalog()
    return _default_catalog


def set_component_catalog(catalog: Optional[ComponentCatalog]) -> None:
    global _default_catalog
    _default_catalog = catalog
