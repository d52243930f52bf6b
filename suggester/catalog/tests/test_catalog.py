from __future__ import annotations

import pytest

from suggester.catalog import rules, snippets
from suggester.catalog.models import CatalogError, ComponentName
from suggester.catalog.service import ComponentCatalog, default_catalog, get_component_catalog, set_component_catalog


def _catalog(**overrides) -> ComponentCatalog:
    fields = dict(
        snippets=snippets.COMPONENT_SNIPPETS,
        keyword_rules=rules.KEYWORD_RULES,
        phrase_rules=rules.PHRASE_RULES,
        fallback=rules.FALLBACK_COMPONENTS,
        icon_names=snippets.ICON_NAMES,
        package_order=snippets.PACKAGE_ORDER,
    )
    fields.update(overrides)
    return ComponentCatalog(**fields)


def test_every_component_has_exactly_one_template():
    catalog = default_catalog()
    assert catalog.total_components == 28
    assert set(catalog.snippets) == set(ComponentName)
    assert catalog.component_names()[:3] == ["Input", "PasswordInput", "EmailInput"]


def test_catalog_views_are_read_only():
    catalog = default_catalog()
    with pytest.raises(TypeError):
        catalog.keyword_rules["new"] = (ComponentName.Input,)  # type: ignore[index]
    with pytest.raises(TypeError):
        catalog.snippets[ComponentName.Input] = "x"  # type: ignore[index]
    with pytest.raises(Exception):
        catalog.fallback = ()  # type: ignore[misc]


def test_get_snippet_accepts_enum_or_string_and_misses_quietly():
    catalog = default_catalog()
    assert catalog.get_snippet(ComponentName.Badge) == catalog.get_snippet("Badge")
    assert "<Badge>New</Badge>" in catalog.get_snippet("Badge")
    assert catalog.get_snippet("Carousel") is None


def test_fallback_pair_is_input_and_button():
    assert default_catalog().fallback == (ComponentName.Input, ComponentName.Button)


def test_missing_template_is_rejected():
    partial = dict(snippets.COMPONENT_SNIPPETS)
    partial.pop(ComponentName.Pagination)
    with pytest.raises(CatalogError, match="Pagination"):
        _catalog(snippets=partial)


def test_uppercase_rule_is_rejected():
    with pytest.raises(CatalogError, match="lowercase"):
        _catalog(keyword_rules={"Login": (ComponentName.Input,)})


def test_accessor_pair_swaps_catalog():
    custom = _catalog(fallback=(ComponentName.Badge,))
    set_component_catalog(custom)
    assert get_component_catalog() is custom
    set_component_catalog(None)
    assert get_component_catalog() is default_catalog()
