from __future__ import annotations

import pytest

from suggester.catalog import rules, snippets
from suggester.catalog.models import ComponentName as C
from suggester.catalog.service import ComponentCatalog
from suggester.resolver.service import ComponentResolver, normalize_query


@pytest.fixture
def resolver() -> ComponentResolver:
    return ComponentResolver()


def test_phrase_returns_exact_mapped_set(resolver):
    assert resolver.resolve("login form") == [C.EmailInput, C.PasswordInput, C.Checkbox, C.SubmitButton]


def test_query_is_lowercased_and_trimmed(resolver):
    assert normalize_query("  Login FORM \n") == "login form"
    assert resolver.resolve("  Login FORM ") == resolver.resolve("login form")


@pytest.mark.parametrize("query", ["", "   ", None])
def test_blank_query_falls_back(resolver, query):
    assert resolver.resolve(query) == [C.Input, C.Button]


def test_unmatched_query_falls_back(resolver):
    assert resolver.resolve("zzz") == [C.Input, C.Button]


def test_multiple_phrases_union_in_table_order(resolver):
    result = resolver.resolve("admin dashboard with data table")
    assert result == [C.ContentCard, C.Table, C.Banner, C.Pagination, C.SearchInput]


def test_phrase_match_skips_keyword_pass(resolver):
    # "modal" would add Dialog if keywords were consulted
    result = resolver.resolve("search form in a modal")
    assert result == [C.SearchInput, C.Button]
    assert C.Dialog not in result


def test_single_keyword_exact_match(resolver):
    assert resolver.resolve("modal") == [C.Dialog]


def test_token_containing_keyword_matches(resolver):
    assert resolver.resolve("toggles") == [C.Switch]


def test_token_inside_longer_keywords_over_matches(resolver):
    # "form" also lives inside "contact form" and "search form"
    assert resolver.resolve("form") == [
        C.Input,
        C.Button,
        C.EmailInput,
        C.Textarea,
        C.SubmitButton,
        C.SearchInput,
    ]


def test_dashboard_sentence_includes_dashboard_rule(resolver):
    result = resolver.resolve("I need a dashboard")
    assert {C.ContentCard, C.Banner, C.Table, C.Progress} <= set(result)
    assert len(result) == len(set(result))


def test_resolution_is_deterministic(resolver):
    query = "user settings with a dropdown and toggle"
    first = resolver.resolve(query)
    second = ComponentResolver().resolve(query)
    assert first == second
    assert [c.value for c in first] == [c.value for c in second]


def test_fallback_is_a_fresh_list(resolver):
    result = resolver.resolve("")
    result.append(C.Badge)
    assert resolver.resolve("") == [C.Input, C.Button]


def test_injected_catalog_drives_matching():
    catalog = ComponentCatalog(
        snippets=snippets.COMPONENT_SNIPPETS,
        keyword_rules={"chip": (C.Badge,)},
        phrase_rules={"status chip": (C.Badge, C.Progress)},
        fallback=(C.Divider,),
        icon_names=snippets.ICON_NAMES,
        package_order=snippets.PACKAGE_ORDER,
    )
    custom = ComponentResolver(catalog)
    assert custom.resolve("a status chip row") == [C.Badge, C.Progress]
    assert custom.resolve("chips") == [C.Badge]
    assert custom.resolve("login") == [C.Divider]
    assert rules.KEYWORD_RULES["login"]  # shared tables untouched
