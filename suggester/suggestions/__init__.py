"""Suggestion flow tying the resolver, snippet assembler and analytics together."""

from suggester.suggestions.service import (  # noqa: F401
    SuggestionService,
    get_suggestion_service,
    set_suggestion_service,
)
