"""Snippet assembly from catalog templates."""

from suggester.snippets.service import (  # noqa: F401
    ParsedSnippet,
    SnippetAssembler,
    detect_icon_imports,
    get_snippet_assembler,
    parse_snippet,
    set_snippet_assembler,
)
