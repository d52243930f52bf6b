"""Query-to-component resolution."""

from suggester.resolver.service import (  # noqa: F401
    ComponentResolver,
    get_component_resolver,
    normalize_query,
    set_component_resolver,
)
