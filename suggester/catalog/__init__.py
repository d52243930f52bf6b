"""Static component catalog: snippet templates and keyword/phrase rules."""

from suggester.catalog.models import CatalogError, ComponentName, UnknownComponentError  # noqa: F401
from suggester.catalog.service import (  # noqa: F401
    ComponentCatalog,
    default_catalog,
    get_component_catalog,
    set_component_catalog,
)
