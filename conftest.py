import os
import sys
from pathlib import Path

import pytest

# Ensure repo root on sys.path for imports from anywhere in tests tree.
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("SEARCH_ANALYTICS_BACKEND", "memory")
os.environ.pop("SEARCH_ANALYTICS_SEED_DEMO", None)

from suggester.catalog.service import set_component_catalog  # noqa: E402
from suggester.resolver.service import set_component_resolver  # noqa: E402
from suggester.search_analytics.service import set_search_analytics_service  # noqa: E402
from suggester.snippets.service import set_snippet_assembler  # noqa: E402
from suggester.suggestions.service import set_suggestion_service  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_singletons():
    yield
    set_suggestion_service(None)
    set_search_analytics_service(None)
    set_snippet_assembler(None)
    set_component_resolver(None)
    set_component_catalog(None)
