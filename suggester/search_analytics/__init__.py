"""Search analytics: record suggestion queries and report usage statistics."""

from suggester.search_analytics.models import PopularQuery, SearchRecord, SearchStats  # noqa: F401
from suggester.search_analytics.repository import (  # noqa: F401
    InMemorySearchRecordRepository,
    SearchRecordRepository,
)
from suggester.search_analytics.service import (  # noqa: F401
    SearchAnalyticsError,
    SearchAnalyticsService,
    SearchAnalyticsValidationError,
    get_search_analytics_service,
    set_search_analytics_service,
)
