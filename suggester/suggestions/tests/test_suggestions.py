from __future__ import annotations

import json

from fastapi.testclient import TestClient

from suggester.search_analytics.repository import InMemorySearchRecordRepository
from suggester.search_analytics.service import SearchAnalyticsService, set_search_analytics_service
from suggester.server import create_app
from suggester.suggestions import runner
from suggester.suggestions.service import SuggestionService


def _analytics() -> SearchAnalyticsService:
    return SearchAnalyticsService(repo=InMemorySearchRecordRepository(), logger=lambda entry: {"status": "accepted"})


def test_suggest_resolves_assembles_and_records():
    analytics = _analytics()
    svc = SuggestionService(analytics=analytics)
    result = svc.suggest("  Login form ")
    assert result.query == "Login form"
    assert result.components == ["EmailInput", "PasswordInput", "Checkbox", "SubmitButton"]
    assert result.snippet.startswith("import { Button, Checkbox, Input, InputContainer, Label, Utility }")
    assert result.record_id
    stored = analytics.repo.snapshot()
    assert [r.query for r in stored] == ["Login form"]
    assert stored[0].components == result.components


def test_blank_query_returns_nothing_and_records_nothing():
    analytics = _analytics()
    result = SuggestionService(analytics=analytics).suggest("   ")
    assert result.components == []
    assert result.snippet == ""
    assert result.record_id is None
    assert analytics.repo.snapshot() == []


def test_record_flag_skips_analytics():
    analytics = _analytics()
    result = SuggestionService(analytics=analytics).suggest("modal", record=False)
    assert result.components == ["Dialog"]
    assert result.record_id is None
    assert analytics.repo.snapshot() == []


class _BrokenAnalytics:
    def record(self, *args, **kwargs):
        raise RuntimeError("store offline")


def test_analytics_failure_does_not_fail_suggestion():
    result = SuggestionService(analytics=_BrokenAnalytics()).suggest("modal")  # type: ignore[arg-type]
    assert result.components == ["Dialog"]
    assert "<Dialog>" in result.snippet
    assert result.record_id is None


def test_suggestion_routes():
    analytics = _analytics()
    set_search_analytics_service(analytics)
    client = TestClient(create_app())

    resp = client.post("/api/suggestions", json={"query": "data table"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["components"] == ["Table", "SearchInput", "Pagination"]
    assert body["recordId"]
    assert "import { VisaSearchTiny } from '@visa/nova-icons-react';" in body["snippet"]

    stats = client.get("/api/search-analytics").json()
    assert stats["totalQueries"] == 1
    assert stats["popularQueries"] == [{"query": "data table", "count": 1}]


def test_component_listing_and_detail_routes():
    client = TestClient(create_app())
    listing = client.get("/api/components").json()
    assert listing["totalComponents"] == 28
    assert len(listing["components"]) == 28
    assert "Pagination" in listing["components"]

    detail = client.get("/api/components/Divider")
    assert detail.status_code == 200
    assert detail.json() == {"name": "Divider", "snippet": "import { Divider } from '@visa/nova-react';\n\n<Divider />"}

    missing = client.get("/api/components/Carousel")
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "catalog.component_not_found"


def test_health_route():
    client = TestClient(create_app())
    assert client.get("/health").json()["status"] == "ok"


def test_runner_prints_components_and_snippet(capsys):
    runner.main(["login", "form"])
    out = capsys.readouterr().out
    assert out.startswith("Components: EmailInput, PasswordInput, Checkbox, SubmitButton")
    assert "<Button type=\"submit\">Submit</Button>" in out


def test_runner_json_output(capsys):
    runner.main(["--json", "modal"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["components"] == ["Dialog"]
    assert "recordId" not in payload
