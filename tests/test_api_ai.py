import base64
import json

from dayrhythm.core.exceptions import LLMError
from dayrhythm.services.insights_service import EMPTY_DAY_INSIGHTS

from conftest import USER_ID, FakeLLM


def test_health_is_public(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "DayRhythm AI Backend is running"
    assert body["service"] == "AI & Analytics Service"
    assert "timestamp" in body


def test_security_headers_are_set(client):
    response = client.get("/api/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "X-Response-Time" in response.headers
    assert response.headers["X-Request-ID"]


def test_request_id_is_echoed(client):
    response = client.get("/api/health", headers={"X-Request-ID": "trace-42"})

    assert response.headers["X-Request-ID"] == "trace-42"


def test_missing_token_is_rejected(client):
    response = client.post("/api/ai/insights", json={"date": "2025-10-25"})

    assert response.status_code == 401
    assert response.json() == {
        "success": False,
        "error": "Missing or invalid authorization header",
        "code": "unauthorized",
    }


def test_unknown_token_is_rejected(client):
    response = client.post(
        "/api/ai/insights",
        json={"date": "2025-10-25"},
        headers={"Authorization": "Bearer nope"},
    )

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid or expired token"


def test_insights_for_empty_day(client, auth_headers, llm):
    response = client.post("/api/ai/insights", json={"date": "2025-10-25"}, headers=auth_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["insights"] == EMPTY_DAY_INSIGHTS
    assert data["visualInsights"]["energyHeatmap"] == []
    assert data["visualInsights"]["focusBlocks"] == []
    assert data["visualInsights"]["workLifeBalance"]["balanceScore"] == 0
    assert llm.calls == []


def test_insights_for_scheduled_day(client, auth_headers, store, llm):
    store.add_row(USER_ID, title="Deep work", start_time=9, end_time=11, date="2025-10-25", category="coding")
    store.add_row(USER_ID, title="Gym", start_time=17, end_time=18, date="2025-10-25", category="exercise")
    store.add_row("user-2", title="Not mine", start_time=9, end_time=10, date="2025-10-25")
    llm.reply = json.dumps(["one", "two", "three", "four", "five", "six"])

    response = client.post("/api/ai/insights", json={"date": "2025-10-25"}, headers=auth_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["insights"] == ["one", "two", "three", "four", "five"]

    heatmap = data["visualInsights"]["energyHeatmap"]
    assert [entry["title"] for entry in heatmap] == ["Deep work", "Gym"]
    assert heatmap[0]["optimalEnergy"] == "high"
    assert heatmap[0]["actualTaskType"] == "deep-work"
    assert heatmap[0]["alignment"] == "optimal"

    blocks = data["visualInsights"]["focusBlocks"]
    assert blocks[0]["quality"] == "excellent"
    assert blocks[-1]["hasBreakAfter"] is True

    balance = data["visualInsights"]["workLifeBalance"]
    assert balance["work"] == 2
    assert balance["health"] == 1
    assert balance["workPercentage"] == 67
    assert balance["healthPercentage"] == 33


def test_insights_rejects_bad_date(client, auth_headers):
    response = client.post("/api/ai/insights", json={"date": "25-10-2025"}, headers=auth_headers)

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Validation failed"
    assert body["details"][0]["field"] == "date"


def test_insights_llm_failure_is_500(client, auth_headers, store, llm, llm_error):
    store.add_row(USER_ID, title="Gym", start_time=17, end_time=18, date="2025-10-25")
    llm.error = llm_error

    response = client.post("/api/ai/insights", json={"date": "2025-10-25"}, headers=auth_headers)

    assert response.status_code == 500
    assert response.json()["code"] == "llm_error"


def test_store_failure_is_500_envelope(client, auth_headers, store):
    store.fail = True

    response = client.post("/api/ai/insights", json={"date": "2025-10-25"}, headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Failed to fetch events",
        "code": "store_error",
    }


def test_test_parse_is_public(client, llm):
    llm.reply = '```json\n[{"title": "Dinner", "startTime": 19.0, "endTime": 20.0}]\n```'

    response = client.post("/api/ai/test-parse", json={"prompt": "dinner at 7pm"})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "data": {"events": [{"title": "Dinner", "startTime": 19.0, "endTime": 20.0}]},
    }


def test_parse_schedule_requires_prompt(client, auth_headers):
    response = client.post("/api/ai/parse-schedule", json={"prompt": ""}, headers=auth_headers)

    assert response.status_code == 400


def test_parse_schedule_bad_model_reply_is_500(client, auth_headers, llm):
    llm.reply = "I'm not sure what you mean."

    response = client.post(
        "/api/ai/parse-schedule", json={"prompt": "something"}, headers=auth_headers
    )

    assert response.status_code == 500
    assert response.json()["code"] == "ai_parse_error"


def test_parse_schedule_pro_without_gemini_is_503(client, auth_headers, services):
    services.schedules.llm = FakeLLM(gemini_configured=False)

    response = client.post(
        "/api/ai/parse-schedule-pro", json={"prompt": "gym at 6"}, headers=auth_headers
    )

    assert response.status_code == 503
    assert "GEMINI_API_KEY" in response.json()["error"]


def test_parse_schedule_image(client, auth_headers, llm):
    llm.gemini_reply = '[{"title": "Math", "startTime": 9.0, "endTime": 10.0}]'
    image = "data:image/jpeg;base64," + base64.b64encode(b"jpeg-bytes").decode()

    response = client.post(
        "/api/ai/parse-schedule-image", json={"image": image}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json()["data"]["events"][0]["title"] == "Math"
    assert llm.gemini_calls[0].images == [b"jpeg-bytes"]


def test_parse_schedule_image_rejects_invalid_base64(client, auth_headers, llm):
    response = client.post(
        "/api/ai/parse-schedule-image", json={"image": "%%%"}, headers=auth_headers
    )

    assert response.status_code == 400
    assert llm.gemini_calls == []


def test_parse_schedule_images_limits_count(client, auth_headers):
    images = [base64.b64encode(b"x").decode()] * 4

    response = client.post(
        "/api/ai/parse-schedule-images", json={"images": images}, headers=auth_headers
    )

    assert response.status_code == 400
    detail = response.json()["details"][0]
    assert detail["field"] == "images"
    assert "Maximum 3 images allowed" in detail["message"]


def test_parse_schedule_images_requires_one(client, auth_headers):
    response = client.post(
        "/api/ai/parse-schedule-images", json={"images": []}, headers=auth_headers
    )

    assert response.status_code == 400
    assert "At least one image" in response.json()["details"][0]["message"]


def test_analytics_range(client, auth_headers, store):
    store.add_row(USER_ID, title="A", start_time=9, end_time=10, date="2025-10-01")
    store.add_row(USER_ID, title="B", start_time=11, end_time=12.5, date="2025-10-02")

    response = client.post(
        "/api/ai/analytics",
        json={"startDate": "2025-10-01", "endDate": "2025-10-07"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["data"] == {
        "summary": "Analyzed 2 events across 2 days",
        "totalEvents": 2,
        "totalHours": 2.5,
        "averageEventsPerDay": 1.0,
        "dateRange": {"startDate": "2025-10-01", "endDate": "2025-10-07"},
    }


def test_analytics_empty_range(client, auth_headers):
    response = client.post(
        "/api/ai/analytics",
        json={"startDate": "2025-10-01", "endDate": "2025-10-07"},
        headers=auth_headers,
    )

    data = response.json()["data"]
    assert data["totalEvents"] == 0
    assert data["summary"] == "No events found in this date range."


def test_task_insight_never_fails_on_llm_error(client, auth_headers, llm):
    llm.error = LLMError("rate limited")

    response = client.post(
        "/api/ai/task-insight",
        json={"title": "Write report", "startTime": 9, "endTime": 10.5},
        headers=auth_headers,
    )

    assert response.status_code == 200
    insight = response.json()["data"]["insight"]
    assert insight.startswith("• Morning energy peak")
    assert "1.5h duration" in insight
