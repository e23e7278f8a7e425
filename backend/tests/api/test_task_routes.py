"""Task routes — default status, AI reasoning column and filters."""

URL = "/api/v1/tasks"


def _body(**overrides):
    body = {"coupleId": "c1", "title": "Book dentist", "assignedTo": "partner_a"}
    body.update(overrides)
    return body


async def test_create_task_defaults(client):
    res = await client.post(URL, json=_body())
    assert res.status_code == 201
    data = res.json()
    assert data["status"] == "pending"
    assert data["ai_reasoning"] is None


async def test_ai_reasoning_round_trips(client):
    reasoning = {"why": "Overdue by 6 months", "confidence": 0.8}
    res = await client.post(URL, json=_body(aiReasoning=reasoning))
    assert res.json()["ai_reasoning"] == reasoning


async def test_filters(client):
    await client.post(URL, json=_body(title="Laundry", category="home"))
    await client.post(URL, json=_body(
        title="Taxes", assignedTo="partner_b", status="in_progress", category="admin",
    ))

    res = await client.get(URL, params={"coupleId": "c1", "status": "in_progress"})
    assert [t["title"] for t in res.json()] == ["Taxes"]

    res = await client.get(URL, params={"coupleId": "c1", "assignedTo": "partner_a"})
    assert [t["title"] for t in res.json()] == ["Laundry"]

    res = await client.get(URL, params={"coupleId": "c1", "category": "admin"})
    assert [t["title"] for t in res.json()] == ["Taxes"]

    res = await client.get(URL, params={"coupleId": "c1", "status": "all"})
    assert len(res.json()) == 2


async def test_invalid_status_on_create(client):
    res = await client.post(URL, json=_body(status="done"))
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["path"] == "status"
