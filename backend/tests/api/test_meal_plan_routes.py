"""Meal plan routes — nested meals/nutrition and the date range filter."""

URL = "/api/v1/meal-plans"


def _body(date: str, **overrides):
    body = {
        "coupleId": "c1",
        "name": f"Plan {date}",
        "date": date,
        "meals": {"breakfast": "Oats", "dinner": "Curry"},
        "nutrition": {"calories": 1800, "protein": 90, "carbs": 200, "fats": 60},
        "budget": 25,
    }
    body.update(overrides)
    return body


async def test_create_meal_plan(client):
    res = await client.post(URL, json=_body("2026-06-01"))
    assert res.status_code == 201
    data = res.json()
    assert data["meals"] == {"breakfast": "Oats", "dinner": "Curry", "snacks": []}
    assert data["nutrition"]["protein"] == 90


async def test_nested_nutrition_errors_have_paths(client):
    res = await client.post(URL, json=_body(
        "2026-06-01",
        nutrition={"calories": 1800, "protein": -1, "carbs": 200},
    ))
    assert res.status_code == 400
    paths = {d["path"] for d in res.json()["error"]["details"]}
    assert paths == {"nutrition.protein", "nutrition.fats"}


async def test_list_by_date_range_newest_first(client):
    for day in ("2026-06-01", "2026-06-03", "2026-06-10"):
        await client.post(URL, json=_body(day))

    res = await client.get(URL, params={
        "coupleId": "c1", "startDate": "2026-06-01", "endDate": "2026-06-05",
    })
    assert [p["name"] for p in res.json()] == ["Plan 2026-06-03", "Plan 2026-06-01"]

    res = await client.get(URL, params={"coupleId": "c1", "startDate": "2026-06-05"})
    assert len(res.json()) == 3
