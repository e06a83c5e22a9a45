from sqlalchemy import text


async def test_update_status(client, make_user):
    user = await make_user("Ravi")
    res = await client.put("/users/status", json={"user_id": user["id"], "status": "busy"})
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Status Updated"
    assert body["user"]["status"] == "busy"


async def test_update_status_rejects_unknown_value(client, make_user):
    user = await make_user("Ravi")
    res = await client.put("/users/status", json={"user_id": user["id"], "status": "sleeping"})
    assert res.status_code == 400
    assert "error" in res.json()

    profile = await client.get(f"/users/{user['id']}")
    assert profile.json()["status"] == "available"


async def test_update_status_unknown_user(client):
    res = await client.put("/users/status", json={"user_id": 999, "status": "offline"})
    assert res.status_code == 404


async def test_skills_are_a_set(client, make_user):
    user = await make_user("Ravi")
    res = await client.put(f"/users/{user['id']}/skills", json={"skills": ["python", "cycling", "python", " "]})
    assert res.status_code == 200
    assert res.json()["skills"] == ["cycling", "python"]

    # Replacing keeps shared entries and drops the rest
    res = await client.put(f"/users/{user['id']}/skills", json={"skills": ["python", "guitar"]})
    assert res.json()["skills"] == ["guitar", "python"]


async def test_profile_not_found(client):
    res = await client.get("/users/42")
    assert res.status_code == 404
    assert res.json() == {"error": "User not found"}


async def _rate(client, user_id, rating):
    res = await client.post("/reviews", json={"reviewed_user_id": user_id, "rating": rating})
    assert res.status_code == 200


async def test_search_helpers_filters_and_ordering(client, make_user):
    ravi = await make_user("Ravi Kumar")
    priya = await make_user("Priya")
    kiran = await make_user("Kiran Ravichandran")
    busy = await make_user("Ravi Busy")

    await client.put(f"/users/{ravi['id']}/skills", json={"skills": ["cycling"]})
    await client.put(f"/users/{priya['id']}/skills", json={"skills": ["cycling", "coding"]})
    await client.put(f"/users/{kiran['id']}/skills", json={"skills": ["coding"]})
    await client.put(f"/users/{busy['id']}/skills", json={"skills": ["cycling"]})
    await client.put("/users/status", json={"user_id": busy["id"], "status": "busy"})
    await _rate(client, ravi["id"], 3)

    res = await client.get("/search/helpers")
    names = [u["name"] for u in res.json()]
    assert "Ravi Busy" not in names
    assert names[-1] == "Ravi Kumar"  # lowest rated

    res = await client.get("/search/helpers", params={"skill": "cycling"})
    assert {u["name"] for u in res.json()} == {"Ravi Kumar", "Priya"}

    res = await client.get("/search/helpers", params={"query": "RAVI"})
    assert {u["name"] for u in res.json()} == {"Ravi Kumar", "Kiran Ravichandran"}

    res = await client.get("/search/helpers", params={"skill": "coding", "query": "ravi"})
    assert [u["name"] for u in res.json()] == ["Kiran Ravichandran"]

    res = await client.get("/search/helpers", params={"skill": "All"})
    assert len(res.json()) == 3


async def test_search_helpers_returns_empty_list_on_store_failure(client, make_user, engine):
    await make_user("Ravi")
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE user_skills"))
        await conn.execute(text("DROP TABLE users"))

    res = await client.get("/search/helpers", params={"skill": "cycling"})
    assert res.status_code == 200
    assert res.json() == []

    res = await client.get("/helpers")
    assert res.status_code == 200
    assert res.json() == []


async def test_helpers_top_ten_minimal_fields(client, make_user):
    for i in range(12):
        await make_user(f"Helper {i}")
    low = await make_user("Low Rated")
    await _rate(client, low["id"], 1)

    res = await client.get("/helpers")
    helpers = res.json()
    assert len(helpers) == 10
    assert set(helpers[0]) == {"id", "name", "rating_avg", "status"}
    assert "Low Rated" not in [h["name"] for h in helpers]


async def test_helpers_ignores_query_params(client, make_user):
    await make_user("Asha")
    res = await client.get("/helpers", params={"limit": "abc"})
    assert res.status_code == 200
    assert [h["name"] for h in res.json()] == ["Asha"]
