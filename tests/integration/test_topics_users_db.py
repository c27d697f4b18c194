async def test_topics(db_client):
    response = await db_client.get("/api/topics")

    assert response.status_code == 200
    assert {t["slug"] for t in response.json()["topics"]} == {"mitch", "cats", "paper"}


async def test_create_topic_then_duplicate(db_client):
    payload = {"slug": "Jordan", "description": "Loves testing"}

    response = await db_client.post("/api/topics", json=payload)
    assert response.status_code == 201
    assert response.json() == {"topic": payload}

    response = await db_client.post("/api/topics", json=payload)
    assert response.status_code == 400
    assert response.json() == {"msg": "key already exists"}


async def test_users(db_client):
    response = await db_client.get("/api/users")

    assert len(response.json()["users"]) == 4


async def test_user_by_username(db_client):
    response = await db_client.get("/api/users/lurker")

    assert response.json()["user"]["name"] == "do_nothing"


async def test_create_user_without_avatar_then_duplicate(db_client):
    response = await db_client.post("/api/users", json={"username": "Jordan123", "name": "Jordan"})
    assert response.status_code == 201
    assert response.json()["user"] == {"username": "Jordan123", "name": "Jordan", "avatar_url": None}

    response = await db_client.post("/api/users", json={"username": "Jordan123", "name": "Again"})
    assert response.status_code == 400
    assert response.json() == {"msg": "key already exists"}
