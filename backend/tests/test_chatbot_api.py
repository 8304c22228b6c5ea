"""API tests for the chatbot endpoints."""


def test_chat_conversation(client, sessions, text_generator):
    text_generator.reply = "Basil likes moist soil and six hours of sun."
    resp = client.post("/chatbot", json={"message": "How do I keep basil happy?", "userId": "u1"})
    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {"message", "plants", "storeItems", "buttons", "step"}
    assert body["message"] == text_generator.reply
    assert body["step"] == "conversation"
    assert body["plants"] == [] and body["storeItems"] == []
    assert len(sessions.history("u1")) == 2


def test_chat_recommendations(client, seeded_db, text_generator):
    text_generator.reply = "For quick harvests try radishes, lettuce and microgreens."
    resp = client.post("/chatbot", json={"message": "Show me quick growing options"})
    body = resp.json()
    assert body["step"] == "recommendations"
    assert [plant["name"] for plant in body["plants"]] == ["Radishes", "Lettuce", "Microgreens"]
    assert len(body["storeItems"]) == 4


def test_chat_requires_message(client):
    resp = client.post("/chatbot", json={"message": "   "})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Message is required"


def test_chat_is_rate_limited(client):
    statuses = [
        client.post("/chatbot", json={"message": "hello", "userId": "spammer"}).status_code
        for _ in range(31)
    ]
    assert statuses[:30] == [200] * 30
    assert statuses[30] == 429


def test_questions(client):
    questions = client.get("/chatbot/questions").json()["questions"]
    assert "I want plants for salads" in questions


def test_tips(client):
    body = client.get("/chatbot/tips").json()
    assert body["tip"] in body["allTips"]


def test_seasonal(client):
    body = client.get("/chatbot/seasonal").json()
    assert body["season"] in {"Spring", "Summer", "Fall", "Winter"}
    assert body["advice"]["tips"]


def test_identify(client, seeded_db):
    resp = client.post("/chatbot/identify", json={"description": "Long thin leaves, very upright"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["possibleMatches"] == ["snake plant", "spider plant", "dracaena"]
    assert body["plants"] == []
    assert "How big is the plant?" in body["suggestions"]


def test_identify_without_match_offers_defaults(client):
    body = client.post("/chatbot/identify", json={"description": "small and green"}).json()
    assert body["possibleMatches"] == ["pothos", "snake plant", "spider plant"]
    assert body["response"].startswith("I couldn't identify your plant")


def test_identify_requires_description(client):
    resp = client.post("/chatbot/identify", json={"description": " "})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Plant description is required"
    assert client.post("/chatbot/identify", json={}).status_code == 400


def test_health_and_headers(client):
    resp = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert resp.json() == {"status": "healthy"}
    assert resp.headers["X-Request-ID"] == "abc-123"
    assert resp.headers["X-Frame-Options"] == "DENY"
