def test_root(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.json()["status"] == "operational"


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "OK"
    assert body["version"] == "1.0.0"
    assert "timestamp" in body
