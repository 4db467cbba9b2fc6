def submit(client, **overrides):
    payload = {
        "requester_name": "Meera",
        "requester_phone": "+91-99999-00000",
        "description": "Need some help with groceries",
        "location": "Karol Bagh",
    }
    payload.update(overrides)
    res = client.post("/api/emergency-requests/", json=payload)
    assert res.status_code == 201
    return res.json()


def register_volunteer(client, **overrides):
    payload = {
        "name": "Ravi",
        "email": "ravi@community.org",
        "skills": "First Aid",
        "availability": "Weekends",
    }
    payload.update(overrides)
    res = client.post("/api/volunteers/register", json=payload)
    assert res.status_code == 201
    return res.json()


def test_priority_is_classified_when_missing(client, category_ids):
    assert submit(client, description="Car accident on the highway")["priority_assigned"] == "high"
    assert submit(client, description="General question about shelters")["priority_assigned"] == "low"
    assert submit(client)["priority_assigned"] == "medium"

    created = submit(
        client,
        description="Need information",
        category_id=category_ids["Emergency Services"]
    )
    assert created["priority_assigned"] == "high"
    assert created["item"]["category_name"] == "Emergency Services"


def test_explicit_priority_is_kept(client):
    created = submit(client, description="Urgent fire", priority="low")
    assert created["priority_assigned"] == "low"
    assert created["item"]["priority"] == "low"


def test_unknown_category_is_stored_as_given(client):
    created = submit(client, description="Need info", category_id=999)
    assert created["item"]["category_id"] == 999
    assert created["item"]["category_name"] is None
    assert created["priority_assigned"] == "medium"


def test_requester_and_description_required(client):
    res = client.post("/api/emergency-requests/", json={"requester_name": "", "description": "x"})
    assert res.status_code == 422
    res = client.post("/api/emergency-requests/", json={"requester_name": "Meera"})
    assert res.status_code == 422


def test_list_ordered_by_priority(client):
    submit(client, description="Routine checkup appointment")
    submit(client, description="Need some help")
    submit(client, description="Unconscious person")

    items = client.get("/api/emergency-requests/").json()["items"]
    assert [i["priority"] for i in items] == ["high", "medium", "low"]


def test_stats(client):
    submit(client, description="Severe bleeding")
    submit(client, description="Need some help")

    stats = client.get("/api/emergency-requests/stats").json()
    assert stats == {
        "total_resources": 0,
        "total_requests": 2,
        "total_volunteers": 0,
        "high_priority_requests": 1,
    }


def test_status_update_requires_auth(client):
    created = submit(client)
    res = client.put(
        f"/api/emergency-requests/{created['item']['id']}/status",
        json={"status": "resolved"}
    )
    assert res.status_code == 401


def test_status_update(client, auth_headers):
    created = submit(client)
    request_id = created["item"]["id"]

    res = client.put(
        f"/api/emergency-requests/{request_id}/status",
        json={"status": "resolved", "notes": "Delivered"},
        headers=auth_headers
    )
    assert res.status_code == 200
    assert res.json()["status"] == "resolved"
    assert res.json()["notes"] == "Delivered"

    bad = client.put(
        f"/api/emergency-requests/{request_id}/status",
        json={"status": "done"},
        headers=auth_headers
    )
    assert bad.status_code == 422


def test_assign_volunteer(client, auth_headers):
    created = submit(client)
    request_id = created["item"]["id"]
    volunteer = register_volunteer(client)

    res = client.put(
        f"/api/emergency-requests/{request_id}/assign",
        json={"volunteer_id": volunteer["id"]},
        headers=auth_headers
    )
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "in-progress"
    assert body["volunteer_name"] == "Ravi"

    detail = client.get(f"/api/emergency-requests/{request_id}").json()
    assert detail["assigned_volunteer"]["email"] == "ravi@community.org"

    assignments = client.get(f"/api/volunteers/{volunteer['id']}/assignments").json()
    assert assignments["total"] == 1


def test_assign_inactive_volunteer(client, auth_headers):
    created = submit(client)
    volunteer = register_volunteer(client)
    client.put(f"/api/volunteers/{volunteer['id']}/status", json={"status": "busy"})

    res = client.put(
        f"/api/emergency-requests/{created['item']['id']}/assign",
        json={"volunteer_id": volunteer["id"]},
        headers=auth_headers
    )
    assert res.status_code == 400
    assert res.json()["detail"] == "Volunteer not found or inactive"


def test_delete(client, auth_headers):
    created = submit(client)
    request_id = created["item"]["id"]

    res = client.delete(f"/api/emergency-requests/{request_id}", headers=auth_headers)
    assert res.status_code == 200

    res = client.get(f"/api/emergency-requests/{request_id}")
    assert res.status_code == 404
    assert res.json()["detail"] == "Emergency request not found"
