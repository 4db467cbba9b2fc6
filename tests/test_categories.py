def test_list_seeded_categories(client):
    res = client.get("/api/categories/")
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 6
    names = [c["name"] for c in body["items"]]
    assert names == sorted(names)
    assert "Emergency Services" in names


def test_category_detail_stats(client, category_ids, auth_headers):
    healthcare = category_ids["Healthcare"]

    client.post("/api/resources/", json={
        "name": "City Clinic",
        "address": "12 Main Road",
        "category_id": healthcare,
    }, headers=auth_headers)
    client.post("/api/emergency-requests/", json={
        "requester_name": "Asha",
        "description": "Need a doctor visit",
        "category_id": healthcare,
    })

    res = client.get(f"/api/categories/{healthcare}")
    assert res.status_code == 200
    assert res.json()["stats"] == {"resources": 1, "requests": 1, "active_requests": 1}

    resources = client.get(f"/api/categories/{healthcare}/resources").json()
    assert resources["total"] == 1
    assert resources["items"][0]["category_name"] == "Healthcare"

    requests = client.get(f"/api/categories/{healthcare}/requests").json()
    assert requests["total"] == 1


def test_unknown_category(client):
    res = client.get("/api/categories/9999")
    assert res.status_code == 404
    assert res.json()["detail"] == "Category not found"
