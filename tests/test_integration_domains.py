def test_lookup_by_name_ignores_case(client):
    r = client.post("/api/domains", json={"domainName": "Example.com", "themeId": "rose-gold"})
    assert r.status_code == 201

    found = client.get("/api/domains?domainName=example.com").get_json()
    assert found["success"] is True
    assert found["data"]["domainName"] == "Example.com"
    assert found["data"]["themeId"] == "rose-gold"


def test_lookup_miss_returns_null(client):
    r = client.get("/api/domains?domainName=nowhere.test")
    assert r.status_code == 200
    assert r.get_json() == {"success": True, "data": None}


def test_create_validation_and_duplicates(client):
    r = client.post("/api/domains", json={})
    assert r.status_code == 400
    assert r.get_json()["message"] == "Domain name is required"

    client.post("/api/domains", json={"domainName": "dup.test"})
    r = client.post("/api/domains", json={"domainName": "dup.test"})
    assert r.status_code == 400


def test_list_newest_first_and_crud(client):
    first = client.post("/api/domains", json={"domainName": "one.test"}).get_json()["data"]
    second = client.post("/api/domains", json={"domainName": "two.test"}).get_json()["data"]
    names = [d["domainName"] for d in client.get("/api/domains").get_json()["data"]]
    assert names == ["two.test", "one.test"]

    r = client.put(f"/api/domains/{first['_id']}", json={"themeId": "midnight-blue"})
    assert r.status_code == 200
    assert r.get_json()["data"]["themeId"] == "midnight-blue"

    r = client.put(f"/api/domains/{first['_id']}", json={"cars": [{"price": 5}]})
    assert r.status_code == 400

    assert client.delete(f"/api/domains/{second['_id']}").status_code == 200
    assert client.get(f"/api/domains/{second['_id']}").status_code == 404
    assert client.get("/api/domains/garbage").status_code == 404


def test_string_visibility_hides_car_in_overlay(client):
    shown = client.post("/api/cars", json={
        "carType": "transfer", "name": "Shown", "type": "Standard", "price": 100,
    }).get_json()["data"]["_id"]
    hidden = client.post("/api/cars", json={
        "carType": "transfer", "name": "Hidden", "type": "Standard", "price": 100,
    }).get_json()["data"]["_id"]

    r = client.post("/api/domains", json={"domainName": "t.test", "cars": [
        {"carId": hidden, "price": 5, "isVisible": "false"},
        {"carId": shown, "price": 80, "isVisible": "true"},
    ]})
    assert r.status_code == 201
    assert [c["isVisible"] for c in r.get_json()["data"]["cars"]] == [False, True]

    cars = client.get("/api/cars?domainName=t.test").get_json()["data"]
    assert [(c["name"], c["price"]) for c in cars] == [("Shown", 80)]


def test_non_boolean_visibility_is_400(client):
    r = client.post("/api/domains", json={"domainName": "bad.test", "cars": [
        {"carId": "abc", "price": 5, "isVisible": "maybe"},
    ]})
    assert r.status_code == 400
    assert r.get_json()["message"] == "Invalid value for 'cars.isVisible'"
