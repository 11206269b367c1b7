"""HTTP tests for the roster API."""

from hospital_roster.config.settings import settings

DEFAULT_HASH = "0192023a7bbd73250516f069df18b500"


def add_staff(client, **fields):
    response = client.post("/admin/staffs/add-staff", json=fields)
    assert response.status_code == 200
    return response.json()["id"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database_connected": True}


def test_query_hospital_info_returns_seeded_record(client):
    response = client.get("/hospital/query-info")
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "城东医院"
    assert body["emergencyPhone"] == "025-12345679"


def test_add_staff_then_list_with_defaults(client):
    staff_id = add_staff(client, name="张三", department="内科")

    response = client.get("/staffs/get-all-staffs")
    assert response.status_code == 200
    rows = response.json()
    assert len(rows) == 1
    assert rows[0]["id"] == staff_id
    assert rows[0]["position"] == ""
    assert rows[0]["status"] == "active"


def test_add_staff_missing_department_is_400(client):
    response = client.post("/admin/staffs/add-staff", json={"name": "张三"})
    assert response.status_code == 400
    assert "department" in response.json()["error"]


def test_update_staff_round_trip(client):
    staff_id = add_staff(client, name="张三", department="内科")

    response = client.put(
        f"/admin/staffs/update-staff/{staff_id}",
        json={"name": "张三丰", "department": "外科", "position": "主任", "status": "inactive"},
    )
    assert response.json() == {"changes": 1}

    row = client.get("/staffs/get-all-staffs").json()[0]
    assert (row["name"], row["department"], row["position"], row["status"]) == ("张三丰", "外科", "主任", "inactive")


def test_update_unknown_staff_reports_zero_changes(client):
    response = client.put("/admin/staffs/update-staff/999", json={"name": "x", "department": "y"})
    assert response.status_code == 200
    assert response.json() == {"changes": 0}


def test_update_staff_without_name_is_database_error(client):
    staff_id = add_staff(client, name="张三", department="内科")

    response = client.put(f"/admin/staffs/update-staff/{staff_id}", json={"department": "外科"})

    assert response.status_code == 500
    assert "NOT NULL" in response.json()["error"]


def test_delete_staff_keeps_orphaned_duty(client):
    staff_id = add_staff(client, name="张三", department="内科")
    client.post("/admin/arrange-duty", json={"staff_id": staff_id, "date": "2024-01-01", "shift": "morning"})

    response = client.delete(f"/admin/staffs/delete-staff/{staff_id}")
    assert response.json() == {"changes": 1}

    assert client.get("/staffs/get-all-staffs").json() == []
    duty = client.get("/staffs/query-duty/2024-01-01").json()
    assert len(duty) == 1
    assert duty[0]["staff_id"] == staff_id
    assert duty[0]["name"] is None


def test_delete_unknown_staff(client):
    assert client.delete("/admin/staffs/delete-staff/12345").json() == {"changes": 0}


def test_arrange_duty_twice_is_400(client):
    add_staff(client, name="张三", department="内科")
    payload = {"staff_id": 1, "date": "2024-01-01", "shift": "morning"}

    first = client.post("/admin/arrange-duty", json=payload)
    assert first.status_code == 200
    assert "id" in first.json()

    second = client.post("/admin/arrange-duty", json=payload)
    assert second.status_code == 400
    assert second.json() == {"error": "该人员在指定日期的该班次已存在排班"}

    assert len(client.get("/staffs/query-duty/2024-01-01").json()) == 1


def test_query_duty_ordering(client):
    surgery = add_staff(client, name="Sam", department="Surgery")
    cardio = add_staff(client, name="Cara", department="Cardiology")
    for staff_id, shift in [(surgery, "morning"), (cardio, "night"), (cardio, "afternoon"), (surgery, "evening")]:
        client.post("/admin/arrange-duty", json={"staff_id": staff_id, "date": "2024-03-08", "shift": shift})

    rows = client.get("/staffs/query-duty/2024-03-08").json()

    assert [(r["name"], r["shift"]) for r in rows] == [
        ("Cara", "afternoon"),
        ("Cara", "night"),
        ("Sam", "evening"),
        ("Sam", "morning"),
    ]


def test_login(client):
    ok = client.post("/admin/login", json={"username": "admin", "password": DEFAULT_HASH})
    assert ok.status_code == 200
    assert ok.json()["username"] == "admin"
    assert "password" not in ok.json()

    failed = client.post("/admin/login", json={"username": "admin", "password": "bad"})
    assert failed.status_code == 200
    assert failed.json() is None


def test_update_password_flow(client):
    rejected = client.post("/admin/update-password", json={"oldPassword": "bad", "newPassword": "new-hash"})
    assert rejected.status_code == 400
    assert rejected.json() == {"error": "原密码不正确"}
    assert client.post("/admin/login", json={"username": "admin", "password": DEFAULT_HASH}).json() is not None

    accepted = client.post("/admin/update-password", json={"oldPassword": DEFAULT_HASH, "newPassword": "new-hash"})
    assert accepted.status_code == 200
    assert accepted.json() == {"success": True}

    assert client.post("/admin/login", json={"username": "admin", "password": "new-hash"}).json() is not None
    assert client.post("/admin/login", json={"username": "admin", "password": DEFAULT_HASH}).json() is None


def test_update_hospital_info_keeps_single_row(client):
    first = client.put("/admin/hospital/update-info", json={"name": "城西医院", "emergencyPhone": "120"})
    assert first.status_code == 200
    assert first.json() == {"changes": 1}

    second = client.put("/admin/hospital/update-info", json={"name": "城西医院", "phone": "010-2"})
    assert second.json() == {"changes": 1}

    info = client.get("/hospital/query-info").json()
    assert info["id"] == 1
    assert info["phone"] == "010-2"
    assert info["emergencyPhone"] == ""
    assert info["introduction"] == ""


def test_update_hospital_info_requires_name(client):
    response = client.put("/admin/hospital/update-info", json={"address": "somewhere"})
    assert response.status_code == 400
    assert "error" in response.json()


def test_update_password_when_configured_username_differs(client, monkeypatch):
    monkeypatch.setattr(settings, "admin_username", "root")

    response = client.post("/admin/update-password", json={"oldPassword": DEFAULT_HASH, "newPassword": "new-hash"})

    assert response.status_code == 200
    assert client.post("/admin/login", json={"username": "admin", "password": "new-hash"}).json() is not None
