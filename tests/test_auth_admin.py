from datetime import timedelta

import pytest
from jose import JWTError

from presensi.core.clock import today, utcnow
from presensi.core.security import create_access_token, decode_access_token
from presensi.core.verification import SubmissionState
from presensi.crud.attendance import upsert_attendance


def test_register_login_and_me(client):
    res = client.post(
        "/api/auth/register",
        json={"email": "guru@sekolah.id", "password": "rahasia123", "full_name": "Bu Guru", "role": "teacher"},
    )
    assert res.status_code == 200

    res = client.post("/api/auth/register", json={"email": "guru@sekolah.id", "password": "x", "full_name": "X"})
    assert res.status_code == 400

    res = client.post("/api/auth/login", json={"email": "guru@sekolah.id", "password": "rahasia123"})
    assert res.status_code == 200
    token = res.json()["access_token"]

    res = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 200
    assert res.json()["role"] == "teacher"


def test_login_rejects_wrong_password(client, make_user):
    make_user()
    res = client.post("/api/auth/login", json={"email": "siswa@sekolah.id", "password": "salah"})
    assert res.status_code == 401


def test_self_registration_cannot_create_admin(client):
    res = client.post(
        "/api/auth/register",
        json={"email": "x@sekolah.id", "password": "p", "full_name": "X", "role": "admin"},
    )
    assert res.status_code == 422


def test_invalid_token_is_401(client):
    res = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert res.status_code == 401


def test_settings_default_and_admin_update(client, make_user, auth_headers):
    res = client.get("/api/settings")
    assert res.status_code == 200
    assert res.json()["require_location_verification"] is False

    student = make_user()
    admin = make_user(email="admin@sekolah.id", full_name="Admin", role="admin")
    update = {
        "latitude": -6.2,
        "longitude": 106.816666,
        "radius_meters": 150,
        "require_location_verification": True,
        "require_rfid": True,
    }

    res = client.put("/api/admin/settings", json=update, headers=auth_headers(student))
    assert res.status_code == 403

    res = client.put("/api/admin/settings", json=update, headers=auth_headers(admin))
    assert res.status_code == 200

    body = client.get("/api/settings").json()
    assert body["radius_meters"] == 150
    assert body["require_location_verification"] is True
    assert body["require_rfid"] is True
    assert body["require_face_verification"] is False


def test_settings_need_both_coordinates(client, make_user, auth_headers):
    admin = make_user(email="admin@sekolah.id", full_name="Admin", role="admin")
    res = client.put("/api/admin/settings", json={"latitude": -6.2}, headers=auth_headers(admin))
    assert res.status_code == 400


def test_dashboard_counts_today(client, db, make_user, auth_headers):
    users = [make_user(email=f"s{i}@sekolah.id", full_name=f"S{i}") for i in range(4)]
    upsert_attendance(db, users[0].id, today(), SubmissionState(status="present"), utcnow())
    upsert_attendance(db, users[1].id, today(), SubmissionState(status="present"), utcnow())
    upsert_attendance(db, users[2].id, today(), SubmissionState(status="sick"), utcnow())

    res = client.get("/api/admin/dashboard", headers=auth_headers(users[0]))
    assert res.status_code == 200
    body = res.json()
    assert body["today_present"] == 2
    assert body["today_absent"] == 2
    assert body["total_users"] == 4
    assert body["attendance_rate"] == 50
    assert body["by_status"]["sick"] == 1


def test_admin_lists_users(client, make_user, auth_headers):
    admin = make_user(email="admin@sekolah.id", full_name="Admin", role="admin")
    make_user()
    res = client.get("/api/admin/users", headers=auth_headers(admin))
    assert res.status_code == 200
    assert len(res.json()) == 2


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_dashboard_rate_rounds_half_up(client, db, make_user, auth_headers):
    users = [make_user(email=f"r{i}@sekolah.id", full_name=f"R{i}") for i in range(8)]
    upsert_attendance(db, users[0].id, today(), SubmissionState(status="present"), utcnow())

    body = client.get("/api/admin/dashboard", headers=auth_headers(users[0])).json()
    assert body["today_present"] == 1
    assert body["attendance_rate"] == 13


def test_expired_token_is_401(client, make_user):
    user = make_user()
    token = create_access_token(user.email, user.role, expires_delta=timedelta(minutes=-1))
    res = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_decode_access_token_raises_jwt_error():
    with pytest.raises(JWTError):
        decode_access_token("not-a-token")


def test_login_ignores_email_case(client, make_user):
    make_user()
    res = client.post("/api/auth/login", json={"email": "Siswa@Sekolah.id", "password": "rahasia123"})
    assert res.status_code == 200
