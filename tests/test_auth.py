from app.core.security import decode_access_token, hash_password
from app.models.sql_models import User


def _user(db, username="admin", password="s3cret"):
    user = User(username=username, password=hash_password(password), language="az", role="admin")
    db.add(user)
    db.commit()
    return user


def test_login_success(client, db):
    _user(db)
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "s3cret"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["user"]["username"] == "admin"
    assert body["user"]["language"] == "az"
    assert body["user"]["role"] == "admin"
    assert "password" not in body["user"]
    assert decode_access_token(body["token"])["username"] == "admin"


def test_login_wrong_password(client, db):
    _user(db)
    resp = client.post("/api/auth/login", json={"username": "admin", "password": "nope"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid credentials"}


def test_login_unknown_user(client):
    resp = client.post("/api/auth/login", json={"username": "ghost", "password": "x"})
    assert resp.status_code == 401


def test_login_requires_fields(client):
    resp = client.post("/api/auth/login", json={"username": "admin"})
    assert resp.status_code == 400


def test_login_rejects_plaintext_stored_password(client, db):
    db.add(User(username="legacy", password="plain", role="admin"))
    db.commit()
    resp = client.post("/api/auth/login", json={"username": "legacy", "password": "plain"})
    assert resp.status_code == 401


def test_register_hashes_password(client, db):
    resp = client.post("/api/auth/register", json={"username": "chef", "password": "kabab"})
    assert resp.status_code == 201
    assert resp.json()["user"]["language"] == "en"

    stored = db.query(User).filter(User.username == "chef").one()
    assert stored.password != "kabab"
    assert stored.password.startswith("$argon2")

    login = client.post("/api/auth/login", json={"username": "chef", "password": "kabab"})
    assert login.status_code == 200


def test_register_duplicate_username(client):
    client.post("/api/auth/register", json={"username": "chef", "password": "a"})
    resp = client.post("/api/auth/register", json={"username": "chef", "password": "b"})
    assert resp.status_code == 409
    assert resp.json() == {"error": "Username already exists"}


def test_logout(client):
    resp = client.post("/api/auth/logout")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
