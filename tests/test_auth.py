import asyncio

from conftest import login, register
from entrelinhas.core.security import create_access_token, decode_token
from entrelinhas.models.user import USERS


def test_register_and_login(client):
    response = register(client, "a", email="a@x.com")
    assert response.status_code == 200
    assert response.json() == {"message": "Conta criada"}

    response = login(client, "a", email="a@x.com")
    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "a"
    assert body["userId"]
    assert decode_token(body["token"])["sub"] == body["userId"]


def test_register_requires_every_field(client):
    response = client.post("/auth/register", json={"email": "a@x.com", "username": "a", "password": "p", "grade": "5"})
    assert response.status_code == 400
    assert response.json() == {"error": "Preencha todos os campos"}

    response = client.post(
        "/auth/register",
        json={"email": "", "username": "a", "password": "p", "grade": "5", "region": "SP"},
    )
    assert response.status_code == 400


def test_register_duplicate_email_or_username(client):
    assert register(client, "a", email="a@x.com").status_code == 200

    same_email = register(client, "other", email="a@x.com")
    assert same_email.status_code == 400
    assert same_email.json() == {"error": "Email ou username já cadastrado"}

    same_username = register(client, "a", email="new@x.com")
    assert same_username.status_code == 400
    assert same_username.json() == {"error": "Email ou username já cadastrado"}


def test_password_is_not_stored_in_plaintext(client, db):
    register(client, "a", password="segredo")
    user = asyncio.run(db[USERS].find_one({"username": "a"}))
    assert user["password"] != "segredo"
    assert user["password"].startswith("$2")


def test_login_rejects_wrong_password_and_unknown_email(client):
    register(client, "a")
    wrong = login(client, "a", password="nope")
    assert wrong.status_code == 400
    assert wrong.json() == {"error": "Credenciais inválidas"}

    unknown = login(client, "ghost")
    assert unknown.status_code == 400


def test_legacy_plaintext_password_upgraded_on_login(client, db):
    asyncio.run(
        db[USERS].insert_one(
            {"email": "old@x.com", "username": "old", "password": "p", "grade": "5", "region": "SP"}
        )
    )
    response = login(client, "old", email="old@x.com")
    assert response.status_code == 200

    user = asyncio.run(db[USERS].find_one({"username": "old"}))
    assert user["password"].startswith("$2")
    assert login(client, "old", email="old@x.com").status_code == 200


def test_protected_route_without_token(client):
    response = client.post("/posts", json={"content": "oi"})
    assert response.status_code == 401
    assert response.json() == {"error": "Token necessário"}


def test_protected_route_with_invalid_token(client):
    response = client.post("/posts", json={"content": "oi"}, headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401
    assert response.json() == {"error": "Token inválido"}


def test_token_for_missing_user(client):
    token = create_access_token("65f000000000000000000000", "ghost")
    response = client.post("/posts", json={"content": "oi"}, headers={"Authorization": token})
    assert response.status_code == 401
    assert response.json() == {"error": "Usuário não encontrado"}


def test_raw_token_without_bearer_prefix(client):
    register(client, "a")
    token = login(client, "a").json()["token"]
    response = client.post("/posts", json={"content": "oi"}, headers={"Authorization": token})
    assert response.status_code == 200
