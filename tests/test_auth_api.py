from jose import jwt

from app.domain.models.user import User
from tests_support import count_rows, get_user


def test_register_then_login_yields_token_with_registered_role(client, register, login):
    for role in ("cliente", "admin"):
        body, response = register(tipo_usuario=role)
        assert response.status_code == 201
        assert response.json() == {"message": "Usuário criado com sucesso!"}

        claims = jwt.get_unverified_claims(login(body["email"]))
        assert claims["tipo_usuario"] == role
        assert claims["email"] == body["email"]


def test_register_stores_hash_not_password(register, database):
    body, _ = register()
    user = get_user(database, body["email"])

    assert user.senha_hash != body["senha"]
    assert user.senha_hash.startswith("$2b$")


def test_register_rejects_unknown_role(register, database):
    _, response = register(tipo_usuario="superuser")

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Tipo de usuário inválido"
    assert count_rows(database, User) == 0


def test_register_duplicate_email_is_conflict(register, database):
    body, _ = register(email="dup@safegate.com")
    _, response = register(email="dup@safegate.com")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "ConflictException"
    assert count_rows(database, User) == 1


def test_register_duplicate_cpf_is_conflict(register, database):
    register(cpf="12345678900")
    _, response = register(cpf="12345678900")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "ConflictException"
    assert count_rows(database, User) == 1


def test_register_missing_field_is_bad_request(client):
    response = client.post("/auth/register", json={"nome": "Sem Email", "senha": "x"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "BadRequestException"


def test_login_returns_public_profile(register, client):
    body, _ = register(tipo_usuario="admin")
    response = client.post("/auth/login", json={"email": body["email"], "senha": body["senha"]})

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["nome"] == body["nome"]
    assert user["cpf"] == body["cpf"]
    assert user["telefone"] == body["telefone"]
    assert user["tipo"] == "admin"
    assert "senha" not in user and "senha_hash" not in user


def test_wrong_password_and_unknown_email_are_indistinguishable(register, client):
    body, _ = register()
    wrong_password = client.post("/auth/login", json={"email": body["email"], "senha": "errada"})
    unknown_email = client.post("/auth/login", json={"email": "ninguem@safegate.com", "senha": "errada"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.json()["error"]["message"] == "Credenciais inválidas"


def test_login_email_is_case_sensitive(register, client):
    body, _ = register(email="Case@safegate.com")
    response = client.post("/auth/login", json={"email": "case@safegate.com", "senha": body["senha"]})

    assert response.status_code == 401


def test_update_only_phone_keeps_other_fields(register, client, database):
    body, _ = register()
    before = get_user(database, body["email"])

    response = client.put("/auth/update", json={"email": body["email"], "telefone": "65988887777"})

    assert response.status_code == 200
    after = get_user(database, body["email"])
    assert after.telefone == "65988887777"
    assert after.nome == before.nome
    assert after.senha_hash == before.senha_hash


def test_update_password_is_rehashed_and_usable(register, client, login, database):
    body, _ = register()
    client.put("/auth/update", json={"email": body["email"], "senha": "nova-senha"})

    assert get_user(database, body["email"]).senha_hash != "nova-senha"
    assert login(body["email"], "nova-senha")
    old = client.post("/auth/login", json={"email": body["email"], "senha": body["senha"]})
    assert old.status_code == 401


def test_update_with_empty_password_keeps_current_password(register, client, login, database):
    body, _ = register()
    before = get_user(database, body["email"]).senha_hash

    response = client.put("/auth/update", json={"email": body["email"], "senha": ""})

    assert response.status_code == 200
    assert get_user(database, body["email"]).senha_hash == before
    assert login(body["email"], body["senha"])
    empty = client.post("/auth/login", json={"email": body["email"], "senha": ""})
    assert empty.status_code == 401


def test_update_falls_back_to_token_email(auth_headers, client, database):
    headers, body = auth_headers()
    response = client.put("/auth/update", json={"nome": "Novo Nome"}, headers=headers)

    assert response.status_code == 200
    assert get_user(database, body["email"]).nome == "Novo Nome"


def test_update_without_any_email_is_bad_request(client):
    response = client.put("/auth/update", json={"nome": "Alguém"})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Email é obrigatório"


def test_update_unknown_email_is_not_found(client):
    response = client.put("/auth/update", json={"email": "ninguem@safegate.com", "nome": "X"})

    assert response.status_code == 404


def test_update_with_invalid_token_is_rejected(client):
    response = client.put(
        "/auth/update",
        json={"nome": "X"},
        headers={"Authorization": "Bearer invalido"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "InvalidTokenException"
