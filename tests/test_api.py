from __future__ import annotations

import re

import pytest

from attendance_tracker import get_container
from attendance_tracker.core.exceptions import CodeGenerationError


def create_user(client, nombre="Ana", oficina="HR"):
    res = client.post("/usuarios", json={"nombre": nombre, "oficina": oficina})
    assert res.status_code == 200
    return res.get_json()


def test_create_user_returns_id_and_code(client):
    body = create_user(client)

    assert body["nombre"] == "Ana"
    assert body["oficina"] == "HR"
    assert isinstance(body["id"], int)
    assert re.fullmatch(r"[0-9A-Z]{6}", body["codigo"])


def test_create_user_requires_fields(client):
    res = client.post("/usuarios", json={"nombre": "Ana"})

    assert res.status_code == 400
    assert res.get_json()["kind"] == "validation_error"


def test_list_users(client):
    a = create_user(client, "Ana", "HR")
    b = create_user(client, "Luis", "IT")

    res = client.get("/usuarios")

    assert res.status_code == 200
    assert res.get_json() == [
        {"id_usuarios": a["id"], "nombre": "Ana", "oficina": "HR", "codigo": a["codigo"]},
        {"id_usuarios": b["id"], "nombre": "Luis", "oficina": "IT", "codigo": b["codigo"]},
    ]


def test_login_returns_same_user(client):
    created = create_user(client)

    res = client.post("/login", json={"codigo": created["codigo"]})

    assert res.status_code == 200
    assert res.get_json() == {
        "id_usuarios": created["id"],
        "nombre": "Ana",
        "oficina": "HR",
        "codigo": created["codigo"],
    }


@pytest.mark.parametrize("payload", [{"codigo": "ZZZZZZ"}, {"codigo": ""}, {}])
def test_login_with_bad_code(client, payload):
    res = client.post("/login", json=payload)

    assert res.status_code == 400
    assert res.get_json() == {"error": "Código incorrecto", "kind": "invalid_code"}


def test_update_user_keeps_code(client):
    created = create_user(client)

    res = client.put(f"/usuarios/{created['id']}", json={"nombre": "Ana", "oficina": "Finanzas"})

    assert res.status_code == 200
    assert res.get_json() == {"mensaje": "Usuario actualizado correctamente"}
    user = client.post("/login", json={"codigo": created["codigo"]}).get_json()
    assert user["oficina"] == "Finanzas"


def test_update_and_delete_missing_user_still_succeed(client):
    assert client.put("/usuarios/999", json={"nombre": "x", "oficina": "y"}).status_code == 200
    assert client.delete("/usuarios/999").status_code == 200


def test_delete_user_removes_listing_and_login(client):
    created = create_user(client)

    res = client.delete(f"/usuarios/{created['id']}")

    assert res.get_json() == {"mensaje": "Usuario eliminado correctamente"}
    assert client.get("/usuarios").get_json() == []
    assert client.post("/login", json={"codigo": created["codigo"]}).status_code == 400


def test_attendance_day_flow(client):
    user_id = create_user(client)["id"]

    first = client.post("/asistencia/ingreso", json={"id_usuarios": user_id})
    assert first.status_code == 200
    assert first.get_json()["mensaje"] == "Ingreso registrado"
    check_in_at = first.get_json()["fecha_entrada"]

    again = client.post("/asistencia/ingreso", json={"id_usuarios": user_id})
    assert again.status_code == 400
    assert again.get_json()["kind"] == "duplicate_check_in"

    out = client.post("/asistencia/salida", json={"id_usuarios": user_id})
    assert out.status_code == 200
    assert out.get_json()["mensaje"] == "Salida registrada"
    assert check_in_at < out.get_json()["fecha_salida"]

    out_again = client.post("/asistencia/salida", json={"id_usuarios": user_id})
    assert out_again.status_code == 400
    assert out_again.get_json() == {"error": "No tienes un ingreso pendiente", "kind": "no_open_session"}

    history = client.get(f"/asistencia/{user_id}").get_json()
    assert len(history) == 1
    assert history[0]["fecha_entrada"] == check_in_at
    assert history[0]["fecha_salida"] == out.get_json()["fecha_salida"]


@pytest.mark.parametrize("path", ["/asistencia/ingreso", "/asistencia/salida"])
@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"id_usuarios": ""},
        {"id_usuarios": "abc"},
        {"id_usuarios": 1.5},
        {"id_usuarios": "1.9"},
        {"id_usuarios": True},
        {"id_usuarios": -3},
        {"id_usuarios": 10**20},
    ],
)
def test_attendance_requires_user_id(client, path, payload):
    res = client.post(path, json=payload)

    assert res.status_code == 400
    assert res.get_json()["kind"] == "validation_error"


def test_check_out_without_check_in(client):
    user_id = create_user(client)["id"]

    res = client.post("/asistencia/salida", json={"id_usuarios": user_id})

    assert res.status_code == 400
    assert res.get_json()["kind"] == "no_open_session"


def test_check_in_unknown_user(client):
    res = client.post("/asistencia/ingreso", json={"id_usuarios": 404})

    assert res.status_code == 404
    assert res.get_json()["kind"] == "user_not_found"


def test_code_exhaustion_is_server_error(app, client, monkeypatch):
    def boom(**kwargs):
        raise CodeGenerationError("No se pudo generar un código único")

    monkeypatch.setattr(get_container(app).user_service, "create_user", boom)

    res = client.post("/usuarios", json={"nombre": "Ana", "oficina": "HR"})

    assert res.status_code == 503
    assert res.get_json()["kind"] == "code_generation_failed"


def test_store_failure_returns_generic_500(app, client):
    get_container(app).close()

    res = client.get("/usuarios")

    assert res.status_code == 500
    assert res.get_json() == {"error": "Error al obtener usuarios", "kind": "internal_error"}


def test_unknown_route_is_json_404(client):
    res = client.get("/nope")

    assert res.status_code == 404
    assert res.get_json()["kind"] == "not_found"


def test_non_object_body_is_rejected(client):
    res = client.post("/login", json=["X3F9QZ"])

    assert res.status_code == 400
    assert res.get_json()["kind"] == "validation_error"


def test_login_with_short_legacy_code(app, client):
    conn = get_container(app).conn
    with conn.lock:
        conn.connection().execute(
            "INSERT INTO usuarios(nombre, oficina, codigo) VALUES(?,?,?)", ("Luis", "IT", "9I")
        )
        conn.connection().commit()

    res = client.post("/login", json={"codigo": "9I"})

    assert res.status_code == 200
    assert res.get_json()["codigo"] == "9I"
    assert res.get_json()["nombre"] == "Luis"


def test_fractional_id_does_not_check_in_another_user(client):
    user_id = create_user(client)["id"]

    res = client.post("/asistencia/ingreso", json={"id_usuarios": user_id + 0.9})

    assert res.status_code == 400
    assert client.get(f"/asistencia/{user_id}").get_json() == []


def test_digit_string_id_is_accepted(client):
    user_id = create_user(client)["id"]

    res = client.post("/asistencia/ingreso", json={"id_usuarios": str(user_id)})

    assert res.status_code == 200


@pytest.mark.parametrize(
    "method, path",
    [
        ("put", "/usuarios/100000000000000000000"),
        ("delete", "/usuarios/100000000000000000000"),
        ("get", "/asistencia/100000000000000000000"),
    ],
)
def test_out_of_range_path_id_is_client_error(client, method, path):
    res = getattr(client, method)(path, json={"nombre": "x", "oficina": "y"})

    assert res.status_code == 400
    assert res.get_json()["kind"] == "validation_error"
