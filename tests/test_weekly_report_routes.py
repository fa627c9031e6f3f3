"""Testes da API /api/weekly-reports e /api/auth/user."""

from datetime import datetime, timedelta

import pytest

from app.services import report_store
from app.utils.errors import StorageUnavailable

URL = "/api/weekly-reports"


@pytest.fixture
def created(client, headers_a, report_payload):
    response = client.post(URL, json=report_payload, headers=headers_a)
    assert response.status_code == 201
    return response.json()


class TestAuthentication:

    def test_missing_token(self, client):
        response = client.get(URL)
        assert response.status_code == 401

    def test_garbage_token(self, client):
        response = client.get(URL, headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401

    def test_expired_token(self, client, make_headers):
        headers = make_headers("user-a", expires_in=timedelta(seconds=-10))
        response = client.get(URL, headers=headers)
        assert response.status_code == 401

    def test_current_user_is_upserted_from_claims(self, client, make_headers):
        response = client.get("/api/auth/user", headers=make_headers("obs-9", email="lea@ecole.fr", first_name="Léa"))
        assert response.status_code == 200
        assert response.json()["id"] == "obs-9"
        assert response.json()["firstName"] == "Léa"

        # novo login com perfil alterado
        response = client.get(
            "/api/auth/user",
            headers=make_headers("obs-9", email="lea@ecole.fr", first_name="Léa", last_name="Petit"),
        )
        assert response.json()["lastName"] == "Petit"


class TestCreate:

    def test_scenario_defaults(self, created):
        assert created["studentFirstName"] == "Asma"
        assert created["studentLastName"] == "Martin"
        assert created["studentClass"] == "ce1"
        assert created["weekStartDate"] == "2024-01-01"
        assert created["weekEndDate"] == "2024-01-05"
        assert created["autonomySkills"] == {
            "dressing": False,
            "washing": False,
            "toilet": False,
            "materials": False,
            "organizing": False,
        }
        assert created["dailyTracking"]["monday"] == {"objective": "", "status": "unset", "remark": ""}
        assert set(created["dailyTracking"]) == {"monday", "tuesday", "wednesday", "thursday", "friday"}
        assert created["userId"] == "user-a"
        assert created["createdAt"] == created["updatedAt"]

    def test_client_cannot_set_server_fields(self, client, headers_a, report_payload):
        report_payload.update({
            "id": "chosen-by-client",
            "userId": "user-b",
            "createdAt": "1999-01-01T00:00:00",
            "updatedAt": "1999-01-01T00:00:00",
        })
        body = client.post(URL, json=report_payload, headers=headers_a).json()

        assert body["id"] != "chosen-by-client"
        assert body["userId"] == "user-a"
        assert not body["createdAt"].startswith("1999")

    def test_week_end_before_start(self, client, headers_a, report_payload):
        report_payload.update({"studentClass": "cp", "weekStartDate": "2024-01-08", "weekEndDate": "2024-01-05"})
        response = client.post(URL, json=report_payload, headers=headers_a)

        assert response.status_code == 400
        assert response.json()["message"] == "Dados inválidos."
        assert [err["field"] for err in response.json()["errors"]] == ["weekEndDate"]

    def test_malformed_json(self, client, headers_a):
        response = client.post(
            URL,
            content="{not json",
            headers={**headers_a, "Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["errors"]

    def test_full_form(self, client, headers_a, report_payload):
        report_payload.update({
            "autonomySkills": {"dressing": True, "toilet": True},
            "autonomyComment": "Progrès nets",
            "dailyTracking": {
                "monday": {"objective": "Tenir le crayon", "status": "done", "remark": ""},
                "wednesday": {"objective": "Découper", "status": "not_reached", "remark": "Fatigué"},
            },
            "homeObjectiveWorked": True,
            "homeStatus": "realized",
            "familyComment": "Travail fait avec la maman",
        })
        body = client.post(URL, json=report_payload, headers=headers_a).json()

        assert body["autonomySkills"]["dressing"] is True
        assert body["autonomySkills"]["washing"] is False
        assert body["dailyTracking"]["wednesday"]["remark"] == "Fatigué"
        assert body["dailyTracking"]["tuesday"]["status"] == "unset"
        assert body["homeStatus"] == "realized"


class TestReadAndList:

    def test_get_returns_created_record(self, client, headers_a, created):
        response = client.get(f"{URL}/{created['id']}", headers=headers_a)
        assert response.status_code == 200
        assert response.json() == created

    def test_other_user_sees_not_found(self, client, headers_b, created):
        response = client.get(f"{URL}/{created['id']}", headers=headers_b)
        assert response.status_code == 404
        assert response.json() == {"message": "Relatório semanal não encontrado."}

    def test_unknown_id(self, client, headers_a):
        assert client.get(f"{URL}/nope", headers=headers_a).status_code == 404

    def test_list_is_scoped_and_newest_first(self, client, headers_a, headers_b, report_payload):
        for name in ("Asma", "Noah"):
            report_payload["studentFirstName"] = name
            client.post(URL, json=report_payload, headers=headers_a)
        report_payload["studentFirstName"] = "Zoé"
        client.post(URL, json=report_payload, headers=headers_b)

        body = client.get(URL, headers=headers_a).json()

        assert [r["studentFirstName"] for r in body] == ["Noah", "Asma"]
        assert {r["userId"] for r in body} == {"user-a"}
        stamps = [datetime.fromisoformat(r["createdAt"]) for r in body]
        assert stamps == sorted(stamps, reverse=True)

    def test_list_empty(self, client, headers_a):
        response = client.get(URL, headers=headers_a)
        assert response.status_code == 200
        assert response.json() == []


class TestUpdate:

    def test_partial_update(self, client, headers_a, created):
        response = client.put(
            f"{URL}/{created['id']}",
            json={"finalObservation": "Semaine positive", "dailyTracking": {"friday": {"status": "en_cours"}}},
            headers=headers_a,
        )
        body = response.json()

        assert response.status_code == 200
        assert body["finalObservation"] == "Semaine positive"
        assert body["dailyTracking"]["friday"] == {"objective": "", "status": "in_progress", "remark": ""}
        assert body["studentFirstName"] == created["studentFirstName"]
        assert body["createdAt"] == created["createdAt"]
        assert datetime.fromisoformat(body["updatedAt"]) > datetime.fromisoformat(created["updatedAt"])

    def test_empty_patch_changes_only_updated_at(self, client, headers_a, created):
        body = client.put(f"{URL}/{created['id']}", json={}, headers=headers_a).json()

        assert datetime.fromisoformat(body["updatedAt"]) > datetime.fromisoformat(created["updatedAt"])
        body.pop("updatedAt")
        expected = dict(created)
        expected.pop("updatedAt")
        assert body == expected

    def test_other_user_gets_not_found_and_record_is_unchanged(self, client, headers_a, headers_b, created):
        response = client.put(f"{URL}/{created['id']}", json={"studentFirstName": "Intrus"}, headers=headers_b)
        assert response.status_code == 404

        assert client.get(f"{URL}/{created['id']}", headers=headers_a).json() == created

    def test_invalid_patch(self, client, headers_a, created):
        response = client.put(
            f"{URL}/{created['id']}",
            json={"studentClass": "terminale", "socialSkills": {"sharing": "oui"}},
            headers=headers_a,
        )
        assert response.status_code == 400
        fields = {err["field"] for err in response.json()["errors"]}
        assert fields == {"studentClass", "socialSkills.sharing"}

    def test_cannot_change_owner(self, client, headers_a, created):
        body = client.put(f"{URL}/{created['id']}", json={"userId": "user-b"}, headers=headers_a).json()
        assert body["userId"] == "user-a"


class TestDelete:

    def test_delete_then_get(self, client, headers_a, created):
        response = client.delete(f"{URL}/{created['id']}", headers=headers_a)
        assert response.status_code == 200
        assert "message" in response.json()

        assert client.get(f"{URL}/{created['id']}", headers=headers_a).status_code == 404

    def test_other_user_cannot_delete(self, client, headers_a, headers_b, created):
        assert client.delete(f"{URL}/{created['id']}", headers=headers_b).status_code == 404
        assert client.get(f"{URL}/{created['id']}", headers=headers_a).status_code == 200


def test_storage_unavailable_is_503(client, headers_a, monkeypatch):
    def unavailable(db, owner_user_id):
        raise StorageUnavailable("Banco de dados indisponível ao listar relatórios")

    monkeypatch.setattr(report_store, "list_reports_by_user", unavailable)

    response = client.get(URL, headers=headers_a)
    assert response.status_code == 503


def test_root(client):
    assert client.get("/").json() == {"status": "Suivi Hebdomadaire API está no ar!"}
