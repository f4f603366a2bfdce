import pytest
from google.cloud.firestore import DocumentReference, GeoPoint


def call(client, name, data):
    return client.post(f"/{name}", json={"data": data})


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_provision_creates_then_updates(client, db, fake_auth):
    db.seed("clients", "client-1", {"mobile": "9000000001"})
    data = {
        "clientId": "client-1",
        "mobileNumber": "9000000001",
        "password": "secret1",
        "updateData": {"hasPasswordSet": True},
    }

    first = call(client, "provisionCredential", data)
    second = call(client, "provisionCredential", dict(data, password="secret2"))

    assert first.status_code == 200
    assert first.json() == {"result": {"success": True, "message": "created"}}
    assert second.json() == {"result": {"success": True, "message": "updated"}}
    assert fake_auth.users["client-1"]["password"] == "secret2"
    assert fake_auth.users["client-1"]["email"] == "9000000001@nutricarewellness.in"
    assert db.data["clients"]["client-1"]["hasPasswordSet"] is True


def test_provision_short_password_is_invalid_argument(client):
    r = call(client, "provisionCredential", {"clientId": "c", "mobileNumber": "9", "password": "123"})

    assert r.status_code == 400
    assert r.json()["error"]["status"] == "INVALID_ARGUMENT"


def test_provision_internal_error_carries_details(client, fake_auth):
    fake_auth.get_user_error = RuntimeError("quota exceeded")

    r = call(client, "provisionCredential", {"clientId": "c", "mobileNumber": "9", "password": "123456"})

    assert r.status_code == 500
    assert r.json()["error"] == {
        "status": "INTERNAL",
        "message": "Authentication process failed on the server. Please check logs.",
        "details": "quota exceeded",
    }


def test_legacy_function_names_are_routed(client, db):
    db.seed("clients", "c1", {"loginId": "asha01", "mobile": "9000000001"})

    r = call(client, "fetchClientByLoginId", {"loginId": "asha01"})

    assert r.status_code == 200
    assert r.json()["result"]["id"] == "c1"


def test_verify_client_record(client, db):
    db.seed("clients", "c1", {
        "patientId": "P-1",
        "mobile": "9000000001",
        "loginId": "asha01",
        "hasPasswordSet": False,
        "status": "active",
        "isArchived": False,
        "isSoftDeleted": False,
    })

    found = call(client, "verifyClientRecord", {"patientId": "P-1", "mobile": "9000000001"})
    missing = call(client, "verifyClientRecord", {"patientId": "P-1", "mobile": "9000000009"})

    assert found.json() == {"result": {"found": True, "client": {
        "id": "c1",
        "hasPasswordSet": False,
        "status": "active",
        "isArchived": False,
        "isSoftDeleted": False,
    }}}
    assert missing.json() == {"result": {"found": False}}


def test_verify_registered_client_is_failed_precondition(client, db):
    db.seed("clients", "c1", {"patientId": "P-1", "mobile": "9000000001", "hasPasswordSet": True})

    r = call(client, "verifyClientRecord", {"patientId": "P-1", "mobile": "9000000001"})

    assert r.status_code == 400
    assert r.json() == {"error": {"status": "FAILED_PRECONDITION", "message": "Account exists."}}


def test_issue_otp_via_push(client, db, fake_messaging):
    r = call(client, "issueOtp", {"mobileNumber": "9000000001", "fcmToken": "device-token"})

    result = r.json()["result"]
    assert result["status"] == "SENT_VIA_PUSH"
    assert result["verificationId"] in db.data["temp_otp"]


def test_issue_otp_without_token(client, db):
    r = call(client, "generateAndSendOtp", {"mobileNumber": "9000000001"})

    assert r.json() == {"result": {"status": "SMS_REQUIRED"}}
    assert len(db.data["temp_otp"]) == 1


def test_lookup_without_match_is_empty_result(client):
    r = call(client, "lookupClientByLoginOrMobile", {"loginId": "nobody"})

    assert r.status_code == 200
    assert r.json() == {"result": {}}


@pytest.mark.parametrize("body", [
    {"data": {"mobileNumber": 9000000001}},
    {"data": "not-an-object"},
    [],
])
def test_malformed_requests_are_invalid_argument(client, body):
    r = client.post("/issueOtp", json=body)

    assert r.status_code == 400
    assert r.json()["error"]["status"] == "INVALID_ARGUMENT"


def test_unexpected_errors_are_masked(client, db):
    def explode(name):
        raise RuntimeError("socket closed")

    db.collection = explode

    r = call(client, "lookupClientByLoginOrMobile", {"loginId": "asha01"})

    assert r.status_code == 500
    assert r.json() == {"error": {"status": "INTERNAL", "message": "INTERNAL"}}


def test_lookup_without_login_id_does_not_return_null_login_profiles(client, db):
    db.seed("clients", "c-null", {"loginId": None, "mobile": None, "name": "Stranger"})

    r = call(client, "lookupClientByLoginOrMobile", {})

    assert r.status_code == 200
    assert r.json() == {"result": {}}


def test_lookup_returns_references_as_paths(client, db):
    db.seed("clients", "c1", {
        "loginId": "asha01",
        "dietitian": DocumentReference("dietitians", "d-7"),
        "home": GeoPoint(12.97, 77.59),
    })

    r = call(client, "lookupClientByLoginOrMobile", {"loginId": "asha01"})

    assert r.status_code == 200
    assert r.json()["result"]["dietitian"] == "dietitians/d-7"
    assert r.json()["result"]["home"] == {"latitude": 12.97, "longitude": 77.59}
