"""Generic resource endpoints: permission gate, CRUD, filters and expansion."""
import uuid

import pytest

from conftest import auth_headers
from app.api.v1.resources import RESOURCES
from app.models.course import Course

API = "/api/v1"

VERBS = ("create", "list", "get", "update", "delete")

VALID_PAYLOADS = {
    "students": {"name": "Sam Student", "email": "sam@academy.io"},
    "courses": {"title": "First Aid", "course_code": "FA-101"},
    "batches": {
        "batch_no": "B-001",
        "subject_course": "First Aid",
        "starting_date": "2026-01-05",
        "ending_date": "2026-02-05",
    },
    "certificates": {"certificate_number": "C-0001"},
    "employees": {"full_name": "Eve Employee"},
    "vendors": {"name": "Acme Training", "email": "contact@acme.io"},
    "locations": {"location_name": "Main Campus"},
}

RESOURCE_PERMISSIONS = {config.path: config.permission.value for config in RESOURCES}


def _call(client, verb, path, headers, item_id=None):
    item_id = item_id or uuid.uuid4()
    if verb == "create":
        return client.post(f"{API}/{path}", json=VALID_PAYLOADS[path], headers=headers)
    if verb == "list":
        return client.get(f"{API}/{path}", headers=headers)
    if verb == "get":
        return client.get(f"{API}/{path}/{item_id}", headers=headers)
    if verb == "update":
        return client.patch(f"{API}/{path}/{item_id}", json={}, headers=headers)
    return client.delete(f"{API}/{path}/{item_id}", headers=headers)


# ── Permission gate ────────────────────────────────────────────────────────

def test_every_declared_resource_has_a_payload():
    assert set(RESOURCE_PERMISSIONS) == set(VALID_PAYLOADS)
    assert RESOURCE_PERMISSIONS["certificates"] == "certifications"


@pytest.mark.parametrize("path", sorted(VALID_PAYLOADS))
@pytest.mark.parametrize("verb", VERBS)
def test_admin_is_admitted_everywhere(client, admin_headers, path, verb):
    r = _call(client, verb, path, admin_headers)
    assert r.status_code not in (401, 403)


@pytest.mark.parametrize("path", sorted(VALID_PAYLOADS))
@pytest.mark.parametrize("verb", VERBS)
def test_moderator_without_grant_is_forbidden(client, make_user, path, verb):
    other = "reports"
    moderator = make_user(permissions=[{"resource": other, "access": "write"}])
    r = _call(client, verb, path, auth_headers(moderator))
    assert r.status_code == 403
    assert r.json() == {
        "message": "Forbidden: You do not have permission to access this resource."
    }


def test_read_only_moderator_is_admitted_for_write_verbs(client, make_user):
    moderator = make_user(permissions=[{"resource": "courses", "access": "read"}])
    headers = auth_headers(moderator)

    created = client.post(f"{API}/courses", json=VALID_PAYLOADS["courses"], headers=headers)
    assert created.status_code == 201
    course_id = created.json()["id"]

    updated = client.patch(f"{API}/courses/{course_id}", json={"status": "inactive"}, headers=headers)
    assert updated.status_code == 200

    deleted = client.delete(f"{API}/courses/{course_id}", headers=headers)
    assert deleted.status_code == 200


def test_certificates_are_gated_by_certifications_grant(client, make_user):
    moderator = make_user(permissions=[{"resource": "certifications", "access": "read"}])
    r = client.get(f"{API}/certificates", headers=auth_headers(moderator))
    assert r.status_code == 200


def test_unauthenticated_requests_are_rejected(client):
    r = client.get(f"{API}/students")
    assert r.status_code == 401
    assert r.json() == {"message": "No token, authorization denied"}


def test_create_course_by_writer_and_denied_for_other_moderator(client, db_session, make_user):
    writer = make_user(permissions=[{"resource": "courses", "access": "write"}])
    reader = make_user(permissions=[{"resource": "students", "access": "read"}])

    r = client.post(f"{API}/courses", json=VALID_PAYLOADS["courses"], headers=auth_headers(writer))
    assert r.status_code == 201
    assert r.json()["title"] == "First Aid"
    assert r.json()["status"] == "active"

    r = client.post(
        f"{API}/courses",
        json={"title": "Fire Safety", "course_code": "FS-1"},
        headers=auth_headers(reader),
    )
    assert r.status_code == 403
    assert r.json()["message"]
    assert db_session.query(Course).filter(Course.course_code == "FS-1").count() == 0


# ── CRUD behavior ──────────────────────────────────────────────────────────

def test_course_crud_round(client, admin_headers):
    created = client.post(f"{API}/courses", json=VALID_PAYLOADS["courses"], headers=admin_headers)
    assert created.status_code == 201
    course_id = created.json()["id"]

    fetched = client.get(f"{API}/courses/{course_id}", headers=admin_headers)
    assert fetched.status_code == 200
    assert fetched.json()["course_code"] == "FA-101"

    patched = client.patch(
        f"{API}/courses/{course_id}", json={"assignment_duration": 14}, headers=admin_headers
    )
    assert patched.status_code == 200
    # Patch merges: untouched fields survive
    assert patched.json()["assignment_duration"] == 14
    assert patched.json()["title"] == "First Aid"

    deleted = client.delete(f"{API}/courses/{course_id}", headers=admin_headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Item deleted successfully"}

    missing = client.get(f"{API}/courses/{course_id}", headers=admin_headers)
    assert missing.status_code == 404
    assert missing.json() == {"message": "Item not found"}


def test_missing_item_is_404_for_update_and_delete(client, admin_headers):
    item_id = uuid.uuid4()
    assert client.patch(f"{API}/vendors/{item_id}", json={"phone": "1"}, headers=admin_headers).status_code == 404
    assert client.delete(f"{API}/vendors/{item_id}", headers=admin_headers).status_code == 404


def test_create_validation_errors_are_400(client, admin_headers):
    r = client.post(f"{API}/batches", json={"batch_no": "B-9"}, headers=admin_headers)
    assert r.status_code == 400
    assert "subject_course" in r.json()["message"]

    r = client.post(
        f"{API}/courses", json={"title": "X", "status": "archived"}, headers=admin_headers
    )
    assert r.status_code == 400


def test_patch_cannot_null_required_field(client, admin_headers):
    created = client.post(f"{API}/vendors", json=VALID_PAYLOADS["vendors"], headers=admin_headers)
    vendor_id = created.json()["id"]

    r = client.patch(f"{API}/vendors/{vendor_id}", json={"name": None}, headers=admin_headers)
    assert r.status_code == 400
    assert r.json() == {"message": "Field 'name' cannot be null"}


def test_unique_fields_conflict(client, admin_headers):
    assert client.post(f"{API}/courses", json=VALID_PAYLOADS["courses"], headers=admin_headers).status_code == 201
    r = client.post(f"{API}/courses", json=VALID_PAYLOADS["courses"], headers=admin_headers)
    assert r.status_code == 409
    assert "already exists" in r.json()["message"]

    # The session is usable after the rollback
    assert client.get(f"{API}/courses", headers=admin_headers).status_code == 200


def test_vendor_list_fields_round_trip(client, admin_headers):
    payload = {**VALID_PAYLOADS["vendors"], "services": ["first aid", "fire"], "approved_by": ["ops"]}
    r = client.post(f"{API}/vendors", json=payload, headers=admin_headers)
    assert r.status_code == 201
    assert r.json()["services"] == ["first aid", "fire"]
    assert r.json()["approved_by"] == ["ops"]
    assert r.json()["published"] is False


def test_student_payment_plan_is_stored(client, admin_headers):
    payload = {
        **VALID_PAYLOADS["students"],
        "payment_plan": [{"date": "2026-03-01", "amount": 250, "received": 100}],
        "resit": {"batch": "B-002", "status": "yes"},
    }
    r = client.post(f"{API}/students", json=payload, headers=admin_headers)
    assert r.status_code == 201
    body = r.json()
    assert body["payment_plan"] == [{"date": "2026-03-01", "amount": 250.0, "received": 100.0}]
    assert body["resit"] == {"batch": "B-002", "status": "yes"}
    assert body["enrollment_date"] is not None


# ── Filters ────────────────────────────────────────────────────────────────

def test_list_filters_by_column_values(client, admin_headers):
    client.post(f"{API}/courses", json={"title": "A", "course_code": "A1"}, headers=admin_headers)
    client.post(
        f"{API}/courses", json={"title": "B", "course_code": "B1", "status": "inactive"},
        headers=admin_headers,
    )
    client.post(
        f"{API}/courses", json={"title": "C", "course_code": "C1", "assignment_duration": 7},
        headers=admin_headers,
    )

    r = client.get(f"{API}/courses", params={"status": "inactive"}, headers=admin_headers)
    assert [c["title"] for c in r.json()] == ["B"]

    r = client.get(f"{API}/courses", params={"assignment_duration": "7"}, headers=admin_headers)
    assert [c["title"] for c in r.json()] == ["C"]

    r = client.get(f"{API}/courses", headers=admin_headers)
    assert len(r.json()) == 3


def test_list_filter_on_boolean_column(client, admin_headers):
    client.post(f"{API}/vendors", json=VALID_PAYLOADS["vendors"], headers=admin_headers)
    client.post(
        f"{API}/vendors",
        json={"name": "Beta", "email": "beta@acme.io", "published": True},
        headers=admin_headers,
    )
    r = client.get(f"{API}/vendors", params={"published": "true"}, headers=admin_headers)
    assert [v["name"] for v in r.json()] == ["Beta"]


def test_list_rejects_unknown_or_bad_filters(client, admin_headers):
    r = client.get(f"{API}/courses", params={"colour": "red"}, headers=admin_headers)
    assert r.status_code == 400
    assert r.json() == {"message": "Unknown filter field: colour"}

    r = client.get(f"{API}/courses", params={"assignment_duration": "lots"}, headers=admin_headers)
    assert r.status_code == 400


# ── Reference expansion ───────────────────────────────────────────────────

def _create(client, headers, path, payload):
    r = client.post(f"{API}/{path}", json=payload, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_certificate_expands_student_and_course(client, admin_headers):
    course = _create(client, admin_headers, "courses", VALID_PAYLOADS["courses"])
    student = _create(client, admin_headers, "students", VALID_PAYLOADS["students"])

    cert = _create(client, admin_headers, "certificates", {
        "student_id": student["id"],
        "course_id": course["id"],
        "certificate_number": "C-42",
    })
    assert cert["student"] == {"id": student["id"], "name": "Sam Student"}
    assert cert["course"] == {"id": course["id"], "title": "First Aid"}

    listed = client.get(f"{API}/certificates", headers=admin_headers).json()
    assert listed[0]["student"]["name"] == "Sam Student"

    fetched = client.get(f"{API}/certificates/{cert['id']}", headers=admin_headers).json()
    assert fetched["course"]["title"] == "First Aid"

    patched = client.patch(
        f"{API}/certificates/{cert['id']}", json={"status": "dispatched"}, headers=admin_headers
    ).json()
    assert patched["status"] == "dispatched"
    assert patched["student"]["id"] == student["id"]


def test_certificate_without_references_expands_to_null(client, admin_headers):
    cert = _create(client, admin_headers, "certificates", VALID_PAYLOADS["certificates"])
    assert cert["student"] is None
    assert cert["course"] is None
    assert cert["status"] == "pending"


def test_student_expands_course_and_booker(client, admin, admin_headers):
    course = _create(client, admin_headers, "courses", VALID_PAYLOADS["courses"])
    student = _create(client, admin_headers, "students", {
        **VALID_PAYLOADS["students"],
        "course_id": course["id"],
        "booked_by_id": str(admin.id),
    })
    assert student["course"] == {"id": course["id"], "title": "First Aid"}
    assert student["booked_by"] == {"id": str(admin.id), "name": "Ada Admin"}

    r = client.get(f"{API}/students", params={"course_id": course["id"]}, headers=admin_headers)
    assert [s["id"] for s in r.json()] == [student["id"]]


def test_dangling_reference_is_rejected(client, admin_headers):
    r = client.post(
        f"{API}/certificates",
        json={"student_id": str(uuid.uuid4())},
        headers=admin_headers,
    )
    assert r.status_code == 400
    assert r.json() == {"message": "Referenced student not found"}
