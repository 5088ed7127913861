# tests/test_fee_requests.py

"""
Tests for the fee request endpoints.
"""

from fastapi.testclient import TestClient


def _submit(client, payload):
    response = client.post("/request-fee", json=payload)
    assert response.status_code == 200
    return response.json()["id"]


def test_request_fee_success(client: TestClient, sample_request):
    response = client.post("/request-fee", json=sample_request)

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Fee request submitted successfully!"
    assert data["id"]


def test_request_fee_ignores_client_status(client: TestClient, db, sample_request):
    request_id = _submit(client, {**sample_request, "status": "Paid"})

    response = client.get(f"/request/{request_id}")

    assert response.json()["status"] == "Pending"
    assert db["feerequests"].find_one({})["status"] == "Pending"


def test_request_fee_invalid_fee_type(client: TestClient, sample_request):
    response = client.post("/request-fee", json={**sample_request, "feeType": "hostel"})

    assert response.status_code == 422
    assert response.json()["error"].startswith("Invalid feeType")


def test_list_pending_requests(client: TestClient, sample_request, faculty_headers):
    first = _submit(client, sample_request)
    second = _submit(client, {**sample_request, "regNumber": "21CS046"})
    client.post(
        "/faculty/update",
        json={"id": first, "status": "Approved", "reason": "ok", "faculty": "fac-1"},
        headers=faculty_headers,
    )

    response = client.get("/requests")

    assert response.status_code == 200
    assert [r["_id"] for r in response.json()] == [second]


def test_all_requests_for_hod(client: TestClient, sample_request, faculty_headers, hod_headers):
    first = _submit(client, sample_request)
    _submit(client, {**sample_request, "regNumber": "21CS046"})
    client.post(
        "/faculty/update",
        json={"id": first, "status": "Rejected", "reason": "late", "faculty": "fac-1"},
        headers=faculty_headers,
    )

    response = client.get("/all-requests", headers=hod_headers)

    assert response.status_code == 200
    statuses = sorted(r["status"] for r in response.json())
    assert statuses == ["Pending", "Rejected"]


def test_get_request_not_found(client: TestClient):
    response = client.get("/request/650000000000000000000099")

    assert response.status_code == 404
    assert response.json() == {"error": "Request not found"}


def test_get_request_malformed_id(client: TestClient):
    response = client.get("/request/abc")

    assert response.status_code == 404


def test_faculty_update_not_found(client: TestClient, faculty_headers):
    response = client.post(
        "/faculty/update",
        json={"id": "650000000000000000000099", "status": "Approved", "reason": "ok", "faculty": "f"},
        headers=faculty_headers,
    )

    assert response.status_code == 404


def test_faculty_update_records_caller_when_faculty_missing(
    client: TestClient, sample_request, faculty_headers
):
    request_id = _submit(client, sample_request)

    response = client.post(
        "/faculty/update",
        json={"id": request_id, "status": "Approved"},
        headers=faculty_headers,
    )

    assert response.status_code == 200
    stored = client.get(f"/request/{request_id}").json()
    assert stored["faculty"] == "650000000000000000000002"
    assert stored["reason"] == ""


def test_faculty_update_twice_rejected(client: TestClient, sample_request, faculty_headers):
    request_id = _submit(client, sample_request)
    body = {"id": request_id, "status": "Approved", "reason": "ok", "faculty": "fac-1"}

    assert client.post("/faculty/update", json=body, headers=faculty_headers).status_code == 200
    response = client.post(
        "/faculty/update", json={**body, "status": "Rejected"}, headers=faculty_headers
    )

    assert response.status_code == 400
    assert client.get(f"/request/{request_id}").json()["status"] == "Approved"


def test_status_by_reg_number(client: TestClient, sample_request):
    request_id = _submit(client, sample_request)

    response = client.get("/status/21CS045")

    assert response.status_code == 200
    assert response.json()["_id"] == request_id
    assert response.json()["status"] == "Pending"


def test_status_unknown_reg_number(client: TestClient):
    response = client.get("/status/NOPE")

    assert response.status_code == 200
    assert response.json() == {"status": "Not Found"}


def test_pay_fee_requires_approval(client: TestClient, sample_request, student_headers):
    request_id = _submit(client, sample_request)

    response = client.post("/pay-fee", json={"requestId": request_id}, headers=student_headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Request not approved for payment"}
    assert client.get(f"/request/{request_id}").json()["status"] == "Pending"


def test_pay_fee_not_found(client: TestClient, student_headers):
    response = client.post(
        "/pay-fee", json={"requestId": "650000000000000000000099"}, headers=student_headers
    )

    assert response.status_code == 404


def test_end_to_end_submit_approve_pay(
    client: TestClient, sample_request, faculty_headers, student_headers
):
    request_id = _submit(client, {**sample_request, "amount": 5000})

    decision = client.post(
        "/faculty/update",
        json={"id": request_id, "status": "Approved", "reason": "ok", "faculty": "facultyX"},
        headers=faculty_headers,
    )
    assert decision.status_code == 200
    assert decision.json() == {"message": "Request updated successfully!"}

    payment = client.post("/pay-fee", json={"requestId": request_id}, headers=student_headers)
    assert payment.status_code == 200
    assert payment.json() == {"message": "Payment successful!"}

    final = client.get(f"/request/{request_id}").json()
    assert final["status"] == "Paid"
    assert final["amount"] == 5000
    assert final["crtFee"] == 0
    assert final["reason"] == "ok"
    assert final["faculty"] == "facultyX"


def test_root_redirects_to_signup(client: TestClient):
    response = client.get("/", follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"] == "/signup.html"


def test_request_fee_numeric_fields_stored_as_strings(client: TestClient, db, sample_request):
    request_id = _submit(client, {**sample_request, "regNumber": 21, "year": 3, "section": 2})

    stored = client.get(f"/request/{request_id}").json()

    assert stored["regNumber"] == "21"
    assert stored["year"] == "3"
    assert stored["section"] == "2"
    assert db["feerequests"].find_one({})["year"] == "3"
    assert client.get("/status/21").json()["_id"] == request_id


def test_faculty_update_unknown_id_with_bad_status(client: TestClient, faculty_headers):
    response = client.post(
        "/faculty/update",
        json={"id": "650000000000000000000099", "status": "Paid"},
        headers=faculty_headers,
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Request not found"}
