"""
Tests for trip creation, confirmation, update and details.
"""
import uuid

from tests.conftest import API_BASE_URL, WEB_BASE_URL, future_day, trip_payload


def test_create_trip_returns_id_and_emails_owner(client, mailer):
    response = client.post("/trips", json=trip_payload())

    assert response.status_code == 200
    body = response.json()
    trip_id = body["trip_id"]
    assert uuid.UUID(trip_id)
    assert body["message"]

    assert mailer.recipients == ["a@example.com"]
    assert f"{API_BASE_URL}/trips/{trip_id}/confirm" in mailer.sent[0].html
    assert "Rio de Janeiro" in mailer.sent[0].subject


def test_create_trip_persists_owner_and_invitees(client, create_trip):
    trip_id = create_trip(emails_to_invite=["b@example.com", "c@example.com"])

    participants = client.get(f"/trips/{trip_id}/participants").json()["participants"]

    assert len(participants) == 3
    owners = [p for p in participants if p["is_owner"]]
    assert len(owners) == 1
    assert owners[0]["email"] == "a@example.com"
    assert owners[0]["name"] == "Ana"
    assert owners[0]["is_confirmed"] is True
    guests = [p for p in participants if not p["is_owner"]]
    assert {p["email"] for p in guests} == {"b@example.com", "c@example.com"}
    assert all(p["is_confirmed"] is False for p in guests)


def test_create_trip_rejects_end_before_start(client, mailer):
    response = client.post("/trips", json=trip_payload(
        starts_at=future_day(10).isoformat(),
        ends_at=future_day(9).isoformat(),
    ))

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid trip end date."}
    assert mailer.sent == []


def test_create_trip_rejects_start_in_past(client):
    response = client.post("/trips", json=trip_payload(starts_at=future_day(-1).isoformat()))

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid trip start date."


def test_create_trip_allows_same_start_and_end(client):
    moment = future_day(5).isoformat()
    response = client.post("/trips", json=trip_payload(starts_at=moment, ends_at=moment))

    assert response.status_code == 200


def test_create_trip_validates_body(client):
    response = client.post("/trips", json=trip_payload(destination="Ri", owner_email="not-an-email"))

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert "destination" in errors
    assert "owner_email" in errors


def test_create_trip_mail_failure_is_internal_error(client, mailer):
    mailer.fail_for.add("a@example.com")

    response = client.post("/trips", json=trip_payload())

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


def test_confirm_trip_redirects_and_invites_guests(client, mailer, create_trip):
    trip_id = create_trip(emails_to_invite=["b@example.com", "c@example.com"])
    mailer.sent.clear()

    response = client.get(f"/trips/{trip_id}/confirm", follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"] == f"{WEB_BASE_URL}/trips/{trip_id}"
    assert sorted(mailer.recipients) == ["b@example.com", "c@example.com"]
    assert all(f"{API_BASE_URL}/participants/" in m.html for m in mailer.sent)
    assert client.get(f"/trips/{trip_id}").json()["trip"]["is_confirmed"] is True


def test_confirm_trip_twice_sends_no_more_mail(client, mailer, create_trip):
    trip_id = create_trip()
    first = client.get(f"/trips/{trip_id}/confirm", follow_redirects=False)
    mailer.sent.clear()

    second = client.get(f"/trips/{trip_id}/confirm", follow_redirects=False)

    assert second.status_code == 302
    assert second.headers["location"] == first.headers["location"]
    assert mailer.sent == []


def test_confirm_unknown_trip(client):
    response = client.get(f"/trips/{uuid.uuid4()}/confirm", follow_redirects=False)

    assert response.status_code == 400
    assert response.json() == {"message": "Trip not found."}


def test_confirm_trip_guest_mail_failure_is_internal_error(client, mailer, create_trip):
    trip_id = create_trip(emails_to_invite=["b@example.com", "c@example.com"])
    mailer.fail_for.add("c@example.com")

    response = client.get(f"/trips/{trip_id}/confirm", follow_redirects=False)

    assert response.status_code == 500
    # the confirmation itself is kept
    assert client.get(f"/trips/{trip_id}").json()["trip"]["is_confirmed"] is True


def test_update_trip(client, create_trip):
    trip_id = create_trip()
    starts_at, ends_at = future_day(40), future_day(45)

    response = client.put(f"/trips/{trip_id}", json={
        "destination": "Lisbon",
        "starts_at": starts_at.isoformat(),
        "ends_at": ends_at.isoformat(),
    })

    assert response.status_code == 200
    assert response.json() == {"message": "Trip updated successfully!"}
    trip = client.get(f"/trips/{trip_id}").json()["trip"]
    assert trip["destination"] == "Lisbon"
    assert trip["starts_at"].startswith(starts_at.strftime("%Y-%m-%dT%H:%M"))


def test_update_trip_rejects_invalid_dates(client, create_trip):
    trip_id = create_trip()

    response = client.put(f"/trips/{trip_id}", json={
        "destination": "Lisbon",
        "starts_at": future_day(40).isoformat(),
        "ends_at": future_day(39).isoformat(),
    })

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid trip end date."


def test_update_unknown_trip(client):
    response = client.put(f"/trips/{uuid.uuid4()}", json={
        "destination": "Lisbon",
        "starts_at": future_day(40).isoformat(),
        "ends_at": future_day(41).isoformat(),
    })

    assert response.status_code == 400
    assert response.json()["message"] == "Trip not found."


def test_get_trip_details(client, create_trip):
    trip_id = create_trip()

    response = client.get(f"/trips/{trip_id}")

    assert response.status_code == 200
    trip = response.json()["trip"]
    assert set(trip) == {"id", "destination", "starts_at", "ends_at", "is_confirmed"}
    assert trip["id"] == trip_id
    assert trip["destination"] == "Rio de Janeiro"
    assert trip["is_confirmed"] is False


def test_get_trip_with_malformed_id(client):
    response = client.get("/trips/not-a-uuid")

    assert response.status_code == 400
    assert "trip_id" in response.json()["errors"]


def test_create_trip_requires_invite_list(client):
    payload = trip_payload()
    del payload["emails_to_invite"]

    response = client.post("/trips", json=payload)

    assert response.status_code == 400
    assert "emails_to_invite" in response.json()["errors"]
