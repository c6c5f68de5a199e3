"""Tests for public query submissions and lookup."""

import base64
import uuid


CONTACT = {
    "name": "Ada",
    "organization": "Analytical Engines",
    "email": "ada@example.com",
    "phone": "+44 20 0000 0000",
    "inquiryType": "PARTNERSHIP",
    "message": "We would like to partner on a pilot.",
}

TECHNICAL = {
    "deviceId": "sensor-17",
    "issueType": "CONNECTIVITY",
    "severity": "HIGH",
    "title": "Sensor drops offline",
    "description": "The sensor disconnects every hour.",
    "stepsToReproduce": "Leave the sensor running for an hour.",
    "expectedBehavior": "The sensor stays connected.",
}


async def test_contact_submission_starts_new(client):
    response = await client.post("/queries/contact", json=CONTACT)

    assert response.status_code == 201
    query_id = response.json()["id"]

    lookup = await client.get(f"/queries/lookup/{query_id}")
    assert lookup.status_code == 200
    body = lookup.json()
    assert body["type"] == "contact"
    assert body["data"]["status"] == "NEW"
    assert body["data"]["organization"] == "Analytical Engines"


async def test_contact_submission_cannot_set_status(client):
    response = await client.post("/queries/contact", json={**CONTACT, "status": "RESOLVED"})
    query_id = response.json()["id"]

    lookup = await client.get(f"/queries/lookup/{query_id}")
    assert lookup.json()["data"]["status"] == "NEW"


async def test_contact_submission_validates_message(client):
    response = await client.post("/queries/contact", json={**CONTACT, "message": "hi"})

    assert response.status_code == 400
    errors = response.json()["error"]["details"]["errors"]
    assert errors == [{"field": "message", "message": "Message must be at least 10 characters"}]


async def test_support_submission(client):
    response = await client.post(
        "/queries/support",
        json={
            "category": "ACCOUNT",
            "subject": "Locked out",
            "description": "I cannot sign in since yesterday.",
            "priority": "HIGH",
        },
    )

    assert response.status_code == 201
    lookup = await client.get(f"/queries/lookup/{response.json()['id']}")
    assert lookup.json()["type"] == "support"


async def test_technical_issue_uploads_attachments(client, storage):
    encoded = base64.b64encode(b"\x89PNG fake image").decode()
    payload = {
        **TECHNICAL,
        "attachments": [
            {"filename": "screen.png", "contentType": "image/png", "size": 15, "base64Data": encoded},
            {
                "filename": "log",
                "contentType": "application/octet-stream",
                "size": 3,
                "base64Data": f"data:application/octet-stream;base64,{base64.b64encode(b'log').decode()}",
            },
        ],
    }

    response = await client.post("/queries/technical", json=payload)

    assert response.status_code == 201
    paths = sorted(storage.objects)
    assert len(paths) == 2
    assert paths[0].startswith("images/") and paths[0].endswith(".png")
    assert paths[1].startswith("others/") and paths[1].endswith(".unknown")
    assert storage.objects[paths[0]] == (b"\x89PNG fake image", "image/png")


async def test_technical_issue_rejects_bad_base64(client, storage):
    payload = {
        **TECHNICAL,
        "attachments": [
            {"filename": "a.txt", "contentType": "text/plain", "size": 1, "base64Data": "%%%not-base64"},
        ],
    }

    response = await client.post("/queries/technical", json=payload)

    assert response.status_code == 400
    assert storage.objects == {}


async def test_lookup_unknown_id(client):
    response = await client.get(f"/queries/lookup/{uuid.uuid4()}")

    assert response.status_code == 404


async def test_lookup_malformed_id(client):
    response = await client.get("/queries/lookup/not-a-uuid")

    assert response.status_code == 404
