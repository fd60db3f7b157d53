"""
Tests for connection endpoints.
"""
import uuid
import pytest
from conftest import auth_headers

BASE = "/api/v1/connections"


@pytest.fixture
def users(make_user, token_for):
    alice = make_user("alice", "Alice")
    bob = make_user("bob", "Bob")
    return {
        "alice": (alice, auth_headers(token_for(alice))),
        "bob": (bob, auth_headers(token_for(bob))),
    }


def test_full_friendship_lifecycle(client, users):
    alice, alice_headers = users["alice"]
    bob, bob_headers = users["bob"]

    response = client.post(f"{BASE}/send-request/{bob.id}", headers=alice_headers)
    assert response.status_code == 201
    assert response.json()["message"] == "Connection request sent successfully"

    pending = client.get(f"{BASE}/pending", headers=bob_headers).json()
    assert len(pending) == 1
    assert pending[0]["user"]["username"] == "alice"
    assert pending[0]["connection"]["status"] == "pending"
    assert "email" not in pending[0]["user"]
    assert client.get(f"{BASE}/pending", headers=alice_headers).json() == []

    response = client.post(f"{BASE}/accept-request/{alice.id}", headers=bob_headers)
    assert response.status_code == 200

    for headers, other in [(alice_headers, "bob"), (bob_headers, "alice")]:
        friends = client.get(BASE, headers=headers).json()
        assert [f["user"]["username"] for f in friends] == [other]
        assert friends[0]["connection"]["status"] == "accepted"

    response = client.delete(f"{BASE}/remove-friend/{alice.id}", headers=bob_headers)
    assert response.status_code == 200
    assert client.get(BASE, headers=alice_headers).json() == []


def test_duplicate_request_conflict(client, users):
    alice, alice_headers = users["alice"]
    bob, bob_headers = users["bob"]
    client.post(f"{BASE}/send-request/{bob.id}", headers=alice_headers)

    for headers, target in [(bob_headers, alice), (alice_headers, bob)]:
        response = client.post(f"{BASE}/send-request/{target.id}", headers=headers)
        assert response.status_code == 409
        assert response.json()["error"] == "connection_exists"


def test_self_request(client, users):
    alice, alice_headers = users["alice"]
    response = client.post(f"{BASE}/send-request/{alice.id}", headers=alice_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "self_request"


def test_request_to_unknown_user(client, users):
    _, alice_headers = users["alice"]
    response = client.post(f"{BASE}/send-request/{uuid.uuid4()}", headers=alice_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "user_not_found"


@pytest.mark.parametrize("method,path", [
    ("post", "send-request/not-a-uuid"),
    ("post", "accept-request/123"),
    ("post", "decline-request/xyz"),
    ("delete", "remove-friend/nope"),
])
def test_malformed_ids_are_validation_errors(client, users, method, path):
    _, alice_headers = users["alice"]
    response = getattr(client, method)(f"{BASE}/{path}", headers=alice_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "invalid_id"


def test_requester_cannot_accept_own_request(client, users):
    alice, alice_headers = users["alice"]
    bob, _ = users["bob"]
    client.post(f"{BASE}/send-request/{bob.id}", headers=alice_headers)

    response = client.post(f"{BASE}/accept-request/{bob.id}", headers=alice_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "request_not_found"


def test_decline(client, users):
    alice, alice_headers = users["alice"]
    bob, bob_headers = users["bob"]
    client.post(f"{BASE}/send-request/{bob.id}", headers=alice_headers)

    response = client.post(f"{BASE}/decline-request/{alice.id}", headers=bob_headers)
    assert response.status_code == 200
    assert client.get(f"{BASE}/pending", headers=bob_headers).json() == []

    again = client.post(f"{BASE}/decline-request/{alice.id}", headers=bob_headers)
    assert again.status_code == 404
    assert again.json()["error"] == "request_not_found"


def test_remove_without_friendship(client, users):
    _, alice_headers = users["alice"]
    bob, _ = users["bob"]
    for _ in range(2):
        response = client.delete(f"{BASE}/remove-friend/{bob.id}", headers=alice_headers)
        assert response.status_code == 404
        assert response.json()["error"] == "friendship_not_found"
