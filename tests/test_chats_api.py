import pytest

from conftest import bearer, signup


@pytest.fixture()
def crew(client):
    """
    Luffy (owner), Zoro and Nami in acme; Buggy alone in other.
    Returns {name: (headers, user_id)}.
    """
    people = {}
    for workspace, name in (("acme", "luffy"), ("acme", "zoro"), ("acme", "nami"), ("other", "buggy")):
        headers = bearer(signup(client, workspace=workspace, fullname=name.title(), email=f"{name}@{workspace}.org"))
        me = [u for u in client.get("/api/users", headers=headers).json() if u["email"] == f"{name}@{workspace}.org"]
        people[name] = (headers, me[0]["id"])
    return people


def _ids(crew, *names):
    return [crew[name][1] for name in names]


def test_workspace_and_users(client, crew):
    luffy_headers, luffy_id = crew["luffy"]
    workspace = client.get("/api/workspace", headers=luffy_headers).json()
    users = client.get("/api/users", headers=luffy_headers).json()

    assert workspace["name"] == "acme"
    assert workspace["owner_id"] == luffy_id
    assert [u["fullname"] for u in users] == ["Luffy", "Zoro", "Nami"]
    assert all("password_hash" not in u for u in users)


def test_create_single_chat(client, crew):
    headers, _ = crew["luffy"]
    res = client.post("/api/chats", headers=headers, json={"members": _ids(crew, "luffy", "zoro")})

    assert res.status_code == 201, f"Expected 201 Created, got {res.status_code}"
    chat = res.json()
    assert chat["type"] == "single"
    assert chat["name"] is None
    assert chat["members"] == _ids(crew, "luffy", "zoro")


def test_create_group_and_channels(client, crew):
    headers, _ = crew["luffy"]
    members = _ids(crew, "luffy", "zoro", "nami")
    group = client.post("/api/chats", headers=headers, json={"members": members}).json()
    private = client.post("/api/chats", headers=headers, json={"name": "crew", "members": members}).json()
    public = client.post(
        "/api/chats", headers=headers, json={"name": "news", "members": members, "public": True}
    ).json()

    assert (group["type"], private["type"], public["type"]) == ("group", "private_channel", "public_channel")
    listed = client.get("/api/chats", headers=headers).json()
    assert [c["id"] for c in listed] == [group["id"], private["id"], public["id"]]
    # other workspaces see none of them
    assert client.get("/api/chats", headers=crew["buggy"][0]).json() == []


@pytest.mark.parametrize(
    "body, message",
    [
        ({"members": [1]}, "too few members"),
        ({"members": list(range(100, 109))}, "name required for large group"),
        ({"members": [1, 999]}, "unknown member"),
    ],
)
def test_create_rejects_bad_membership(client, crew, body, message):
    res = client.post("/api/chats", headers=crew["luffy"][0], json=body)
    assert res.status_code == 400, f"Expected 400 Bad Request, got {res.status_code}"
    assert res.json() == {"error": message}


def test_update_to_public_channel(client, crew):
    headers, _ = crew["zoro"]
    chat = client.post("/api/chats", headers=headers, json={"members": _ids(crew, "luffy", "zoro")}).json()

    res = client.patch(
        f"/api/chats/{chat['id']}",
        headers=headers,
        json={"name": "pub", "members": _ids(crew, "luffy", "zoro", "nami"), "public": True},
    )
    assert res.status_code == 200, f"Expected 200 OK, got {res.status_code}"
    updated = res.json()
    assert updated["type"] == "public_channel"
    assert updated["name"] == "pub"
    assert updated["ws_id"] == chat["ws_id"]
    assert client.get(f"/api/chats/{chat['id']}", headers=headers).json() == updated


def test_update_errors(client, crew):
    headers, _ = crew["luffy"]
    chat = client.post("/api/chats", headers=headers, json={"members": _ids(crew, "luffy", "zoro")}).json()

    cross = client.patch(
        f"/api/chats/{chat['id']}",
        headers=crew["buggy"][0],
        json={"members": _ids(crew, "buggy", "luffy")},
    )
    assert cross.status_code == 403

    invalid = client.patch(f"/api/chats/{chat['id']}", headers=headers, json={"members": [1]})
    assert invalid.status_code == 400

    missing = client.patch("/api/chats/999", headers=headers, json={"members": _ids(crew, "luffy", "zoro")})
    assert missing.status_code == 404


def test_delete_by_non_owner_is_forbidden(client, crew):
    headers, _ = crew["luffy"]
    chat = client.post("/api/chats", headers=headers, json={"members": _ids(crew, "luffy", "zoro")}).json()

    res = client.delete(f"/api/chats/{chat['id']}", headers=crew["zoro"][0])
    assert res.status_code == 403, f"Expected 403 Forbidden, got {res.status_code}"
    assert client.get(f"/api/chats/{chat['id']}", headers=headers).status_code == 200


def test_delete_by_owner(client, crew):
    headers, _ = crew["luffy"]
    chat = client.post("/api/chats", headers=headers, json={"members": _ids(crew, "luffy", "zoro")}).json()

    res = client.delete(f"/api/chats/{chat['id']}", headers=headers)
    assert res.status_code == 200
    assert res.json() == {"success": True}
    assert client.get(f"/api/chats/{chat['id']}", headers=headers).status_code == 404
    assert client.delete(f"/api/chats/{chat['id']}", headers=headers).status_code == 404


def test_delete_chat_zero(client, crew):
    res = client.delete("/api/chats/0", headers=crew["luffy"][0])
    assert res.status_code == 400


def test_chats_can_be_read_across_workspaces(client, crew):
    chat = client.post(
        "/api/chats", headers=crew["luffy"][0], json={"members": _ids(crew, "luffy", "zoro")}
    ).json()
    res = client.get(f"/api/chats/{chat['id']}", headers=crew["buggy"][0])
    assert res.status_code == 200


def test_create_rejects_repeated_member(client, crew):
    headers, luffy_id = crew["luffy"]
    res = client.post("/api/chats", headers=headers, json={"members": [luffy_id, luffy_id, crew["zoro"][1]]})

    assert res.status_code == 400, f"Expected 400 Bad Request, got {res.status_code}"
    assert res.json() == {"error": "unknown member"}
    assert client.get("/api/chats", headers=headers).json() == []


def test_empty_name_makes_a_channel(client, crew):
    res = client.post(
        "/api/chats",
        headers=crew["luffy"][0],
        json={"name": "", "members": _ids(crew, "luffy", "zoro"), "public": True},
    )
    assert res.status_code == 201
    assert res.json()["type"] == "public_channel"
    assert res.json()["name"] == ""


@pytest.mark.parametrize("members", [[1, 10**20], [1, 2**63], [0, 1], [-1, 1]])
def test_out_of_range_member_ids_are_bad_requests(client, crew, members):
    headers, _ = crew["luffy"]
    res = client.post("/api/chats", headers=headers, json={"members": members})
    assert res.status_code == 400, f"Expected 400 Bad Request, got {res.status_code}"

    chat = client.post("/api/chats", headers=headers, json={"members": _ids(crew, "luffy", "zoro")}).json()
    res = client.patch(f"/api/chats/{chat['id']}", headers=headers, json={"members": members})
    assert res.status_code == 400, f"Expected 400 Bad Request, got {res.status_code}"


@pytest.mark.parametrize("chat_id", [10**20, 2**63, -1])
def test_out_of_range_chat_ids_are_bad_requests(client, crew, chat_id):
    headers, _ = crew["luffy"]
    members = {"members": _ids(crew, "luffy", "zoro")}

    assert client.get(f"/api/chats/{chat_id}", headers=headers).status_code == 400
    assert client.patch(f"/api/chats/{chat_id}", headers=headers, json=members).status_code == 400
    assert client.delete(f"/api/chats/{chat_id}", headers=headers).status_code == 400


def test_largest_chat_id_is_just_not_found(client, crew):
    res = client.get(f"/api/chats/{2**63 - 1}", headers=crew["luffy"][0])
    assert res.status_code == 404
