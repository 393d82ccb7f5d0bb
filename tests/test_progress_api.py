"""Save, load and delete progress over HTTP, including cross-user isolation."""
from conftest import auth_header


def _save(client, token, save_name, chapter_id=2, game_state=None, inventory=None):
    res = client.post(
        "/save-progress",
        json={
            "storyId": 1,
            "chapterId": chapter_id,
            "gameState": game_state if game_state is not None else {"hp": 10, "gold": 3},
            "inventory": inventory if inventory is not None else ["torch"],
            "saveName": save_name,
        },
        headers=auth_header(token),
    )
    assert res.status_code == 200, res.text
    return res.json()["savedProgress"]


def test_save_returns_summary(client, signup):
    _, token = signup("astra")
    saved = _save(client, token, "slot1")
    assert saved["saveName"] == "slot1"
    assert isinstance(saved["id"], int)


def test_load_returns_latest_save(client, signup):
    _, token = signup("astra")
    _save(client, token, "slot1", chapter_id=1)
    second = _save(client, token, "slot2", chapter_id=2, game_state={"hp": 4}, inventory=["key"])

    res = client.get("/load-progress", headers=auth_header(token))
    assert res.status_code == 200
    data = res.json()["savedGameData"]
    assert data["id"] == second["id"]
    assert data["saveName"] == "slot2"
    assert data["chapterId"] == 2
    assert data["gameState"] == {"hp": 4}
    assert data["inventory"] == ["key"]


def test_load_without_saves(client, signup):
    _, token = signup("astra")
    res = client.get("/load-progress", headers=auth_header(token))
    assert res.status_code == 404
    assert res.json() == {"error": {"message": "No saved game found.", "status": 404}}


def test_owner_comes_from_token_not_body(client, signup):
    bram, _ = signup("bram")
    _, astra_token = signup("astra")
    res = client.post(
        "/save-progress",
        json={"userId": bram["id"], "storyId": 1, "chapterId": 1, "saveName": "sneaky"},
        headers=auth_header(astra_token),
    )
    assert res.status_code == 200
    assert client.get("/load-progress", headers=auth_header(astra_token)).json()["savedGameData"][
        "userId"
    ] != bram["id"]


def test_users_never_see_each_others_saves(client, signup):
    _, astra = signup("astra")
    _, bram = signup("bram")
    _save(client, astra, "astra-slot")
    _save(client, bram, "bram-slot")

    assert client.get("/load-progress", headers=auth_header(astra)).json()["savedGameData"]["saveName"] == "astra-slot"
    assert client.get("/load-progress", headers=auth_header(bram)).json()["savedGameData"]["saveName"] == "bram-slot"


def test_delete_own_save(client, signup):
    _, token = signup("astra")
    saved = _save(client, token, "slot1")

    res = client.delete(f"/delete-progress/{saved['id']}", headers=auth_header(token))
    assert res.status_code == 200
    assert res.json() == {"message": "Saved game deleted successfully."}
    assert client.get("/load-progress", headers=auth_header(token)).status_code == 404


def test_delete_someone_elses_save_is_not_found(client, signup):
    _, astra = signup("astra")
    _, bram = signup("bram")
    bram_save = _save(client, bram, "bram-slot")

    res = client.delete(f"/delete-progress/{bram_save['id']}", headers=auth_header(astra))
    missing = client.delete("/delete-progress/99999", headers=auth_header(astra))

    assert res.status_code == 404
    # same answer as for a slot that does not exist at all
    assert res.json() == missing.json()
    loaded = client.get("/load-progress", headers=auth_header(bram)).json()["savedGameData"]
    assert loaded["id"] == bram_save["id"]


def test_delete_reveals_older_save(client, signup):
    _, token = signup("astra")
    first = _save(client, token, "slot1")
    second = _save(client, token, "slot2")

    client.delete(f"/delete-progress/{second['id']}", headers=auth_header(token))
    assert client.get("/load-progress", headers=auth_header(token)).json()["savedGameData"]["id"] == first["id"]


def test_progress_routes_require_auth(client):
    assert client.get("/load-progress").status_code == 401
    assert client.post("/save-progress", json={"saveName": "x"}).status_code == 401
    assert client.delete("/delete-progress/1").status_code == 401


def test_save_requires_name(client, signup):
    _, token = signup("astra")
    res = client.post("/save-progress", json={"storyId": 1}, headers=auth_header(token))
    assert res.status_code == 422
