def test_history_requires_auth(client):
    assert client.get("/me/history").status_code == 401


def test_history_lists_own_posts_and_comments(client, alice, bob, post):
    bob_post = client.post("/posts", json={"content": "do bob"}, headers=bob).json()
    client.post(f"/posts/{bob_post['_id']}/comment", json={"content": "da alice"}, headers=alice)
    client.post(f"/posts/{post['_id']}/comment", json={"content": "no meu"}, headers=alice)
    client.post(f"/posts/{post['_id']}/comment", json={"content": "do bob no da alice"}, headers=bob)

    response = client.get("/me/history", headers=alice)
    assert response.status_code == 200
    history = response.json()

    assert [p["_id"] for p in history["posts"]] == [post["_id"]]
    by_content = {c["content"]: c for c in history["comments"]}
    assert set(by_content) == {"da alice", "no meu"}
    assert by_content["da alice"]["postId"] == bob_post["_id"]
    assert by_content["no meu"]["postId"] == post["_id"]


def test_history_empty(client, bob):
    assert client.get("/me/history", headers=bob).json() == {"posts": [], "comments": []}
