from __future__ import annotations


def _create(client, user, **overrides):
    payload = {"content": "Shipping a new release today", "category": "technology", "tags": ["release", " "]}
    payload.update(overrides)
    response = client.post("/api/posts", json=payload, headers=user["headers"])
    assert response.status_code == 201, response.text
    return response.json()["post"]


def test_create_read_update_delete(client, register) -> None:
    author = register("author@example.com", name="Author")
    other = register("other@example.com")
    post = _create(client, author)
    assert post["author"]["id"] == author["id"]
    assert post["tags"] == ["release"]
    assert post["post_type"] == "update"
    assert post["like_count"] == 0

    fetched = client.get(f"/api/posts/{post['id']}").json()["post"]
    assert fetched["content"] == "Shipping a new release today"

    assert client.put(f"/api/posts/{post['id']}", json={"content": "x"}, headers=other["headers"]).status_code == 403
    updated = client.put(f"/api/posts/{post['id']}", json={"title": "Release"}, headers=author["headers"])
    assert updated.status_code == 200
    assert updated.json()["post"]["title"] == "Release"

    assert client.delete(f"/api/posts/{post['id']}", headers=other["headers"]).status_code == 403
    assert client.delete(f"/api/posts/{post['id']}", headers=author["headers"]).status_code == 200
    assert client.get(f"/api/posts/{post['id']}").status_code == 404


def test_update_rejects_blank_content_like_create(client, register) -> None:
    author = register("author@example.com")
    post = _create(client, author)
    url = f"/api/posts/{post['id']}"

    assert client.put(url, json={"content": "   "}, headers=author["headers"]).status_code == 400
    assert client.get(url).json()["post"]["content"] == "Shipping a new release today"

    updated = client.put(url, json={"content": "  Release notes  ", "tags": [" notes ", ""]}, headers=author["headers"])
    assert updated.status_code == 200
    assert updated.json()["post"]["content"] == "Release notes"
    assert updated.json()["post"]["tags"] == ["notes"]


def test_inactive_post_is_hidden(client, register) -> None:
    author = register("author@example.com")
    post = _create(client, author)
    client.put(f"/api/posts/{post['id']}", json={"is_active": False}, headers=author["headers"])
    assert client.get(f"/api/posts/{post['id']}").status_code == 404
    assert client.get("/api/posts").json()["posts"] == []


def test_list_filters(client, register) -> None:
    alice = register("alice@example.com")
    bob = register("bob@example.com")
    _create(client, alice, content="Career advice thread", category="career", post_type="career")
    _create(client, bob, content="Learning FastAPI")

    assert client.get("/api/posts").json()["pagination"]["total_docs"] == 2
    by_category = client.get("/api/posts", params={"category": "career"}).json()["posts"]
    assert [p["content"] for p in by_category] == ["Career advice thread"]
    by_author = client.get("/api/posts", params={"author": bob["id"]}).json()["posts"]
    assert [p["content"] for p in by_author] == ["Learning FastAPI"]
    by_search = client.get("/api/posts", params={"search": "fastapi"}).json()["posts"]
    assert [p["content"] for p in by_search] == ["Learning FastAPI"]

    user_posts = client.get(f"/api/posts/user/{alice['id']}").json()
    assert user_posts["pagination"]["total_docs"] == 1


def test_like_toggle(client, register) -> None:
    author = register("author@example.com")
    fan = register("fan@example.com")
    post = _create(client, author)
    url = f"/api/posts/{post['id']}/like"

    liked = client.post(url, headers=fan["headers"]).json()
    assert liked == {"message": "Post liked", "like_count": 1, "is_liked": True}
    unliked = client.post(url, headers=fan["headers"]).json()
    assert unliked == {"message": "Post unliked", "like_count": 0, "is_liked": False}

    assert client.post("/api/posts/9999/like", headers=fan["headers"]).status_code == 404


def test_comment_and_comment_like(client, register) -> None:
    author = register("author@example.com")
    fan = register("fan@example.com", name="Fan")
    post = _create(client, author)

    response = client.post(f"/api/posts/{post['id']}/comment", json={"content": " Great! "}, headers=fan["headers"])
    assert response.status_code == 201
    comment = response.json()["comment"]
    assert comment["content"] == "Great!"
    assert comment["user"]["name"] == "Fan"

    url = f"/api/posts/{post['id']}/comment/{comment['id']}/like"
    assert client.post(url, headers=author["headers"]).json()["is_liked"] is True
    assert client.post(url, headers=author["headers"]).json()["like_count"] == 0

    missing = client.post(f"/api/posts/{post['id']}/comment/9999/like", headers=author["headers"])
    assert missing.status_code == 404

    fetched = client.get(f"/api/posts/{post['id']}").json()["post"]
    assert fetched["comment_count"] == 1


def test_share_once(client, register) -> None:
    author = register("author@example.com")
    fan = register("fan@example.com")
    post = _create(client, author)
    url = f"/api/posts/{post['id']}/share"

    first = client.post(url, headers=fan["headers"])
    assert first.status_code == 200
    assert first.json()["share_count"] == 1
    second = client.post(url, headers=fan["headers"])
    assert second.status_code == 400
    assert second.json()["detail"] == "Post already shared"


def test_trending_feed_weights_engagement(client, register) -> None:
    author = register("author@example.com")
    fans = [register(f"fan{n}@example.com") for n in range(2)]
    liked = _create(client, author, content="liked twice")
    shared = _create(client, author, content="shared once")
    _create(client, author, content="quiet")

    for fan in fans:
        client.post(f"/api/posts/{liked['id']}/like", headers=fan["headers"])
    client.post(f"/api/posts/{shared['id']}/share", headers=fans[0]["headers"])

    feed = client.get("/api/posts/trending/feed", params={"limit": 2}).json()["posts"]
    assert [p["content"] for p in feed] == ["shared once", "liked twice"]
