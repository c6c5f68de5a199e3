"""Tests for post creation, listing, ownership and view counting."""

from datetime import datetime, timedelta, timezone

from tests.conftest import auth_header, create_user
from zelene.shared.repositories.post_repository import PostRepository
from zelene.shared.repositories.tag_repository import TagRepository

BASE_TIME = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


async def add_posts(session, author, count, **fields):
    repo = PostRepository(session)
    posts = []
    for i in range(count):
        posts.append(
            await repo.create(
                title=f"Post {i}",
                excerpt=f"Excerpt {i}",
                content=f"Content {i}",
                published_at=BASE_TIME + timedelta(hours=i),
                created_by_id=author.id,
                **fields,
            )
        )
    await session.commit()
    return posts


async def test_create_post_with_links(client, db, member):
    tag = await TagRepository(db).create(name="python")
    [earlier] = await add_posts(db, member, 1)

    response = await client.post(
        "/posts",
        json={
            "title": "Typed Python",
            "excerpt": "Why hints help",
            "content": "Long form content",
            "tags": [tag.id],
            "relatedPosts": [earlier.id],
        },
        headers=auth_header(member),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["createdBy"]["username"] == "member"
    assert [t["name"] for t in body["tags"]] == ["python"]
    assert [p["id"] for p in body["relatedPosts"]] == [earlier.id]
    assert body["viewCount"] == 0


async def test_create_post_with_unknown_tag(client, member):
    response = await client.post(
        "/posts",
        json={"title": "T", "excerpt": "E", "content": "C", "tags": [404]},
        headers=auth_header(member),
    )

    assert response.status_code == 400
    assert response.json()["error"]["details"]["errors"][0]["field"] == "tags"


async def test_member_cannot_publish_official_post(client, member, admin):
    payload = {"title": "T", "excerpt": "E", "content": "C", "isOfficial": True}

    as_member = await client.post("/posts", json=payload, headers=auth_header(member))
    as_admin = await client.post("/posts", json=payload, headers=auth_header(admin))

    assert as_member.json()["isOfficial"] is False
    assert as_admin.json()["isOfficial"] is True


async def test_create_requires_login(client):
    response = await client.post("/posts", json={"title": "T", "excerpt": "E", "content": "C"})

    assert response.status_code == 401


async def test_latest_pages_with_cursor(client, db, member):
    posts = await add_posts(db, member, 5)

    first = await client.get("/posts", params={"limit": 2})
    body = first.json()
    assert [p["id"] for p in body["items"]] == [posts[4].id, posts[3].id]
    assert body["nextCursor"] == posts[3].id

    second = await client.get("/posts", params={"limit": 2, "cursor": body["nextCursor"]})
    third = await client.get("/posts", params={"limit": 2, "cursor": second.json()["nextCursor"]})

    assert [p["id"] for p in second.json()["items"]] == [posts[2].id, posts[1].id]
    assert [p["id"] for p in third.json()["items"]] == [posts[0].id]
    assert third.json()["nextCursor"] is None


async def test_stale_cursor_gives_empty_page(client, db, member):
    await add_posts(db, member, 2)

    response = await client.get("/posts", params={"cursor": 9999})

    assert response.json() == {"items": [], "nextCursor": None}


async def test_popular_order(client, db, member):
    posts = await add_posts(db, member, 3)
    repo = PostRepository(db)
    await repo.update(posts[0].id, like_count=10)
    await repo.update(posts[2].id, like_count=10, view_count=5)
    await db.commit()

    response = await client.get("/posts", params={"orderBy": "popular"})

    assert [p["id"] for p in response.json()["items"]] == [posts[2].id, posts[0].id, posts[1].id]


async def mark_official(session, *posts):
    repo = PostRepository(session)
    for post in posts:
        await repo.update(post.id, is_official=True)
    await session.commit()


async def test_official_order_pages_with_cursor(client, db, member):
    posts = await add_posts(db, member, 5)
    await mark_official(db, posts[0], posts[2])
    params = {"orderBy": "official", "limit": 2}

    first = await client.get("/posts", params=params)
    body = first.json()
    assert [p["id"] for p in body["items"]] == [posts[2].id, posts[0].id]
    assert body["nextCursor"] == posts[0].id

    second = await client.get("/posts", params={**params, "cursor": body["nextCursor"]})
    assert second.status_code == 200
    assert [p["id"] for p in second.json()["items"]] == [posts[4].id, posts[3].id]

    third = await client.get("/posts", params={**params, "cursor": second.json()["nextCursor"]})
    assert [p["id"] for p in third.json()["items"]] == [posts[1].id]
    assert third.json()["nextCursor"] is None


async def test_filter_by_official_flag(client, db, member):
    posts = await add_posts(db, member, 3)
    await mark_official(db, posts[1])

    official = await client.get("/posts", params={"isOfficial": "true"})
    community = await client.get("/posts", params={"isOfficial": "false"})

    assert [p["id"] for p in official.json()["items"]] == [posts[1].id]
    assert [p["id"] for p in community.json()["items"]] == [posts[2].id, posts[0].id]


async def test_filter_by_tag(client, db, member):
    posts = await add_posts(db, member, 3)
    tag = await TagRepository(db).create(name="rust")
    await PostRepository(db).replace_tags(posts[1].id, [tag.id])
    await db.commit()

    response = await client.get("/posts", params={"tags": [tag.id]})

    assert [p["id"] for p in response.json()["items"]] == [posts[1].id]


async def test_reading_counts_views(client, db, member):
    [post] = await add_posts(db, member, 1)

    await client.get(f"/posts/{post.id}")
    response = await client.get(f"/posts/{post.id}")

    assert response.json()["viewCount"] == 2


async def test_get_unknown_post(client):
    response = await client.get("/posts/12345")

    assert response.status_code == 404


async def test_only_author_updates(client, db, member):
    [post] = await add_posts(db, member, 1)
    stranger = await create_user(db, "stranger")

    denied = await client.patch(f"/posts/{post.id}", json={"title": "Hijacked"}, headers=auth_header(stranger))
    allowed = await client.patch(f"/posts/{post.id}", json={"title": "Edited"}, headers=auth_header(member))

    assert denied.status_code == 403
    assert denied.json()["error"]["message"] == "Not authorized to update this post"
    assert allowed.status_code == 200
    assert allowed.json()["title"] == "Edited"
    assert allowed.json()["excerpt"] == "Excerpt 0"


async def test_update_replaces_tags(client, db, member):
    [post] = await add_posts(db, member, 1)
    tags = TagRepository(db)
    old = await tags.create(name="old")
    new = await tags.create(name="new")
    await PostRepository(db).replace_tags(post.id, [old.id])
    await db.commit()

    response = await client.patch(f"/posts/{post.id}", json={"tags": [new.id]}, headers=auth_header(member))

    assert [t["name"] for t in response.json()["tags"]] == ["new"]


async def test_only_author_deletes(client, db, member):
    [post] = await add_posts(db, member, 1)
    stranger = await create_user(db, "stranger")

    denied = await client.delete(f"/posts/{post.id}", headers=auth_header(stranger))
    allowed = await client.delete(f"/posts/{post.id}", headers=auth_header(member))

    assert denied.status_code == 403
    assert allowed.status_code == 200
    assert (await client.get(f"/posts/{post.id}")).status_code == 404
