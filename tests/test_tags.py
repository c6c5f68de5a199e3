"""Tests for tag search, listing and management."""

from tests.conftest import auth_header
from zelene.shared.repositories.post_repository import PostRepository
from zelene.shared.repositories.tag_repository import TagRepository


async def add_tags(session, *names, official=()):
    repo = TagRepository(session)
    tags = {}
    for name in names:
        tags[name] = await repo.create(name=name, is_official=name in official)
    await session.commit()
    return tags


async def test_create_normalizes_name(client, member):
    response = await client.post("/tags", json={"name": "#Machine Learning"}, headers=auth_header(member))

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "machine-learning"
    assert body["isOfficial"] is False
    assert body["postCount"] == 0


async def test_create_duplicate_after_normalizing(client, member):
    await client.post("/tags", json={"name": "python"}, headers=auth_header(member))

    response = await client.post("/tags", json={"name": "#Python"}, headers=auth_header(member))

    assert response.status_code == 409
    assert response.json()["error"]["message"] == "Tag already exists"


async def test_member_cannot_create_official_tag(client, member):
    response = await client.post(
        "/tags",
        json={"name": "announcements", "isOfficial": True},
        headers=auth_header(member),
    )

    assert response.status_code == 403


async def test_admin_creates_official_tag(client, admin):
    response = await client.post(
        "/tags",
        json={"name": "announcements", "isOfficial": True},
        headers=auth_header(admin),
    )

    assert response.status_code == 201
    assert response.json()["isOfficial"] is True


async def test_search_strips_hash(client, db):
    await add_tags(db, "python", "pytest", "rust")

    response = await client.get("/tags/search", params={"query": "#py"})

    assert [tag["name"] for tag in response.json()] == ["pytest", "python"]


async def test_search_requires_text(client):
    response = await client.get("/tags/search", params={"query": "#"})

    assert response.status_code == 400


async def test_search_hides_official_tags_from_members(client, db, member, admin):
    await add_tags(db, "news", "newsletter", official=("news",))

    anonymous = await client.get("/tags/search", params={"query": "news"})
    as_member = await client.get("/tags/search", params={"query": "news"}, headers=auth_header(member))
    as_admin = await client.get("/tags/search", params={"query": "news"}, headers=auth_header(admin))

    assert [tag["name"] for tag in anonymous.json()] == ["newsletter"]
    assert [tag["name"] for tag in as_member.json()] == ["newsletter"]
    assert [tag["name"] for tag in as_admin.json()] == ["news", "newsletter"]


async def test_search_returns_at_most_five(client, db):
    await add_tags(db, *[f"tag-{i}" for i in range(8)])

    response = await client.get("/tags/search", params={"query": "tag"})

    assert len(response.json()) == 5


async def test_list_pages_with_cursor(client, db):
    await add_tags(db, "alpha", "beta", "gamma")

    first = await client.get("/tags", params={"limit": 2})
    body = first.json()
    assert [tag["name"] for tag in body["items"]] == ["alpha", "beta"]

    second = await client.get("/tags", params={"limit": 2, "cursor": body["nextCursor"]})
    assert [tag["name"] for tag in second.json()["items"]] == ["gamma"]
    assert second.json()["nextCursor"] is None


async def test_admin_pages_past_official_tags(client, db, admin):
    await add_tags(db, "news", "alpha", "beta", official=("news",))
    headers = auth_header(admin)

    names = []
    cursor = None
    for _ in range(3):
        params = {"limit": 1} if cursor is None else {"limit": 1, "cursor": cursor}
        response = await client.get("/tags", params=params, headers=headers)
        assert response.status_code == 200
        names += [tag["name"] for tag in response.json()["items"]]
        cursor = response.json()["nextCursor"]

    assert names == ["news", "alpha", "beta"]
    assert cursor is None


async def test_get_unknown_tag(client):
    response = await client.get("/tags/999")

    assert response.status_code == 404


async def test_admin_renames_tag(client, db, admin):
    tags = await add_tags(db, "js")

    response = await client.patch(
        f"/tags/{tags['js'].id}",
        json={"name": "JavaScript"},
        headers=auth_header(admin),
    )

    assert response.status_code == 200
    assert response.json()["name"] == "javascript"


async def test_rename_to_existing_name_conflicts(client, db, admin):
    tags = await add_tags(db, "js", "javascript")

    response = await client.patch(
        f"/tags/{tags['js'].id}",
        json={"name": "javascript"},
        headers=auth_header(admin),
    )

    assert response.status_code == 409


async def test_delete_tag_in_use_conflicts(client, db, admin):
    tags = await add_tags(db, "python")
    posts = PostRepository(db)
    post = await posts.create(title="Hello", excerpt="Hi", content="Body", created_by_id=admin.id)
    await posts.replace_tags(post.id, [tags["python"].id])
    await db.commit()

    response = await client.delete(f"/tags/{tags['python'].id}", headers=auth_header(admin))

    assert response.status_code == 409
    assert response.json()["error"]["message"] == "Cannot delete tag that is in use"


async def test_delete_unused_tag(client, db, admin):
    tags = await add_tags(db, "obsolete")

    response = await client.delete(f"/tags/{tags['obsolete'].id}", headers=auth_header(admin))

    assert response.status_code == 200
    assert (await client.get(f"/tags/{tags['obsolete'].id}")).status_code == 404


async def test_member_cannot_delete_tag(client, db, member):
    tags = await add_tags(db, "python")

    response = await client.delete(f"/tags/{tags['python'].id}", headers=auth_header(member))

    assert response.status_code == 403
