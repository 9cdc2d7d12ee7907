"""
DELETE /posts/{id}
"""

import pytest


class TestDeletePost:
    """DELETE /posts/{id}"""

    @pytest.mark.asyncio
    async def test_delete_a_post_by_id(self, client, post_store):
        post = await post_store.find_one()

        response = await client.delete(f"/posts/{post.id}")

        assert response.status_code == 204
        assert response.content == b""
        assert await post_store.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_repeat_delete_is_not_found(self, client, post_store):
        post = await post_store.find_one()

        first = await client.delete(f"/posts/{post.id}")
        second = await client.delete(f"/posts/{post.id}")

        assert first.status_code == 204
        assert second.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_removes_exactly_one(self, client, post_store):
        post = await post_store.find_one()
        before = await post_store.count()

        await client.delete(f"/posts/{post.id}")

        assert await post_store.count() == before - 1
        listing = await client.get("/posts")
        assert post.id not in {item['id'] for item in listing.json()}

    @pytest.mark.asyncio
    async def test_fetch_after_delete_is_not_found(self, client, post_store):
        post = await post_store.find_one()

        await client.delete(f"/posts/{post.id}")
        response = await client.get(f"/posts/{post.id}")

        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("post_id", [
        "00000000-0000-0000-0000-000000000000",
        "not-a-valid-id",
    ])
    async def test_unknown_id(self, client, post_store, post_id):
        before = await post_store.count()

        response = await client.delete(f"/posts/{post_id}")

        assert response.status_code == 404
        assert await post_store.count() == before
