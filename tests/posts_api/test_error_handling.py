"""
Error handling, tracing and health checks
"""

import pytest


class TestStoreFailures:
    """Store failures surface as server errors"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method,path,body", [
        ("GET", "/posts", None),
        ("GET", "/posts/00000000-0000-0000-0000-000000000000", None),
        ("POST", "/posts", {"title": "T", "content": "C", "author": {"firstName": "Mark", "lastName": "Twain"}}),
        ("PUT", "/posts/00000000-0000-0000-0000-000000000000", {"title": "T"}),
        ("DELETE", "/posts/00000000-0000-0000-0000-000000000000", None),
    ])
    async def test_store_error_is_500(self, client, post_store, method, path, body):
        post_store.fail_with = "connection refused"

        response = await client.request(method, path, json=body)

        assert response.status_code == 500
        error = response.json()
        assert error['error'] == "HTTP 500"
        assert "connection refused" in error['message']

    @pytest.mark.asyncio
    async def test_health_reports_unavailable_store(self, client, post_store):
        post_store.fail_with = "connection refused"

        response = await client.get("/health")

        assert response.status_code == 503


class TestErrorResponses:
    """Shape of error bodies and trace headers"""

    @pytest.mark.asyncio
    async def test_trace_id_header_on_success(self, client):
        response = await client.get("/posts")

        assert response.status_code == 200
        assert len(response.headers["X-Trace-ID"]) == 8

    @pytest.mark.asyncio
    async def test_not_found_body(self, client):
        response = await client.get("/posts/00000000-0000-0000-0000-000000000000")

        error = response.json()
        assert error['error'] == "HTTP 404"
        assert error['message'] == "Blog post not found"
        assert error['trace_id'] == response.headers["X-Trace-ID"]
        assert 'timestamp' in error

    @pytest.mark.asyncio
    async def test_validation_body(self, client):
        response = await client.post("/posts", json={"title": "Only a title"})

        assert response.status_code == 400
        error = response.json()
        assert error['error'] == "Validation Error"
        assert error['error_count'] == len(error['detail'])
        fields = {detail['field'] for detail in error['detail']}
        assert "body -> content" in fields
        assert "body -> author" in fields

    @pytest.mark.asyncio
    async def test_malformed_json(self, client):
        response = await client.post(
            "/posts",
            content=b"{not json",
            headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_route(self, client):
        response = await client.get("/authors")

        assert response.status_code == 404
        assert response.json()["error"] == "HTTP 404"
        assert response.json()["trace_id"] == response.headers["X-Trace-ID"]


class TestHealth:
    """GET /health"""

    @pytest.mark.asyncio
    async def test_healthy(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body['status'] == "healthy"
        assert body['database'] == "connected"
