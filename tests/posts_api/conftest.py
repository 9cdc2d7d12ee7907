"""
pytest configuration and fixtures for the blog posts API suite
Seeds the store before each test and tears it down afterwards
"""

import httpx
import pytest
import pytest_asyncio

from blog_api.app import create_app
from blog_api.config.settings import Settings

from data_factory import DataFactory
from infrastructure import SEED_POST_COUNT, DataValidator, InMemoryPostStore


@pytest.fixture
def test_settings():
    return Settings(database_url="postgresql://localhost/blog_posts_unused", env="QA")


@pytest.fixture
def data_factory():
    return DataFactory()


@pytest.fixture
def data_validator():
    return DataValidator()


@pytest_asyncio.fixture
async def post_store(data_factory):
    """In-memory store seeded with blog posts"""
    store = InMemoryPostStore()
    await store.insert_many(data_factory.generate_posts(SEED_POST_COUNT))
    yield store
    await store.drop_database()


@pytest.fixture
def app(test_settings, post_store):
    return create_app(test_settings, post_store=post_store)


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
