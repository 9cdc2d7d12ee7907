"""
Posts service - persistence adapter for blog posts
"""

import asyncpg
import logging
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from blog_api.database.connection import Database, POSTS_TABLE
from blog_api.models.post import Author, BlogPost, BlogPostCreate, BlogPostUpdate
from blog_api.services.errors import NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)

POST_COLUMNS = "id, author_first_name, author_last_name, title, content, created"

INSERT_SQL = f"""
    INSERT INTO {POSTS_TABLE} (author_first_name, author_last_name, title, content, created)
    VALUES ($1, $2, $3, $4, $5)
    RETURNING {POST_COLUMNS}
"""


def _parse_id(post_id: str) -> Optional[uuid.UUID]:
    try:
        return uuid.UUID(str(post_id))
    except ValueError:
        return None


def _row_to_post(row) -> BlogPost:
    return BlogPost(
        id=str(row['id']),
        author=Author(first_name=row['author_first_name'], last_name=row['author_last_name']),
        title=row['title'],
        content=row['content'],
        created=row['created']
    )


def _insert_args(post: BlogPostCreate) -> tuple:
    created = post.created or datetime.now(timezone.utc)
    return (
        post.author.first_name,
        post.author.last_name,
        post.title,
        post.content,
        created
    )


class PostStore:
    """Document-style operations on the blog_posts table"""

    def __init__(self, database: Database):
        self.database = database

    @asynccontextmanager
    async def _connection(self):
        try:
            async with self.database.acquire() as conn:
                yield conn
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            logger.error(f"Blog post store failure: {e}")
            raise StoreError(str(e)) from e

    async def insert_many(self, posts: List[BlogPostCreate]) -> List[BlogPost]:
        """
        Insert several posts in a single transaction

        Args:
            posts: Candidate posts to insert

        Returns:
            The stored posts, in input order, with their assigned ids
        """
        created = []
        async with self._connection() as conn:
            async with conn.transaction():
                for post in posts:
                    row = await conn.fetchrow(INSERT_SQL, *_insert_args(post))
                    created.append(_row_to_post(row))

        logger.info(f"Inserted {len(created)} blog posts")
        return created

    async def insert_one(self, post: BlogPostCreate) -> BlogPost:
        async with self._connection() as conn:
            row = await conn.fetchrow(INSERT_SQL, *_insert_args(post))

        stored = _row_to_post(row)
        logger.info(f"Created blog post {stored.id}")
        return stored

    async def find_all(self) -> List[BlogPost]:
        """All posts, newest first"""
        async with self._connection() as conn:
            rows = await conn.fetch(f"""
                SELECT {POST_COLUMNS}
                FROM {POSTS_TABLE}
                ORDER BY created DESC, id ASC
            """)
        return [_row_to_post(row) for row in rows]

    async def find_by_id(self, post_id: str) -> Optional[BlogPost]:
        parsed_id = _parse_id(post_id)
        if parsed_id is None:
            return None

        async with self._connection() as conn:
            row = await conn.fetchrow(f"""
                SELECT {POST_COLUMNS}
                FROM {POSTS_TABLE}
                WHERE id = $1
            """, parsed_id)
        return _row_to_post(row) if row else None

    async def find_one(self) -> Optional[BlogPost]:
        async with self._connection() as conn:
            row = await conn.fetchrow(f"SELECT {POST_COLUMNS} FROM {POSTS_TABLE} LIMIT 1")
        return _row_to_post(row) if row else None

    async def count(self) -> int:
        async with self._connection() as conn:
            return await conn.fetchval(f"SELECT COUNT(*) FROM {POSTS_TABLE}")

    async def update_by_id(self, post_id: str, changes: BlogPostUpdate) -> BlogPost:
        """
        Apply the supplied fields of ``changes`` to one post

        Raises:
            ValidationError: nothing to update
            NotFoundError: no post with ``post_id``
        """
        if not changes.has_changes():
            raise ValidationError("No fields provided for update")

        update_data: Dict[str, Any] = {}

        if changes.title is not None:
            update_data["title"] = changes.title
        if changes.content is not None:
            update_data["content"] = changes.content
        if changes.author is not None:
            update_data["author_first_name"] = changes.author.first_name
            update_data["author_last_name"] = changes.author.last_name

        parsed_id = _parse_id(post_id)
        if parsed_id is None:
            raise NotFoundError(post_id)

        assignments = ", ".join(
            f"{column} = ${index}" for index, column in enumerate(update_data, start=2)
        )

        async with self._connection() as conn:
            row = await conn.fetchrow(f"""
                UPDATE {POSTS_TABLE}
                SET {assignments}
                WHERE id = $1
                RETURNING {POST_COLUMNS}
            """, parsed_id, *update_data.values())

        if row is None:
            raise NotFoundError(post_id)

        logger.info(f"Updated blog post {post_id}: {', '.join(update_data)}")
        return _row_to_post(row)

    async def delete_by_id(self, post_id: str) -> None:
        parsed_id = _parse_id(post_id)
        if parsed_id is None:
            raise NotFoundError(post_id)

        async with self._connection() as conn:
            deleted_id = await conn.fetchval(
                f"DELETE FROM {POSTS_TABLE} WHERE id = $1 RETURNING id", parsed_id
            )

        if deleted_id is None:
            raise NotFoundError(post_id)

        logger.info(f"Deleted blog post {post_id}")

    async def drop_database(self) -> None:
        await self.database.drop_database()
