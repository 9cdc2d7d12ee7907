"""
Error taxonomy for blog post operations
"""


class BlogApiError(Exception):
    """Base class for errors raised by the persistence layer"""


class ValidationError(BlogApiError):
    """Required input is missing or malformed"""


class NotFoundError(BlogApiError):
    """The targeted post does not exist"""

    def __init__(self, post_id: str):
        super().__init__(f"Blog post not found: {post_id}")
        self.post_id = post_id


class StoreError(BlogApiError):
    """The database is unreachable or failed unexpectedly"""
