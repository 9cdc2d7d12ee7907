"""
Request-scoped dependencies shared by the API routes
"""

from fastapi import Request

from blog_api.services.posts_service import PostStore


def get_post_store(request: Request) -> PostStore:
    """Return the post store attached to the running application"""
    return request.app.state.post_store
