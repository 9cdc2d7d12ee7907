"""
Blog posts API routes
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status

from blog_api.api.dependencies import get_post_store
from blog_api.models.post import BlogPostCreate, BlogPostResponse, BlogPostUpdate
from blog_api.services.errors import NotFoundError, StoreError, ValidationError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=List[BlogPostResponse])
async def list_posts(store=Depends(get_post_store)):
    """List every blog post, newest first"""
    try:
        posts = await store.find_all()
    except StoreError as e:
        logger.error(f"Failed to list blog posts: {e}")
        raise HTTPException(status_code=500, detail=f"Store error: {str(e)}")

    return [BlogPostResponse.from_post(post) for post in posts]


@router.get("/{post_id}", response_model=BlogPostResponse)
async def get_post(post_id: str, store=Depends(get_post_store)):
    """Get blog post by ID"""
    try:
        post = await store.find_by_id(post_id)
    except StoreError as e:
        logger.error(f"Failed to get blog post {post_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Store error: {str(e)}")

    if post is None:
        raise HTTPException(status_code=404, detail="Blog post not found")

    return BlogPostResponse.from_post(post)


@router.post("", response_model=BlogPostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(request: BlogPostCreate, store=Depends(get_post_store)):
    """Create a new blog post"""
    try:
        post = await store.insert_one(request)
    except StoreError as e:
        logger.error(f"Failed to create blog post: {e}")
        raise HTTPException(status_code=500, detail=f"Store error: {str(e)}")

    return BlogPostResponse.from_post(post)


@router.put("/{post_id}", response_model=BlogPostResponse)
async def update_post(post_id: str, request: BlogPostUpdate, store=Depends(get_post_store)):
    """Update the supplied fields of a blog post"""
    if request.id is not None and request.id != post_id:
        raise HTTPException(
            status_code=400,
            detail=f"Request path id ({post_id}) and request body id ({request.id}) must match"
        )

    try:
        post = await store.update_by_id(post_id, request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Blog post not found")
    except StoreError as e:
        logger.error(f"Failed to update blog post {post_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Store error: {str(e)}")

    return BlogPostResponse.from_post(post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: str, store=Depends(get_post_store)):
    """Delete blog post by ID"""
    try:
        await store.delete_by_id(post_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Blog post not found")
    except StoreError as e:
        logger.error(f"Failed to delete blog post {post_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Store error: {str(e)}")

    return Response(status_code=status.HTTP_204_NO_CONTENT)
