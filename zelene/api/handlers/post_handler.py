"""
Post Handler

Routes:
=======
    GET    /posts              cursor page (public)
    POST   /posts              create (member)
    GET    /posts/{post_id}    single post, counts a view (public)
    PATCH  /posts/{post_id}    partial update (author)
    DELETE /posts/{post_id}    delete (author)

Listing parameters: ``limit`` (clamped 1..100), ``cursor`` (last post id
seen), ``tags`` (repeatable tag id), ``isOfficial``, ``orderBy``
(latest | popular | official).
"""

from fastapi import APIRouter, Depends, status

from zelene.api.dependencies import CurrentUser, get_post_list_params
from zelene.api.dependencies.services import get_post_service
from zelene.shared.schemas.common import CursorPage, SuccessResponse
from zelene.shared.schemas.post import (
    PostCreate,
    PostDetailResponse,
    PostListParams,
    PostResponse,
    PostUpdate,
)
from zelene.shared.services.post_service import PostService


router = APIRouter()


@router.get("", response_model=CursorPage[PostResponse])
async def list_posts(
    params: PostListParams = Depends(get_post_list_params),
    service: PostService = Depends(get_post_service),
):
    """One page of posts; pass ``nextCursor`` back as ``cursor``."""
    return await service.get_all(params)


@router.post("", response_model=PostDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    data: PostCreate,
    current_user: CurrentUser,
    service: PostService = Depends(get_post_service),
):
    """
    Create a post.

    ``isOfficial`` only takes effect for administrators.
    """
    return await service.create(current_user["user_id"], current_user["role"], data)


@router.get("/{post_id}", response_model=PostDetailResponse)
async def get_post(
    post_id: int,
    service: PostService = Depends(get_post_service),
):
    """Read a post with its related posts."""
    return await service.get(post_id)


@router.patch("/{post_id}", response_model=PostDetailResponse)
async def update_post(
    post_id: int,
    data: PostUpdate,
    current_user: CurrentUser,
    service: PostService = Depends(get_post_service),
):
    """
    Patch a post.

    Raises:
        403: Caller is not the author
        404: Post does not exist
    """
    return await service.update(current_user["user_id"], post_id, data)


@router.delete("/{post_id}", response_model=SuccessResponse)
async def delete_post(
    post_id: int,
    current_user: CurrentUser,
    service: PostService = Depends(get_post_service),
):
    """Delete a post. Only its author may do so."""
    await service.delete(current_user["user_id"], post_id)
    return SuccessResponse()
