"""
Tag Handler

Routes:
=======
    GET    /tags                cursor page with post counts (public)
    GET    /tags/search?query=  up to 5 suggestions (public)
    POST   /tags                create (member; official needs admin)
    GET    /tags/{tag_id}       single tag (public)
    PATCH  /tags/{tag_id}       rename / flag (admin)
    DELETE /tags/{tag_id}       delete unused tag (admin)

Official tags only appear in listings and search for administrators.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from zelene.api.dependencies import AdminUser, CurrentUser, OptionalUser, get_tag_list_params
from zelene.api.dependencies.services import get_tag_service
from zelene.shared.schemas.common import CursorPage, SuccessResponse
from zelene.shared.schemas.tag import (
    TagCreate,
    TagListParams,
    TagResponse,
    TagSearchParams,
    TagUpdate,
)
from zelene.shared.services.tag_service import TagService


router = APIRouter()


def _role(user: Optional[dict]) -> Optional[str]:
    return user["role"] if user else None


@router.get("", response_model=CursorPage[TagResponse])
async def list_tags(
    user: OptionalUser,
    params: TagListParams = Depends(get_tag_list_params),
    service: TagService = Depends(get_tag_service),
):
    """One page of tags, official first then by name."""
    return await service.get_all(params, _role(user))


@router.get("/search", response_model=list[TagResponse])
async def search_tags(
    user: OptionalUser,
    query: str = Query(..., description="Search text; a leading '#' is ignored"),
    service: TagService = Depends(get_tag_service),
):
    """Autocomplete suggestions by substring."""
    params = TagSearchParams(query=query)
    return await service.search(params.query, _role(user))


@router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(
    data: TagCreate,
    current_user: CurrentUser,
    service: TagService = Depends(get_tag_service),
):
    """
    Create a tag. The name is normalized first ("#Web Dev" → "web-dev").

    Raises:
        403: Official tag requested by a non admin
        409: Tag already exists
    """
    return await service.create(data, current_user["role"])


@router.get("/{tag_id}", response_model=TagResponse)
async def get_tag(
    tag_id: int,
    service: TagService = Depends(get_tag_service),
):
    """Single tag with its post count."""
    return await service.get_by_id(tag_id)


@router.patch("/{tag_id}", response_model=TagResponse)
async def update_tag(
    tag_id: int,
    data: TagUpdate,
    _admin: AdminUser,
    service: TagService = Depends(get_tag_service),
):
    """Rename a tag or change its official flag."""
    return await service.update(tag_id, data)


@router.delete("/{tag_id}", response_model=SuccessResponse)
async def delete_tag(
    tag_id: int,
    _admin: AdminUser,
    service: TagService = Depends(get_tag_service),
):
    """
    Delete a tag.

    Raises:
        409: The tag is still used by a post
    """
    await service.delete(tag_id)
    return SuccessResponse()
