from typing import Annotated

from fastapi import Request, Depends

from services.posts import PostService
from services.search import SearchService


async def get_post_service(request: Request) -> PostService:
    """Get post service from app state"""
    return request.app.state.post_service


async def get_search_service(request: Request) -> SearchService:
    """Get search service from app state"""
    return request.app.state.search_service


# Type annotations for dependency injection
Posts = Annotated[PostService, Depends(get_post_service)]
Search = Annotated[SearchService, Depends(get_search_service)]
