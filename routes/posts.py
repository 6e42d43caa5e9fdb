import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError
from starlette.datastructures import UploadFile
from starlette.responses import PlainTextResponse

from dependencies import Posts, Search
from models.post import Location, Post
from utils.coordinates import parse_coordinate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/post", response_class=PlainTextResponse)
async def create_post(request: Request, posts: Posts):
    """
    Create a post. A multipart form carries user, message, lat, lon and an image
    file which is uploaded and indexed; a JSON body is indexed as is and echoed.
    """
    logger.info("Received one request")
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith("application/json"):
        try:
            post = Post.model_validate_json(await request.body())
        except ValidationError as e:
            logger.warning("Invalid post body: %s", e)
            raise HTTPException(status_code=400, detail="Invalid post body")

        await run_in_threadpool(posts.submit_post, post)
        return f"Post received: {post.message}"

    form = await request.form()
    try:
        post = Post(
            user=form.get("user") or "",
            message=form.get("message") or "",
            location=Location(
                lat=parse_coordinate(form.get("lat")),
                lon=parse_coordinate(form.get("lon")),
            ),
        )
    except ValidationError as e:
        logger.warning("Invalid post fields: %s", e)
        raise HTTPException(status_code=400, detail="Invalid post fields")

    media = form.get("image")
    if not isinstance(media, UploadFile) or not media.filename:
        logger.warning("Image is not available")
        raise HTTPException(status_code=400, detail="Image is not available")

    data = await media.read()
    await run_in_threadpool(
        posts.create_post,
        post,
        media.filename,
        data,
        media.content_type or "application/octet-stream",
    )
    return ""


@router.get("/search")
def search_posts(
        search: Search,
        lat: Optional[str] = None,
        lon: Optional[str] = None,
        range_value: Optional[str] = Query(None, alias="range"),
) -> List[Post]:
    """
    Get posts within a radius of a point

    Args:
        lat: latitude of the center, 0 if missing or malformed
        lon: longitude of the center, 0 if missing or malformed
        range_value: radius in the configured unit, the default distance if omitted
    """
    logger.info("Received one request for search")
    return search.search_nearby(parse_coordinate(lat), parse_coordinate(lon), range_value)


@router.get("/cluster")
def cluster_posts(search: Search, term: str = Query(...)) -> List[Post]:
    """
    Get posts whose `term` field meets the confidence threshold,
    e.g. /cluster?term=face for images with faces
    """
    logger.info("Received one cluster request")
    return search.search_cluster(term)
