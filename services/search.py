import logging
from typing import List, Optional

from elasticsearch import ApiError, Elasticsearch, TransportError
from fastapi import HTTPException
from pydantic import ValidationError

from models.post import Post

logger = logging.getLogger(__name__)


def geo_distance_query(lat: float, lon: float, distance: str) -> dict:
    """Posts whose location lies within `distance` of (lat, lon)"""
    return {
        "geo_distance": {
            "distance": distance,
            "location": {"lat": lat, "lon": lon},
        }
    }


def range_query(field: str, gte: float) -> dict:
    """Posts whose numeric `field` is at least `gte`"""
    return {"range": {field: {"gte": gte}}}


class SearchService:
    def __init__(
            self,
            client: Elasticsearch,
            index: str,
            default_distance: str = "200km",
            distance_unit: str = "km",
            cluster_threshold: float = 0.9,
            size: int = 10000,
    ):
        self.es = client
        self.index = index
        self.default_distance = default_distance
        self.distance_unit = distance_unit
        self.cluster_threshold = cluster_threshold
        self.size = size

    def distance(self, range_value: Optional[str]) -> str:
        """
        Resolve the search radius, appending the unit to a caller-supplied value
        """
        if range_value:
            return f"{range_value}{self.distance_unit}"
        return self.default_distance

    def save_post(self, post: Post, post_id: str) -> None:
        """
        Index a post under the given ID

        Raises:
            HTTPException: If Elasticsearch rejects the write
        """
        try:
            self.es.index(index=self.index, id=post_id, document=post.to_document())
        except (ApiError, TransportError) as e:
            logger.error("Failed to save post to Elasticsearch: %s", e)
            raise HTTPException(status_code=500, detail="Failed to save post to Elasticsearch")

        logger.info("Post is saved to index: %s", post.message)

    def search_nearby(self, lat: float, lon: float, range_value: Optional[str] = None) -> List[Post]:
        """
        Find posts around a point

        Args:
            lat: latitude of the center
            lon: longitude of the center
            range_value: radius without unit, the default distance is used if empty

        Returns:
            The matching posts
        """
        distance = self.distance(range_value)
        logger.info("range is %s", distance)
        return self.search(
            geo_distance_query(lat, lon, distance),
            detail="Failed to read post from Elasticsearch",
        )

    def search_cluster(self, field: str) -> List[Post]:
        """Find posts whose `field` meets the confidence threshold"""
        return self.search(
            range_query(field, self.cluster_threshold),
            detail="Failed to read from Elasticsearch",
        )

    def search(self, query: dict, detail: str = "Failed to read from Elasticsearch") -> List[Post]:
        try:
            response = self.es.search(index=self.index, query=query, size=self.size)
            return [Post.model_validate(hit["_source"]) for hit in response["hits"]["hits"]]
        except (ApiError, TransportError, ValidationError, KeyError) as e:
            logger.error("%s: %s", detail, e)
            raise HTTPException(status_code=500, detail=detail)
