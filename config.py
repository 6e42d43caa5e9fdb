import os
from typing import List

from pydantic import BaseModel


class Settings(BaseModel):
    es_url: str = "http://localhost:9200"
    post_index: str = "post"
    user_index: str = "user"
    bucket_name: str = "socialme-bucket"
    aws_region: str = "us-east-2"
    default_distance: str = "200km"
    distance_unit: str = "km"
    cluster_threshold: float = 0.9
    search_size: int = 10000
    cors_origins: List[str] = ["http://localhost:3000"]
    log_level: str = "INFO"
    port: int = 8080

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables, falling back to the defaults
        for anything that is not set
        """
        env = {
            "es_url": os.environ.get("ES_URL"),
            "post_index": os.environ.get("POST_INDEX"),
            "user_index": os.environ.get("USER_INDEX"),
            "bucket_name": os.environ.get("S3_BUCKET_NAME"),
            "aws_region": os.environ.get("AWS_REGION"),
            "default_distance": os.environ.get("DEFAULT_DISTANCE"),
            "distance_unit": os.environ.get("DISTANCE_UNIT"),
            "cluster_threshold": os.environ.get("CLUSTER_THRESHOLD"),
            "search_size": os.environ.get("SEARCH_SIZE"),
            "log_level": os.environ.get("LOG_LEVEL"),
            "port": os.environ.get("PORT"),
        }
        origins = os.environ.get("CORS_ORIGINS")
        if origins:
            env["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

        return cls(**{key: value for key, value in env.items() if value is not None})
