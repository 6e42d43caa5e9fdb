import logging
from contextlib import asynccontextmanager

import boto3
import uvicorn
from botocore.config import Config
from dotenv import load_dotenv
from elasticsearch import Elasticsearch
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from config import Settings
from routes.posts import router as posts_router
from services.posts import PostService
from services.s3 import S3Service
from services.search import SearchService
from services.vision import FaceAnnotator

load_dotenv()

settings = Settings.from_env()

logging.basicConfig(level=settings.log_level,
                    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # AWS clients pick up credentials from the environment
    s3_client = boto3.client(
        "s3",
        region_name=settings.aws_region,
        config=Config(signature_version="s3v4")
    )
    rekognition_client = boto3.client("rekognition", region_name=settings.aws_region)

    # Elasticsearch client
    es = Elasticsearch(settings.es_url)

    # Initialize dependencies
    s3 = S3Service(settings.bucket_name, s3_client, settings.aws_region)
    annotator = FaceAnnotator(settings.bucket_name, rekognition_client)
    search_service = SearchService(
        es,
        settings.post_index,
        default_distance=settings.default_distance,
        distance_unit=settings.distance_unit,
        cluster_threshold=settings.cluster_threshold,
        size=settings.search_size,
    )
    post_service = PostService(s3, annotator, search_service)

    app.state.search_service = search_service
    app.state.post_service = post_service

    logger.info("started-service")
    yield
    # Cleanup resources
    es.close()


app = FastAPI(lifespan=lifespan)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Errors are returned as short plain-text messages
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return PlainTextResponse("Invalid request parameters", status_code=400)


# Include routers
app.include_router(posts_router, tags=["posts"])


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
