import logging
import uuid

from models.post import MediaType, Post
from services.s3 import S3Service
from services.search import SearchService
from services.vision import FaceAnnotator
from utils.media import media_type_for

logger = logging.getLogger(__name__)


class PostService:
    def __init__(
            self,
            storage: S3Service,
            annotator: FaceAnnotator,
            search: SearchService,
    ):
        self.storage = storage
        self.annotator = annotator
        self.search = search

    def create_post(
            self,
            post: Post,
            filename: str,
            data: bytes,
            content_type: str = "application/octet-stream",
    ) -> str:
        """
        Store the media of a post, score faces on images and index the post.
        Steps run in order and stop at the first failure, nothing is rolled back.

        :param post: the post with user, message and location filled in
        :param filename: the client-side name of the media file
        :param data: the media bytes
        :param content_type: the MIME type reported by the client
        :return: the ID of the post
        """
        post_id = str(uuid.uuid4())
        media_type = media_type_for(filename)

        media_url = self.storage.upload_media(post_id, data, content_type)

        face_score = 0.0
        if media_type == MediaType.IMAGE:
            face_score = self.annotator.face_score(post_id, data)

        post = post.model_copy(update={
            "media_url": media_url,
            "media_type": media_type,
            "face_score": face_score,
        })
        self.search.save_post(post, post_id)
        return post_id

    def submit_post(self, post: Post) -> str:
        """
        Index a post that was sent without media

        :return: the ID of the post
        """
        post_id = str(uuid.uuid4())
        post = post.model_copy(update={
            "media_url": "",
            "media_type": MediaType.UNKNOWN,
            "face_score": 0.0,
        })
        self.search.save_post(post, post_id)
        return post_id
