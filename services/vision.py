import logging
from io import BytesIO
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import HTTPException
from PIL import Image

logger = logging.getLogger(__name__)

GIF_SIGNATURES = (b"GIF87a", b"GIF89a")


def gif_to_png(data: bytes) -> bytes:
    """Render the first frame of a GIF as PNG, Rekognition only reads JPEG and PNG"""
    img = Image.open(BytesIO(data)).convert("RGB")
    out_buffer = BytesIO()
    img.save(out_buffer, "PNG")
    return out_buffer.getvalue()


class FaceAnnotator:
    def __init__(self, bucket_name: str, client: boto3.client):
        self.bucket_name = bucket_name
        self.rekognition = client

    def face_score(self, key: str, data: Optional[bytes] = None) -> float:
        """
        Run face detection on an image already stored in the bucket

        :param key: the object key of the image
        :param data: the image bytes; a GIF is converted and sent inline instead of read from the bucket
        :return: the confidence of the first detected face in [0, 1], or 0.0 if no face was found
        """
        image = {"S3Object": {"Bucket": self.bucket_name, "Name": key}}
        try:
            if data is not None and data.startswith(GIF_SIGNATURES):
                image = {"Bytes": gif_to_png(data)}

            response = self.rekognition.detect_faces(Image=image, Attributes=["DEFAULT"])
        except (BotoCoreError, ClientError, OSError, EOFError) as e:
            logger.error("Failed to annotate the image s3://%s/%s: %s", self.bucket_name, key, e)
            raise HTTPException(status_code=500, detail="Failed to annotate image")

        faces = response.get("FaceDetails", [])
        if not faces:
            return 0.0

        # Rekognition reports confidence as a percentage
        return faces[0].get("Confidence", 0.0) / 100.0
