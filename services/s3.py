import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import HTTPException

logger = logging.getLogger(__name__)


class S3Service:
    def __init__(self, bucket_name: str, client: boto3.client, region: str):
        """
        Initialize the S3 service with bucket name and region
        """
        self.bucket_name = bucket_name
        self.s3 = client
        self.region = region

    def upload_media(self, key: str, data: bytes, content_type: str = "application/octet-stream") -> str:
        """
        Upload a media file to S3 and make it publicly readable

        Args:
            key: The object key, the post ID
            data: The raw bytes of the file
            content_type: The MIME type reported by the client

        Returns:
            The public URL of the uploaded object

        Raises:
            HTTPException: If the bucket is unavailable or the upload fails
        """
        try:
            # Fail early if the bucket is missing or not accessible
            self.s3.head_bucket(Bucket=self.bucket_name)

            self.s3.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
            self.s3.put_object_acl(
                Bucket=self.bucket_name,
                Key=key,
                ACL="public-read",
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Failed to save image to S3: %s", e)
            raise HTTPException(status_code=500, detail="Failed to save image to S3")

        url = self.public_url(key)
        logger.info("Image is saved to S3: %s", url)
        return url

    def public_url(self, key: str) -> str:
        return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{key}"
