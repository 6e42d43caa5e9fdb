import unittest
from unittest.mock import MagicMock

from botocore.exceptions import ClientError
from fastapi import HTTPException

from services.s3 import S3Service


def _client_error(operation: str) -> ClientError:
    return ClientError({"Error": {"Code": "NoSuchBucket", "Message": "missing"}}, operation)


class S3ServiceTests(unittest.TestCase):
    def setUp(self):
        self.client = MagicMock()
        self.service = S3Service("socialme-bucket", self.client, "us-east-2")

    def test_upload_writes_object_and_makes_it_public(self):
        url = self.service.upload_media("post-1", b"bytes", "image/png")

        self.client.head_bucket.assert_called_once_with(Bucket="socialme-bucket")
        self.client.put_object.assert_called_once_with(
            Bucket="socialme-bucket", Key="post-1", Body=b"bytes", ContentType="image/png"
        )
        self.client.put_object_acl.assert_called_once_with(
            Bucket="socialme-bucket", Key="post-1", ACL="public-read"
        )
        self.assertEqual(url, "https://socialme-bucket.s3.us-east-2.amazonaws.com/post-1")

    def test_missing_bucket_aborts_before_upload(self):
        self.client.head_bucket.side_effect = _client_error("HeadBucket")

        with self.assertRaises(HTTPException) as ctx:
            self.service.upload_media("post-1", b"bytes")

        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(ctx.exception.detail, "Failed to save image to S3")
        self.client.put_object.assert_not_called()

    def test_failed_acl_is_an_upload_failure(self):
        self.client.put_object_acl.side_effect = _client_error("PutObjectAcl")

        with self.assertRaises(HTTPException) as ctx:
            self.service.upload_media("post-1", b"bytes")
        self.assertEqual(ctx.exception.status_code, 500)
