import os

from models.post import MediaType

# file extension -> media type
MEDIA_TYPES = {
    ".jpeg": MediaType.IMAGE,
    ".jpg": MediaType.IMAGE,
    ".gif": MediaType.IMAGE,
    ".png": MediaType.IMAGE,
    ".mov": MediaType.VIDEO,
    ".mp4": MediaType.VIDEO,
    ".avi": MediaType.VIDEO,
    ".flv": MediaType.VIDEO,
    ".wmv": MediaType.VIDEO,
}


def media_type_for(filename: str) -> MediaType:
    """Resolve the media type of an uploaded file from its extension"""
    _, suffix = os.path.splitext(filename or "")
    return MEDIA_TYPES.get(suffix, MediaType.UNKNOWN)
