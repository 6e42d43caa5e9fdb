import logging

from elasticsearch import Elasticsearch

logger = logging.getLogger(__name__)

POST_MAPPING = {
    "properties": {
        "user": {"type": "keyword", "index": False},
        "message": {"type": "keyword", "index": False},
        "location": {"type": "geo_point"},
        "url": {"type": "keyword", "index": False},
        "type": {"type": "keyword", "index": False},
        "face": {"type": "float"},
    }
}

USER_MAPPING = {
    "properties": {
        "username": {"type": "keyword"},
        "password": {"type": "keyword", "index": False},
        "age": {"type": "long", "index": False},
        "gender": {"type": "keyword", "index": False},
    }
}


def ensure_index(es: Elasticsearch, index: str, mappings: dict) -> bool:
    """
    Create an index with the given mappings unless it already exists

    :return: True if the index was created
    """
    if es.indices.exists(index=index):
        return False

    es.indices.create(index=index, mappings=mappings)
    logger.info("Index '%s' is created", index)
    return True


def ensure_indices(es: Elasticsearch, post_index: str, user_index: str) -> list[str]:
    """
    Create the post and user indices if absent. Errors are not handled here.

    :return: the names of the indices that were created
    """
    created = []
    for index, mappings in ((post_index, POST_MAPPING), (user_index, USER_MAPPING)):
        if ensure_index(es, index, mappings):
            created.append(index)
    return created
