"""
One-shot setup of the Elasticsearch indices used by the service.

Creates the post and user indices if they do not exist yet and is safe to run
repeatedly. Any error aborts the process with a non-zero status.
"""
import logging
import sys

from dotenv import load_dotenv
from elasticsearch import Elasticsearch

from config import Settings
from services.indices import ensure_indices


def main() -> None:
    load_dotenv()
    settings = Settings.from_env()

    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s  %(levelname)-8s  %(message)s")

    es = Elasticsearch(settings.es_url)
    try:
        created = ensure_indices(es, settings.post_index, settings.user_index)
    except Exception as e:
        logging.error("Failed to create indices at %s: %s", settings.es_url, e)
        sys.exit(1)
    finally:
        es.close()

    if not created:
        logging.info("Indices already exist, nothing to do")


if __name__ == "__main__":
    main()
