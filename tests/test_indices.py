import unittest
from unittest.mock import MagicMock, patch

from elasticsearch import ConnectionError as ESConnectionError

import bootstrap
from models.user import User
from services.indices import POST_MAPPING, USER_MAPPING, ensure_indices


class EnsureIndicesTests(unittest.TestCase):
    def test_creates_missing_indices(self):
        es = MagicMock()
        es.indices.exists.return_value = False

        created = ensure_indices(es, "post", "user")

        self.assertEqual(created, ["post", "user"])
        es.indices.create.assert_any_call(index="post", mappings=POST_MAPPING)
        es.indices.create.assert_any_call(index="user", mappings=USER_MAPPING)

    def test_existing_indices_are_left_alone(self):
        es = MagicMock()
        es.indices.exists.return_value = True

        self.assertEqual(ensure_indices(es, "post", "user"), [])
        es.indices.create.assert_not_called()

    def test_existence_check_errors_propagate(self):
        es = MagicMock()
        es.indices.exists.side_effect = ESConnectionError("connection refused")

        with self.assertRaises(ESConnectionError):
            ensure_indices(es, "post", "user")
        es.indices.create.assert_not_called()

    def test_post_mapping(self):
        properties = POST_MAPPING["properties"]
        self.assertEqual(properties["location"], {"type": "geo_point"})
        self.assertEqual(properties["face"], {"type": "float"})
        for field in ("user", "message", "url", "type"):
            self.assertEqual(properties[field], {"type": "keyword", "index": False})

    def test_user_mapping_covers_user_fields(self):
        self.assertEqual(set(USER_MAPPING["properties"]), set(User.model_fields))
        self.assertEqual(USER_MAPPING["properties"]["username"], {"type": "keyword"})


class BootstrapTests(unittest.TestCase):
    @patch("bootstrap.Elasticsearch")
    def test_rerun_is_a_no_op(self, es_class):
        es_class.return_value.indices.exists.return_value = True

        bootstrap.main()

        es_class.return_value.indices.create.assert_not_called()

    @patch("bootstrap.Elasticsearch")
    def test_errors_exit_the_process(self, es_class):
        es_class.return_value.indices.exists.side_effect = ESConnectionError("connection refused")

        with self.assertRaises(SystemExit) as ctx:
            bootstrap.main()
        self.assertEqual(ctx.exception.code, 1)
