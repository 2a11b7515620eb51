"""
Tests for topic setup and connection check
AdminClient is mocked
"""

import pytest
from unittest.mock import MagicMock

from confluent_kafka import KafkaError, KafkaException

from messaging.admin import setup_topics
from messaging.utils.check_connection import check_connection


def _metadata(topics=()):
    metadata = MagicMock()
    metadata.topics = {name: MagicMock(partitions={0: MagicMock(), 1: MagicMock()}) for name in topics}
    metadata.brokers = {1: MagicMock()}
    return metadata


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(setup_topics.time, "sleep", lambda seconds: None)


class TestCreateTopics:

    def test_creates_missing_topic(self):
        admin = MagicMock()
        admin.list_topics.side_effect = [_metadata(), _metadata(["inventories"])]
        future = MagicMock()
        future.result.return_value = None
        admin.create_topics.return_value = {"inventories": future}

        results = setup_topics.create_topics(admin)

        assert results == {"inventories": "created"}
        [new_topics] = admin.create_topics.call_args.args
        assert [t.topic for t in new_topics] == ["inventories"]

    def test_existing_topic_is_left_alone(self):
        admin = MagicMock()
        admin.list_topics.return_value = _metadata(["inventories"])

        assert setup_topics.create_topics(admin) == {"inventories": "exists"}
        admin.create_topics.assert_not_called()

    def test_failed_creation_is_reported(self):
        admin = MagicMock()
        admin.list_topics.return_value = _metadata()
        future = MagicMock()
        future.result.side_effect = KafkaException(KafkaError(KafkaError.TOPIC_ALREADY_EXISTS))
        admin.create_topics.return_value = {"inventories": future}

        assert setup_topics.create_topics(admin) == {"inventories": "failed"}


class TestDeleteTopics:

    def test_deletes_existing_topic(self):
        admin = MagicMock()
        admin.list_topics.return_value = _metadata(["inventories", "other"])
        future = MagicMock()
        future.result.return_value = None
        admin.delete_topics.return_value = {"inventories": future}

        assert setup_topics.delete_topics(admin) == ["inventories"]
        assert admin.delete_topics.call_args.args[0] == ["inventories"]

    def test_nothing_to_delete(self):
        admin = MagicMock()
        admin.list_topics.return_value = _metadata()

        assert setup_topics.delete_topics(admin) == []
        admin.delete_topics.assert_not_called()


class TestCheckConnection:

    def test_reachable(self):
        admin = MagicMock()
        admin.list_topics.return_value = _metadata(["inventories"])

        assert check_connection(admin, timeout=1) is True
        admin.list_topics.assert_called_once_with(timeout=1)

    def test_unreachable(self):
        admin = MagicMock()
        admin.list_topics.side_effect = KafkaException(KafkaError(KafkaError._TRANSPORT))

        assert check_connection(admin) is False
