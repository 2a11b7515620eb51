"""Kafka producer handler: publish a single message and wait for the broker"""
import logging
from functools import partial
from typing import Any, Dict, Optional

from confluent_kafka import KafkaException, Producer

from messaging.config import KAFKA_CONFIG, KAFKA_FLUSH_TIMEOUT_MS
from messaging.exceptions import (
    FlushFailedError,
    KafkaConnectionError,
    KafkaPublishError,
    TopicMissingError,
)
from .serializers import build_payload, encode_key

logger = logging.getLogger(__name__)


def create_producer(config: Optional[Dict[str, Any]] = None) -> Producer:
    """Create a confluent-kafka Producer from KAFKA_CONFIG (or the given config)"""
    try:
        producer = Producer(config or KAFKA_CONFIG)
        logger.info("Kafka Producer initialized successfully")
        return producer
    except KafkaException as e:
        logger.error(f"Failed to initialize Kafka Producer: {e}")
        raise KafkaConnectionError(f"Kafka connection failed: {e}")


class ProducerHandler:
    """
    Wraps a shared Producer and sends one message at a time.

    Every send() blocks until the broker acknowledges the message or the
    flush timeout expires. The producer is injected and never closed here.
    """

    TOPIC_MISSING_ERROR_MESSAGE = 'Topic is not set'
    FLUSH_ERROR_MESSAGE = 'librdkafka unable to perform flush, messages might be lost'

    def __init__(self, producer: Producer, flush_timeout_ms: int = KAFKA_FLUSH_TIMEOUT_MS):
        self.producer = producer
        self.flush_timeout_ms = flush_timeout_ms
        self.topic: Optional[str] = None
        self.payload: Optional[bytes] = None

    def set_topic(self, topic: str) -> 'ProducerHandler':
        self.topic = topic
        return self

    def get_topic(self) -> str:
        if not self.topic:
            raise TopicMissingError(self.TOPIC_MISSING_ERROR_MESSAGE)
        return self.topic

    def _build_payload(self, message: str, headers: Optional[Dict[str, str]] = None):
        self.payload = build_payload(message, headers)

    def _delivery_callback(self, report: Dict[str, Any], err, msg):
        """
        Delivery report, served from poll()/flush().

        report belongs to the send() that produced msg; a late report for an
        earlier message never lands in the current one.
        """
        if err:
            report["error"] = err
            logger.error(f'Message delivery failed: {err}')
        else:
            logger.debug(
                f'Message delivered to {msg.topic()} '
                f'[partition {msg.partition()}] at offset {msg.offset()}'
            )

    def _flush(self, report: Dict[str, Any], timeout_ms: Optional[int] = None):
        """
        Wait for all outstanding produce requests to be handled.

        flush() returns the number of messages still queued; anything but
        zero means the broker did not confirm them in time.
        """
        if timeout_ms is None:
            timeout_ms = self.flush_timeout_ms

        remaining = self.producer.flush(timeout_ms / 1000)
        if remaining:
            raise FlushFailedError(self.FLUSH_ERROR_MESSAGE, code=remaining)

        err = report.get("error")
        if err is not None:
            raise FlushFailedError(f"{self.FLUSH_ERROR_MESSAGE}: {err}", code=err.code())

    def send(self, message: str, key: Any, headers: Optional[Dict[str, str]] = None) -> None:
        """
        Produce a single message and wait for the broker.

        Args:
            message: message body
            key: partition key; messages with the same key go to the same
                partition, so they are consumed in order
            headers: string-to-string metadata stored in the envelope

        Raises:
            TopicMissingError: set_topic() was not called
            KafkaPublishError: the local producer queue rejected the message
            FlushFailedError: delivery was not confirmed within the timeout
        """
        self._build_payload(message, headers)
        topic = self.get_topic()
        report = {}

        # No partition given: librdkafka's partitioner hashes the key.
        try:
            self.producer.produce(
                topic,
                value=self.payload,
                key=encode_key(key),
                on_delivery=partial(self._delivery_callback, report),
            )
        except (BufferError, KafkaException) as e:
            logger.error(f"Failed to publish to Kafka topic {topic}: {e}")
            raise KafkaPublishError(f"Message publish failed: {e}")

        # serve pending delivery reports
        self.producer.poll(0)

        self._flush(report)
