"""Kafka connectivity check"""
import logging

from confluent_kafka import KafkaException
from confluent_kafka.admin import AdminClient

from messaging.config import KAFKA_BOOTSTRAP_SERVERS

logger = logging.getLogger(__name__)


def check_connection(admin_client=None, timeout: float = 10) -> bool:
    """Return True when the cluster metadata can be fetched"""
    try:
        logger.info(f"Connecting to Kafka: {KAFKA_BOOTSTRAP_SERVERS}")
        admin_client = admin_client or AdminClient({'bootstrap.servers': KAFKA_BOOTSTRAP_SERVERS})
        metadata = admin_client.list_topics(timeout=timeout)
        logger.info(f"Kafka reachable: {len(metadata.brokers)} broker(s), {len(metadata.topics)} topic(s)")
        return True

    except KafkaException as e:
        logger.error(f"Kafka connection failed: {e}")
        return False
