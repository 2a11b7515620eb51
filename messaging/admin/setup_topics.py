"""
Kafka topic setup

- creates the inventories topic
- partitions and replication factor come from the environment
"""

import logging
import os
import time

from confluent_kafka.admin import AdminClient, NewTopic
from messaging.config import KAFKA_BOOTSTRAP_SERVERS, KAFKA_TOPIC_INVENTORIES

logger = logging.getLogger(__name__)

TOPIC_PARTITIONS = int(os.getenv('KAFKA_TOPIC_PARTITIONS', 3))
TOPIC_REPLICATION_FACTOR = int(os.getenv('KAFKA_TOPIC_REPLICATION_FACTOR', 1))


def build_topics():
    """Topic definitions managed by this project"""
    return [
        NewTopic(
            topic=KAFKA_TOPIC_INVENTORIES,
            num_partitions=TOPIC_PARTITIONS,
            replication_factor=TOPIC_REPLICATION_FACTOR,
            config={
                'retention.ms': '604800000',  # 7 days
                'compression.type': 'producer',
            }
        ),
    ]


def create_topics(admin_client=None):
    """
    Create missing topics.

    Returns:
        dict: topic name -> "created" | "exists" | "failed"
    """
    admin_client = admin_client or AdminClient({'bootstrap.servers': KAFKA_BOOTSTRAP_SERVERS})
    topics = build_topics()

    metadata = admin_client.list_topics(timeout=10)
    existing_topics = set(metadata.topics.keys())

    results = {topic.topic: 'exists' for topic in topics if topic.topic in existing_topics}
    topics_to_create = [topic for topic in topics if topic.topic not in existing_topics]

    for name in results:
        logger.info(f"Topic already exists: {name}")

    if not topics_to_create:
        return results

    futures = admin_client.create_topics(topics_to_create)

    for topic_name, future in futures.items():
        try:
            future.result()
            logger.info(f"Topic created: {topic_name}")
            results[topic_name] = 'created'
        except Exception as e:
            logger.error(f"Failed to create topic {topic_name}: {e}")
            results[topic_name] = 'failed'

    if 'created' in results.values():
        # metadata propagation
        time.sleep(1)
        metadata = admin_client.list_topics(timeout=10)
        for topic in topics_to_create:
            if topic.topic in metadata.topics:
                partitions = metadata.topics[topic.topic].partitions
                logger.info(f"{topic.topic}: {len(partitions)} partitions")

    return results


def delete_topics(admin_client=None):
    """Delete the project's topics (used to reset a dev cluster)"""
    admin_client = admin_client or AdminClient({'bootstrap.servers': KAFKA_BOOTSTRAP_SERVERS})

    metadata = admin_client.list_topics(timeout=10)
    existing_topics = [t.topic for t in build_topics() if t.topic in metadata.topics]

    if not existing_topics:
        logger.info("No topics to delete")
        return []

    deleted = []
    futures = admin_client.delete_topics(existing_topics, operation_timeout=30)
    for topic_name, future in futures.items():
        try:
            future.result()
            logger.info(f"Topic deleted: {topic_name}")
            deleted.append(topic_name)
        except Exception as e:
            logger.error(f"Failed to delete topic {topic_name}: {e}")

    return deleted
