"""Kafka configuration settings"""
import os
from dotenv import load_dotenv

load_dotenv()

# Broker connection
KAFKA_BOOTSTRAP_SERVERS = os.getenv('KAFKA_BOOTSTRAP_SERVERS', 'localhost:9092')

# Topics
KAFKA_TOPIC_INVENTORIES = os.getenv('KAFKA_TOPIC_INVENTORIES', 'inventories')

# Publishing on/off switch
KAFKA_ENABLED = os.getenv('KAFKA_ENABLED', 'true').lower() == 'true'

# How long send() waits for broker acknowledgment
KAFKA_FLUSH_TIMEOUT_MS = int(os.getenv('KAFKA_FLUSH_TIMEOUT_MS', 10000))

# Producer properties (confluent-kafka / librdkafka format)
KAFKA_CONFIG = {
    'bootstrap.servers': KAFKA_BOOTSTRAP_SERVERS,
    'client.id': os.getenv('KAFKA_CLIENT_ID', 'inventory-producer'),

    # Reliability
    'acks': 'all',
    'enable.idempotence': True,

    # Every send is flushed right away, so do not hold messages back
    'linger.ms': 0,
    'compression.type': 'gzip',

    'request.timeout.ms': 30000,
    'message.timeout.ms': KAFKA_FLUSH_TIMEOUT_MS,
}
