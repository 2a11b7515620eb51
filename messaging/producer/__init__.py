"""
Kafka Producer module
"""

from .handler import ProducerHandler, create_producer
from .serializers import build_payload, serialize_entity

__all__ = ['ProducerHandler', 'create_producer', 'build_payload', 'serialize_entity']
