"""Publish Inventory lifecycle events to Kafka"""
import logging
from typing import Optional

from sqlalchemy import event

from database.models import Inventory
from messaging.config import KAFKA_ENABLED, KAFKA_TOPIC_INVENTORIES
from messaging.producer import ProducerHandler, create_producer, serialize_entity

logger = logging.getLogger(__name__)


class InventoryObserver:
    """
    Pushes the current state of an Inventory to Kafka on create/update/delete.

    Publishing is fire-and-forget: failures are logged at CRITICAL level and
    never reach the code that changed the inventory.
    """

    KAFKA_TOPIC = KAFKA_TOPIC_INVENTORIES
    PUBLISH_ERROR_MESSAGE = 'Publish message to kafka failed'

    def __init__(self, producer_handler: ProducerHandler, topic: Optional[str] = None):
        self.producer_handler = producer_handler
        self.topic = topic or self.KAFKA_TOPIC

    def _push_to_kafka(self, inventory: Inventory):
        try:
            self.producer_handler \
                .set_topic(self.topic) \
                .send(serialize_entity(inventory), inventory.id)
        except Exception as e:
            logger.critical(self.PUBLISH_ERROR_MESSAGE, extra={
                'code': getattr(e, 'code', 0),
                'error': str(e),
            })

    def created(self, inventory: Inventory):
        self._push_to_kafka(inventory)

    def updated(self, inventory: Inventory):
        self._push_to_kafka(inventory)

    def deleted(self, inventory: Inventory):
        self._push_to_kafka(inventory)

    # SQLAlchemy mapper event adapters: (mapper, connection, target)
    def _after_insert(self, mapper, connection, target):
        self.created(target)

    def _after_update(self, mapper, connection, target):
        self.updated(target)

    def _after_delete(self, mapper, connection, target):
        self.deleted(target)

    def register(self, model=Inventory) -> 'InventoryObserver':
        """Attach the callbacks to the model's mapper events"""
        event.listen(model, 'after_insert', self._after_insert)
        event.listen(model, 'after_update', self._after_update)
        event.listen(model, 'after_delete', self._after_delete)
        logger.info(f"InventoryObserver registered on {model.__name__} (topic={self.topic})")
        return self

    def unregister(self, model=Inventory):
        for name, fn in (('after_insert', self._after_insert),
                         ('after_update', self._after_update),
                         ('after_delete', self._after_delete)):
            if event.contains(model, name, fn):
                event.remove(model, name, fn)


def register_inventory_observer(producer=None) -> Optional[InventoryObserver]:
    """
    Build the producer, handler and observer from configuration and hook the
    observer into the Inventory model.

    Returns None when KAFKA_ENABLED is false.
    """
    if not KAFKA_ENABLED:
        logger.warning("KAFKA_ENABLED=false, inventory events will not be published")
        return None

    handler = ProducerHandler(producer or create_producer())
    return InventoryObserver(handler).register()
