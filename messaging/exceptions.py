"""Kafka custom exceptions"""


class KafkaHandlerError(Exception):
    """Base error raised by the producer handler"""

    default_message = 'Kafka producer error'

    def __init__(self, message: str = None, code: int = 0):
        super().__init__(message or self.default_message)
        self.code = code


class TopicMissingError(KafkaHandlerError):
    """Topic was not set before sending"""

    default_message = 'Topic is not set'


class FlushFailedError(KafkaHandlerError):
    """Broker did not acknowledge outstanding messages"""

    default_message = 'librdkafka unable to perform flush, messages might be lost'


class KafkaPublishError(KafkaHandlerError):
    """Message rejected by the local producer queue"""

    default_message = 'Message publish failed'


class KafkaConnectionError(KafkaHandlerError):
    """Producer could not be created"""

    default_message = 'Kafka connection failed'
