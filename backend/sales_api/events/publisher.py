"""
Message publishing

LoggingMessagePublisher stands in for a broker: it serializes each
message to JSON and writes it to the log.
"""
import json
import logging
from typing import Any, Protocol

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class MessagePublisher(Protocol):
    """Anything that can deliver a message to a topic"""

    def publish(self, topic: str, message: Any) -> None:
        ...


class LoggingMessagePublisher:
    """Publishes messages by logging them"""

    @staticmethod
    def serialize(message: Any) -> str:
        if isinstance(message, BaseModel):
            return message.model_dump_json(indent=2)
        return json.dumps(message, indent=2, default=str)

    def publish(self, topic: str, message: Any) -> None:
        """
        Log `message` under `topic`

        Raises:
            TypeError/ValueError: the message cannot be serialized
        """
        try:
            payload = self.serialize(message)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize message for topic '{topic}': {e}")
            raise

        logger.info(f"Publishing message to topic '{topic}': {payload}")


# Shared instance used by the API layer
message_publisher = LoggingMessagePublisher()


def get_message_publisher() -> LoggingMessagePublisher:
    """FastAPI dependency for the message publisher"""
    return message_publisher
