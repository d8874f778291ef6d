from .entities import Message, MessageDetail, ReceivedMessage, SentMessage
from .exceptions import MessageNotFoundError

__all__ = [
    "Message",
    "MessageDetail",
    "ReceivedMessage",
    "SentMessage",
    "MessageNotFoundError",
]
