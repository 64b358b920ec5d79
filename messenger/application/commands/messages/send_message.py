"""
Send Message Command.

Validates the content, then stores the message in the conversation between
sender and recipient (created on first use).

Content rules:
- not empty
- at most MESSAGE_MAX_LENGTH characters
- not whitespace only
"""

import time
from dataclasses import dataclass
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.config.settings import Config
from messenger.domain.exceptions import DomainValidationError
from messenger.domain.ports.repositories import MessageRepository
from messenger.observability.metrics import increment_messages_sent


@dataclass
class SendMessageResult:
    message_id: str
    timestamp: int


@dataclass(frozen=True)
class SendMessageCommand(Command[SendMessageResult]):
    from_user: str
    to_user: str
    content: str


def validate_message_content(content: str) -> None:
    if not content:
        raise DomainValidationError("Message content cannot be empty")
    if len(content) > Config.MESSAGE_MAX_LENGTH:
        raise DomainValidationError(
            f"Message content must be {Config.MESSAGE_MAX_LENGTH} characters or less"
        )
    if not content.strip(" \t\n\r"):
        raise DomainValidationError("Message content cannot be only whitespace")


class SendMessageHandler(CommandHandler[SendMessageResult]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    def execute(self, command: SendMessageCommand) -> SendMessageResult:
        if not command.to_user.strip():
            raise DomainValidationError("Recipient cannot be empty")
        validate_message_content(command.content)

        message_id = self._message_repository.send(
            command.from_user, command.to_user, command.content
        )
        increment_messages_sent()
        return SendMessageResult(message_id=message_id, timestamp=int(time.time()))
