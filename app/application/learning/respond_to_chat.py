"""
Use case: Answer a chat widget message.

Input: ChatCommand (message, locale)
Output: ChatResult
Side effects: None.
Failure cases: InvalidMessageError.
"""

import logging

from app.application.learning.dtos import ChatCommand, ChatLinkResult, ChatResult
from app.domain.learning.chat_responder import ChatResponder
from app.domain.learning.errors import InvalidMessageError

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 500


class RespondToChatUseCase:
    """Validates a message and delegates to the ChatResponder."""

    def __init__(
        self, responder: ChatResponder, max_length: int = MAX_MESSAGE_LENGTH
    ) -> None:
        self._responder = responder
        self._max_length = max_length

    def execute(self, command: ChatCommand) -> ChatResult:
        """Run the chat use case.

        Args:
            command: Raw message and locale.

        Returns:
            The reply type, localized message and suggested links.
        """
        message = command.message.strip()
        if not message or len(message) > self._max_length:
            raise InvalidMessageError(len(message), self._max_length)

        reply = self._responder.respond(message, command.locale)
        logger.info("Chat reply type=%s locale=%s", reply.type.value, command.locale)

        return ChatResult(
            type=reply.type.value,
            message=reply.message,
            links=[
                ChatLinkResult(type=link.type.value, slug=link.slug, title=link.title)
                for link in reply.links
            ],
        )
