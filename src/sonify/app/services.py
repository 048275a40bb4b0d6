import logging
from typing import Optional

from ..mood.composer import compose
from ..mood.config import get_classifier
from ..mood.playlists import resolve
from .schemas import ChatResponse

logger = logging.getLogger(__name__)


def get_chat_reply(query: Optional[str]) -> ChatResponse:
    """
    Service layer function for the chat endpoint: classify, pick playlists, word the reply.
    """
    logger.info(f"User query: {query!r}")

    result = get_classifier().analyze(query)
    if result.defaulted:
        logger.info(f"Sentiment defaulted to {result.label.value} ({result.error})")
    else:
        logger.info(f"Detected mood: {result.label.value}")

    playlist = resolve(result.label)
    bot_message = compose(result.label, playlist)
    return ChatResponse(bot_message=bot_message, playlist=playlist)
