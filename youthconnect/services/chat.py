"""Career assistant chat. Replies are canned; no model is called."""
import logging

logger = logging.getLogger(__name__)

GREETING = "Hello! I'm your AI career assistant. How can I help you today?"

CANNED_REPLY = (
    "I understand you're looking for career guidance. Here are some ways I can help:\n\n"
    "• Find jobs matching your skills\n"
    "• Career path recommendations\n"
    "• Interview preparation tips\n"
    "• Resume building advice\n"
    "• Skill development suggestions"
)


def reply_to(message: str) -> str:
    """Return the assistant's reply to a user message."""
    logger.info(f"Chat message received ({len(message)} chars)")
    return CANNED_REPLY
