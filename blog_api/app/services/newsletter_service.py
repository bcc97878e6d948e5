"""
Newsletter signups and contact form messages.

Neither form is persisted and no email is delivered; submissions are
written to the application log so that they can be picked up by an
operator.
"""

import logging

from ..schemas.newsletter import ContactRequest

SUBSCRIBED_MESSAGE = "Successfully subscribed to newsletter"
CONTACT_RECEIVED_MESSAGE = "Thank you for reaching out. We'll get back to you soon."


class NewsletterService:
    """Service acknowledging newsletter subscriptions."""

    @classmethod
    async def subscribe(cls, email: str) -> str:
        logger = logging.getLogger(__name__)
        logger.info("Newsletter subscription: %s", email)
        return SUBSCRIBED_MESSAGE


class ContactService:
    """Service acknowledging contact form messages."""

    @classmethod
    async def send_message(cls, data: ContactRequest) -> str:
        logger = logging.getLogger(__name__)
        logger.info("Contact message from %s <%s>: %s", data.name, data.email, data.subject)
        return CONTACT_RECEIVED_MESSAGE
