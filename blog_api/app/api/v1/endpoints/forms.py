"""
Newsletter and contact form endpoints.

Both endpoints validate the submitted form and answer with a short
acknowledgement.  Invalid input is rejected with HTTP 400 and the
first validation message (see ``core.errors``).
"""

from fastapi import APIRouter

from blog_api.app.schemas.newsletter import ContactRequest, MessageResponse, SubscribeRequest
from blog_api.app.services.newsletter_service import ContactService, NewsletterService

router = APIRouter()


@router.post("/subscribe", response_model=MessageResponse)
async def subscribe(body: SubscribeRequest) -> MessageResponse:
    """Subscribe an email address to the newsletter."""
    message = await NewsletterService.subscribe(body.email)
    return MessageResponse(message=message)


@router.post("/contact", response_model=MessageResponse)
async def contact(body: ContactRequest) -> MessageResponse:
    """Accept a message from the contact page."""
    message = await ContactService.send_message(body)
    return MessageResponse(message=message)
