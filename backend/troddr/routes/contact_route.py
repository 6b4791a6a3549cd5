import logging
from fastapi import APIRouter

from troddr.core.logger import logs
from troddr.models.contact_model import ContactRequest, ContactResponse

router = APIRouter()

@router.post("/api/contact", response_model=ContactResponse)
async def contact_endpoint(request: ContactRequest):
    """
    Accepts a contact-form message. Validation mirrors the form; the message
    is only logged.
    """
    logs.log(
        logging.INFO,
        "Contact message received",
        {"email": request.email, "subject": request.subject, "length": len(request.message)},
    )
    return ContactResponse(
        status="received",
        message="Thanks for reaching out! We'll get back to you soon.",
    )
