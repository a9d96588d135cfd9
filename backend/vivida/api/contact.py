"""Contact form endpoints: public submission and the admin inbox."""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status

from vivida.auth.bearer import get_current_user
from vivida.schemas.contact import (
    ContactSubmissionCreate,
    ContactSubmissionResponse,
    ContactSubmitResponse,
)
from vivida.services.storage import Storage, get_storage
from vivida.utils.exceptions import handle_database_error, not_found_error
from vivida.utils.logger import logger

public_router = APIRouter(prefix="/api", tags=["contact"])

router = APIRouter(
    prefix="/api/admin/contact-submissions",
    tags=["contact"],
    dependencies=[Depends(get_current_user)],
)


@public_router.post("/contact", response_model=ContactSubmitResponse, status_code=status.HTTP_201_CREATED)
async def submit_contact_form(
    submission: ContactSubmissionCreate,
    storage: Storage = Depends(get_storage),
) -> ContactSubmitResponse:
    """
    Store a message from the public contact form.

    Args:
        submission: Name, email, subject and message
        storage: Request-scoped storage

    Returns:
        Confirmation message and the new submission ID
    """
    try:
        new_submission = storage.create_contact_submission(submission.model_dump())
        logger.info(f"Received contact submission {new_submission.id}")
        return ContactSubmitResponse(message="Message sent successfully", id=new_submission.id)
    except Exception as e:
        logger.error(f"Failed to store contact submission: {e}", exc_info=True)
        raise handle_database_error(e, "submit_contact_form")


@router.get("", response_model=List[ContactSubmissionResponse])
async def list_contact_submissions(storage: Storage = Depends(get_storage)):
    """Get all submissions, oldest first."""
    try:
        return storage.get_contact_submissions()
    except Exception as e:
        logger.error(f"Failed to fetch contact submissions: {e}", exc_info=True)
        raise handle_database_error(e, "list_contact_submissions")


@router.put("/{submission_id}/read", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def mark_contact_submission_read(
    submission_id: str,
    storage: Storage = Depends(get_storage),
) -> Response:
    """Flag a submission as read."""
    try:
        if not storage.mark_contact_submission_as_read(submission_id):
            raise not_found_error("Submission")
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to mark submission {submission_id} as read: {e}", exc_info=True)
        raise handle_database_error(e, "mark_contact_submission_read")
