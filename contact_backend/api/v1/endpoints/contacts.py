"""API endpoints for the contact page form."""

import logging
from typing import Optional
from fastapi import APIRouter, Body, Depends, HTTPException

from contact_backend.core.exceptions import NotFoundError, SequenceResetError, StorageError, ValidationError
from contact_backend.models.pagecontact import PAGE_CONTACTS_TABLE
from contact_backend.schemas.pagecontactSchema import ContactFormRequest, MessageResponse, PageContactsResponse
from contact_backend.services.ContactStore import ContactStore, get_contact_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Contacts"])


@router.post("/submit-form", response_model=MessageResponse)
async def submit_form(
    request: Optional[ContactFormRequest] = Body(None),
    store: ContactStore = Depends(get_contact_store)
):
    """Store a contact form submission. `fullName` is stored as `name`."""
    if request is None or request.missing_fields():
        raise ValidationError("Missing required fields.")

    try:
        entry_id = await store.insert(
            name=request.full_name,
            email=request.email,
            subject=request.subject,
            message=request.message
        )
    except StorageError:
        logger.exception("Error saving contact submission")
        raise HTTPException(status_code=500, detail="Error saving your message.")

    logger.info(f"Stored contact submission {entry_id}")
    return {"message": "Thank you! Your message has been received."}


@router.get("/get-contacts", response_model=PageContactsResponse)
async def get_contacts(store: ContactStore = Depends(get_contact_store)):
    """
    Get all contact submissions, newest first.
    """
    try:
        entries = await store.list_all()
    except StorageError:
        logger.exception("Error retrieving contacts")
        raise HTTPException(status_code=500, detail="Error retrieving contacts.")

    return {"pageContacts": entries}


@router.delete("/delete-contact/{contact_id}", response_model=MessageResponse)
async def delete_contact(
    contact_id: int,
    store: ContactStore = Depends(get_contact_store)
):
    """Delete a single submission by id."""
    try:
        deleted = await store.delete_by_id(contact_id)
    except StorageError:
        logger.exception(f"Error deleting contact {contact_id}")
        raise HTTPException(status_code=500, detail="Error deleting the entry.")

    if not deleted:
        raise NotFoundError("Entry not found.")

    return {"message": "Entry deleted successfully."}


@router.delete("/clear-table", response_model=MessageResponse)
async def clear_table(store: ContactStore = Depends(get_contact_store)):
    """Delete every submission and restart ids at 1."""
    try:
        await store.clear_all()
    except SequenceResetError:
        logger.exception(f"Error resetting sequence for {PAGE_CONTACTS_TABLE}")
        raise HTTPException(status_code=500, detail="Error resetting the table ID.")
    except StorageError:
        logger.exception(f"Error clearing {PAGE_CONTACTS_TABLE}")
        raise HTTPException(status_code=500, detail="Error clearing the table.")

    return {"message": f"All entries from {PAGE_CONTACTS_TABLE} cleared successfully."}
