# portfolio/contact/contact_router.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from portfolio.auth.security import require_admin
from portfolio.database import get_db
from portfolio.models.contact import Contact
from portfolio.responses import ok
from portfolio.routing import EnvelopeRoute
from portfolio.schemas.contact_schema import ContactCreate, ContactRead, ContactUpdate
from portfolio.store import commit, contains_any, paginate

logger = logging.getLogger("portfolio.contact")

NOT_FOUND = "Contact message not found"

# public contact form
public_router = APIRouter(prefix="/api/contact", tags=["contact"], route_class=EnvelopeRoute)

# admin inbox
router = APIRouter(
    prefix="/api/contacts",
    tags=["contacts"],
    route_class=EnvelopeRoute,
    dependencies=[Depends(require_admin)],
)


@public_router.post("", summary="Send message")
def submit_contact(data: ContactCreate, db: Session = Depends(get_db)):
    contact = Contact(**data.model_dump(), read=False)
    db.add(contact)
    commit(db)
    db.refresh(contact)

    # do not log the message body
    logger.info("contact_received", extra={"contact_id": contact.id})
    return ok(ContactRead.model_validate(contact), message="Message sent")


@router.get("", summary="Fetch contacts")
def list_contacts(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    read: Optional[bool] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    query = db.query(Contact)
    if read is not None:
        query = query.filter(Contact.read == read)
    if search:
        query = query.filter(contains_any(search, Contact.name, Contact.email, Contact.message))

    query = query.order_by(Contact.created_at.desc(), Contact.id.desc())
    items, pagination = paginate(query, page, limit)
    return ok([ContactRead.model_validate(c) for c in items], pagination=pagination)


@router.get("/{contact_id}", summary="Fetch contact")
def get_contact(contact_id: str, db: Session = Depends(get_db)):
    contact = db.get(Contact, contact_id)
    if not contact:
        raise HTTPException(404, NOT_FOUND)
    return ok(ContactRead.model_validate(contact))


@router.put("/{contact_id}", summary="Update contact")
def update_contact(contact_id: str, data: ContactUpdate, db: Session = Depends(get_db)):
    contact = db.get(Contact, contact_id)
    if not contact:
        raise HTTPException(404, NOT_FOUND)

    contact.read = data.read
    commit(db)
    db.refresh(contact)
    return ok(ContactRead.model_validate(contact), message="Contact message updated successfully")


@router.delete("/{contact_id}", summary="Delete contact")
def delete_contact(contact_id: str, db: Session = Depends(get_db)):
    contact = db.get(Contact, contact_id)
    if not contact:
        raise HTTPException(404, NOT_FOUND)

    db.delete(contact)
    commit(db)
    return ok(message="Contact message deleted successfully")
