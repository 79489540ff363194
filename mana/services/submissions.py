# mana/services/submissions.py
"""Persist public form submissions; shared by the JSON API and the HTML pages."""
import logging

from ..extensions import db
from ..models.careers import Application
from ..models.inquiry import ContactMessage, QuoteRequest

log = logging.getLogger(__name__)


def _clean(value):
    if isinstance(value, str):
        value = value.strip()
    return value or None


def create_contact_message(form) -> ContactMessage:
    msg = ContactMessage(
        name=form.name.data.strip(),
        email=form.email.data.strip().lower(),
        subject=form.subject.data.strip(),
        message=form.message.data.strip(),
    )
    db.session.add(msg)
    db.session.commit()
    log.info("Contact message %s from %s", msg.id, msg.email)
    return msg


def create_quote_request(form, file_url: str | None = None) -> QuoteRequest:
    q = QuoteRequest(
        first_name=form.firstName.data.strip(),
        last_name=form.lastName.data.strip(),
        email=form.email.data.strip().lower(),
        company=_clean(form.company.data),
        phone=form.phone.data.strip(),
        description=form.description.data.strip(),
        service_type=form.serviceType.data,
        urgency=form.urgency.data,
        file_url=file_url or _clean(form.fileUrl.data),
        status="PENDING",
    )
    db.session.add(q)
    db.session.commit()
    log.info("Quote request %s (%s, %s)", q.id, q.service_type, q.urgency)
    return q


def create_application(form, job_id: str, cv_url: str) -> Application:
    app_ = Application(
        job_id=job_id,
        full_name=form.fullName.data.strip(),
        email=form.email.data.strip().lower(),
        phone=form.phone.data.strip(),
        cv_url=cv_url,
        message=_clean(form.message.data),
        status="NEW",
    )
    db.session.add(app_)
    db.session.commit()
    log.info("Application %s for job %s", app_.id, job_id)
    return app_
