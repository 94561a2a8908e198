"""
Contact service - site contact form, buyer to supplier messages and the
newsletter.

Every message is stored first; the email is best effort and a failed
send is only logged.
"""

import logging
from datetime import datetime
from typing import Optional

from ..extensions import db
from ..models import (
    ContactMessage, ContactType, SupplierMessage, NewsletterSubscription,
    SubscriptionStatus, Supplier
)
from . import notification_service
from .email_service import email_service
from .errors import InvalidRequestError, NotFoundError
from .rate_limit_service import rate_limiter

logger = logging.getLogger(__name__)

CONTACT_ACTION = 'contact_form'
SUPPLIER_MESSAGE_ACTION = 'supplier_message'


def _log_email_result(result: dict, what: str):
    if not result['success']:
        logger.warning('%s email failed: %s', what, result.get('error'))


def submit_contact_form(name: str, email: str, subject: str, message: str,
                        contact_type: str = 'general', honeypot: Optional[str] = None) -> dict:
    """
    Stores and forwards a contact form message.

    A filled honeypot field means a bot: the call reports success but
    nothing is stored or sent.
    """
    if honeypot:
        logger.info('Contact form honeypot triggered (%s)', email)
        return {'success': True, 'id': None}

    try:
        type_enum = ContactType(contact_type or 'general')
    except ValueError:
        raise InvalidRequestError(f'Type de contact invalide: {contact_type}')

    rate_limiter.enforce(email.lower(), CONTACT_ACTION)

    contact = ContactMessage(
        name=name,
        email=email,
        subject=subject,
        message=message,
        type=type_enum
    )
    db.session.add(contact)
    db.session.commit()
    logger.info('Contact form submission received: %s', contact.id)

    result = email_service.send_contact_email(name, email, subject, message, type_enum.value)
    _log_email_result(result, 'Contact')
    return {'success': True, 'id': contact.id}


def send_supplier_message(supplier_id: int, sender_name: str, sender_email: str,
                          subject: str, message: str,
                          sender_phone: Optional[str] = None) -> dict:
    """Stores the message, emails the supplier and notifies its owner."""
    supplier = db.session.get(Supplier, supplier_id)
    if not supplier:
        raise NotFoundError('Fournisseur introuvable')

    rate_limiter.enforce(sender_email.lower(), SUPPLIER_MESSAGE_ACTION)

    supplier_message = SupplierMessage(
        supplier_id=supplier.id,
        sender_name=sender_name,
        sender_email=sender_email,
        sender_phone=sender_phone,
        subject=subject,
        message=message
    )
    db.session.add(supplier_message)
    db.session.flush()

    notification_service.notify_new_message(
        supplier.user_id, supplier_message.id, sender_name, subject
    )
    db.session.commit()
    logger.info('Supplier message %s received for supplier %s', supplier_message.id, supplier.id)

    result = email_service.send_supplier_contact_email(
        supplier, sender_name, sender_email, subject, message, sender_phone
    )
    _log_email_result(result, 'Supplier message')
    return {'success': True, 'id': supplier_message.id}


def list_supplier_messages(supplier: Supplier):
    return SupplierMessage.query.filter_by(supplier_id=supplier.id).order_by(
        SupplierMessage.created_at.desc(), SupplierMessage.id.desc()
    ).all()


# ============== Newsletter ==============

def _normalize(email: str) -> str:
    return email.strip().lower()


def subscribe(email: str, name: Optional[str] = None, sector: Optional[str] = None) -> dict:
    """Idempotent for active subscribers; re-activates unsubscribed ones."""
    normalized = _normalize(email)
    existing = NewsletterSubscription.query.filter_by(email=normalized).first()

    if existing:
        if existing.status == SubscriptionStatus.ACTIVE:
            return {'success': True, 'message': 'Email already subscribed', 'already_subscribed': True}

        existing.status = SubscriptionStatus.ACTIVE
        existing.name = name or existing.name
        existing.sector = sector or existing.sector
        existing.subscribed_at = datetime.utcnow()
        existing.unsubscribed_at = None
        db.session.commit()

        result = email_service.send_newsletter_welcome(normalized, name, welcome_back=True)
        _log_email_result(result, 'Newsletter welcome back')
        return {'success': True, 'message': 'Successfully resubscribed', 'already_subscribed': False}

    subscription = NewsletterSubscription(
        email=normalized,
        name=name,
        sector=sector,
        status=SubscriptionStatus.ACTIVE
    )
    db.session.add(subscription)
    db.session.commit()
    logger.info('Newsletter subscription created: %s', subscription.id)

    result = email_service.send_newsletter_welcome(normalized, name)
    _log_email_result(result, 'Newsletter welcome')
    return {
        'success': True,
        'id': subscription.id,
        'message': 'Successfully subscribed',
        'already_subscribed': False,
    }


def unsubscribe(email: str) -> dict:
    subscription = NewsletterSubscription.query.filter_by(email=_normalize(email)).first()
    if not subscription:
        return {'success': False, 'message': 'Email not found'}

    subscription.status = SubscriptionStatus.UNSUBSCRIBED
    subscription.unsubscribed_at = datetime.utcnow()
    db.session.commit()
    return {'success': True, 'message': 'Successfully unsubscribed'}


def list_subscribers(status: Optional[str] = None):
    """status: 'active', 'unsubscribed' or None/'all'."""
    query = NewsletterSubscription.query
    if status and status != 'all':
        try:
            query = query.filter_by(status=SubscriptionStatus(status))
        except ValueError:
            raise InvalidRequestError(f'Statut invalide: {status}')
    return query.order_by(NewsletterSubscription.subscribed_at.desc()).all()


def send_newsletter(subject: str, html: str) -> dict:
    """Emails every active subscriber. Failed sends are counted, not raised."""
    subscribers = list_subscribers(SubscriptionStatus.ACTIVE.value)
    if not subscribers:
        return {'success': True, 'sent': 0, 'total': 0, 'message': 'No active subscribers'}

    sent = 0
    for subscriber in subscribers:
        result = email_service.send(subscriber.email, subject, html)
        if result['success']:
            sent += 1
        else:
            logger.warning('Newsletter to %s failed: %s', subscriber.email, result.get('error'))

    logger.info('Newsletter sent to %d/%d subscribers', sent, len(subscribers))
    return {
        'success': True,
        'sent': sent,
        'total': len(subscribers),
        'message': f'Newsletter sent to {sent} subscribers',
    }
