"""
Inbound messages: site contact form, buyer to supplier messages,
newsletter subscriptions.
"""

import enum
from datetime import datetime
from ..extensions import db


class ContactType(enum.Enum):
    GENERAL = 'general'
    SUPPLIER = 'supplier'
    TECHNICAL = 'technical'
    PARTNERSHIP = 'partnership'
    FEEDBACK = 'feedback'


class MessageStatus(enum.Enum):
    UNREAD = 'unread'
    READ = 'read'


class SubscriptionStatus(enum.Enum):
    ACTIVE = 'active'
    UNSUBSCRIBED = 'unsubscribed'


class ContactMessage(db.Model):
    """Message sent through the public contact form."""
    __tablename__ = 'contact_message'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    subject = db.Column(db.String(200), nullable=False)
    message = db.Column(db.Text, nullable=False)
    type = db.Column(db.Enum(ContactType), default=ContactType.GENERAL, nullable=False)
    status = db.Column(db.Enum(MessageStatus), default=MessageStatus.UNREAD, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'subject': self.subject,
            'message': self.message,
            'type': self.type.value,
            'status': self.status.value,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }


class SupplierMessage(db.Model):
    """Message from a buyer (possibly anonymous) to a supplier."""
    __tablename__ = 'supplier_message'

    id = db.Column(db.Integer, primary_key=True)
    supplier_id = db.Column(
        db.Integer,
        db.ForeignKey('supplier.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    sender_name = db.Column(db.String(100), nullable=False)
    sender_email = db.Column(db.String(255), nullable=False)
    sender_phone = db.Column(db.String(30))
    subject = db.Column(db.String(200), nullable=False)
    message = db.Column(db.Text, nullable=False)
    status = db.Column(db.Enum(MessageStatus), default=MessageStatus.UNREAD, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'supplier_id': self.supplier_id,
            'sender_name': self.sender_name,
            'sender_email': self.sender_email,
            'sender_phone': self.sender_phone,
            'subject': self.subject,
            'message': self.message,
            'status': self.status.value,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }


class NewsletterSubscription(db.Model):
    __tablename__ = 'newsletter_subscription'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)  # lower/trimmed
    name = db.Column(db.String(100))
    sector = db.Column(db.String(100))
    status = db.Column(db.Enum(SubscriptionStatus), default=SubscriptionStatus.ACTIVE, nullable=False)
    subscribed_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    unsubscribed_at = db.Column(db.DateTime)

    def to_dict(self):
        return {
            'id': self.id,
            'email': self.email,
            'name': self.name,
            'sector': self.sector,
            'status': self.status.value,
            'subscribed_at': self.subscribed_at.isoformat() if self.subscribed_at else None,
            'unsubscribed_at': self.unsubscribed_at.isoformat() if self.unsubscribed_at else None,
        }
