"""
Notification model - in-app notifications per user.
"""

import enum
from datetime import datetime
from ..extensions import db


class NotificationType(enum.Enum):
    ORDER = 'order'
    REVIEW = 'review'
    MESSAGE = 'message'
    SYSTEM = 'system'
    APPROVAL = 'approval'
    VERIFICATION = 'verification'


class Notification(db.Model):
    """
    Notification shown in the user's inbox.

    data       - free-form payload (ids of the related order/review/...)
    action_url - frontend path the notification links to
    """
    __tablename__ = 'notification'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey('user.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )

    type = db.Column(db.Enum(NotificationType), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    message = db.Column(db.Text, nullable=False)
    data = db.Column(db.JSON)
    read = db.Column(db.Boolean, default=False, nullable=False, index=True)
    action_url = db.Column(db.String(500))

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    def __repr__(self):
        return f'<Notification {self.id}: {self.type.value} user={self.user_id}>'

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'type': self.type.value,
            'title': self.title,
            'message': self.message,
            'data': self.data,
            'read': self.read,
            'action_url': self.action_url,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
