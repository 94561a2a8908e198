"""
Rate limit attempts - one row per limited action (contact form, message).
"""

from datetime import datetime
from ..extensions import db


class RateLimitAttempt(db.Model):
    __tablename__ = 'rate_limit_attempt'

    id = db.Column(db.Integer, primary_key=True)
    identifier = db.Column(db.String(255), nullable=False)  # Email or IP
    action = db.Column(db.String(50), nullable=False)
    timestamp = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    __table_args__ = (
        db.Index('ix_rate_limit_identifier_action', 'identifier', 'action'),
    )

    def __repr__(self):
        return f'<RateLimitAttempt {self.identifier} {self.action}>'
