"""
User model - accounts known to the marketplace.

Authentication itself is delegated to the identity provider; this table
only mirrors the identity (subject + email) and carries the role.
"""

import enum
from datetime import datetime
from ..extensions import db


class UserType(enum.Enum):
    """Account role."""
    USER = 'user'          # Buyer
    SUPPLIER = 'supplier'  # Owns a supplier profile
    ADMIN = 'admin'        # Platform moderator


class User(db.Model):
    """
    Marketplace account.

    auth_subject is the identity provider's `sub` claim. Admins created
    through the bootstrap route have no subject until their first login.
    """
    __tablename__ = 'user'

    id = db.Column(db.Integer, primary_key=True)

    # Identity
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    auth_subject = db.Column(db.String(255), unique=True, index=True)

    # Profile
    phone = db.Column(db.String(30), index=True)
    first_name = db.Column(db.String(100))
    last_name = db.Column(db.String(100))

    # Role
    user_type = db.Column(db.Enum(UserType), default=UserType.USER, nullable=False)
    is_admin = db.Column(db.Boolean, default=False, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    # Relations
    supplier = db.relationship('Supplier', backref='owner', uselist=False)

    def __repr__(self):
        return f'<User {self.id}: {self.email}>'

    @property
    def is_platform_admin(self):
        """Admin flag or admin role - either grants moderation rights."""
        return bool(self.is_admin) or self.user_type == UserType.ADMIN

    @property
    def full_name(self):
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def to_dict(self):
        return {
            'id': self.id,
            'email': self.email,
            'phone': self.phone,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'user_type': self.user_type.value if self.user_type else None,
            'is_admin': self.is_platform_admin,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
