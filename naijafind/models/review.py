"""
Review model - buyer ratings of suppliers.
"""

import enum
from datetime import datetime
from ..extensions import db


class ReviewStatus(enum.Enum):
    PUBLISHED = 'published'
    HIDDEN = 'hidden'
    DELETED = 'deleted'  # Soft delete, excluded from the supplier rating


class Review(db.Model):
    """One review per user per supplier."""
    __tablename__ = 'review'

    id = db.Column(db.Integer, primary_key=True)

    supplier_id = db.Column(
        db.Integer,
        db.ForeignKey('supplier.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    user_id = db.Column(
        db.Integer,
        db.ForeignKey('user.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )

    rating = db.Column(db.Integer, nullable=False)
    comment = db.Column(db.Text)
    response = db.Column(db.Text)  # Supplier reply
    status = db.Column(db.Enum(ReviewStatus), default=ReviewStatus.PUBLISHED, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    author = db.relationship('User', foreign_keys=[user_id])

    __table_args__ = (
        db.CheckConstraint('rating >= 1 AND rating <= 5', name='check_review_rating_range'),
        db.UniqueConstraint('supplier_id', 'user_id', name='uq_review_per_user'),
    )

    def __repr__(self):
        return f'<Review {self.id}: supplier={self.supplier_id} rating={self.rating}>'

    def to_dict(self):
        return {
            'id': self.id,
            'supplier_id': self.supplier_id,
            'user_id': self.user_id,
            'author_name': self.author.full_name if self.author else None,
            'rating': self.rating,
            'comment': self.comment,
            'response': self.response,
            'status': self.status.value,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
