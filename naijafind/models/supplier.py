"""
Supplier model - business profile owned by exactly one user.

The category is stored by NAME, not by foreign key; the category
delete check looks suppliers up by that name.
"""

from datetime import datetime
from ..extensions import db


DEFAULT_BUSINESS_HOURS = {
    'monday': '08:00-18:00',
    'tuesday': '08:00-18:00',
    'wednesday': '08:00-18:00',
    'thursday': '08:00-18:00',
    'friday': '08:00-18:00',
    'saturday': '09:00-17:00',
    'sunday': 'closed',
}


class Supplier(db.Model):
    """
    Supplier profile, searchable by buyers once approved.

    approved - set by an admin, only approved suppliers show up in search
    verified - set when all required verification documents are approved
    featured - admin highlight
    """
    __tablename__ = 'supplier'

    id = db.Column(db.Integer, primary_key=True)

    # Owner (one profile per user, enforced in user_service.sign_up_supplier)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey('user.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )

    # Business data
    business_name = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(220), unique=True, nullable=False, index=True)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(30))
    description = db.Column(db.Text)
    category = db.Column(db.String(100), nullable=False, index=True)
    website = db.Column(db.String(255))

    # Address
    address = db.Column(db.String(300))
    city = db.Column(db.String(100), nullable=False)
    state = db.Column(db.String(100), nullable=False)
    country = db.Column(db.String(100))
    location = db.Column(db.String(220))  # "city, state"
    latitude = db.Column(db.Float)
    longitude = db.Column(db.Float)

    # Rating (recomputed from reviews)
    rating = db.Column(db.Float, default=0, nullable=False)
    reviews_count = db.Column(db.Integer, default=0, nullable=False)

    # Moderation
    verified = db.Column(db.Boolean, default=False, nullable=False)
    approved = db.Column(db.Boolean, default=False, nullable=False, index=True)
    featured = db.Column(db.Boolean, default=False, nullable=False, index=True)

    # Media (URLs only, uploads go straight to the CDN)
    logo_url = db.Column(db.String(500))
    cover_image_url = db.Column(db.String(500))
    image = db.Column(db.String(500))
    image_gallery = db.Column(db.JSON, default=list)

    business_hours = db.Column(db.JSON, default=dict)
    social_links = db.Column(db.JSON, default=dict)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False
    )

    # Relations
    products = db.relationship(
        'Product',
        backref='supplier',
        lazy='dynamic',
        cascade='all, delete-orphan'
    )
    reviews = db.relationship(
        'Review',
        backref='supplier',
        lazy='dynamic',
        cascade='all, delete-orphan'
    )
    documents = db.relationship(
        'VerificationDocument',
        backref='supplier',
        lazy='dynamic',
        cascade='all, delete-orphan'
    )

    def __repr__(self):
        return f'<Supplier {self.id}: {self.business_name}>'

    def to_dict(self):
        """Full profile for API responses."""
        return {
            'id': self.id,
            'user_id': self.user_id,
            'business_name': self.business_name,
            'slug': self.slug,
            'email': self.email,
            'phone': self.phone,
            'description': self.description,
            'category': self.category,
            'website': self.website,
            'address': self.address,
            'city': self.city,
            'state': self.state,
            'country': self.country,
            'location': self.location,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'rating': self.rating or 0,
            'reviews_count': self.reviews_count or 0,
            'verified': self.verified,
            'approved': self.approved,
            'featured': self.featured,
            'logo_url': self.logo_url,
            'cover_image_url': self.cover_image_url,
            'image': self.image,
            'image_gallery': self.image_gallery or [],
            'business_hours': self.business_hours or {},
            'social_links': self.social_links or {},
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
