"""
Category model - supplier categories shown in search filters.
"""

from datetime import datetime
from ..extensions import db


# Default seed list for /init and `flask init-categories`
DEFAULT_CATEGORIES = [
    {
        'name': 'Agriculture',
        'description': 'Produits agricoles, équipements, semences et services',
        'icon': 'ri-plant-line',
        'order': 1,
    },
    {
        'name': 'Textile',
        'description': 'Tissus, vêtements, accessoires de mode',
        'icon': 'ri-shirt-line',
        'order': 2,
    },
    {
        'name': 'Électronique',
        'description': 'Appareils électroniques, composants, accessoires',
        'icon': 'ri-smartphone-line',
        'order': 3,
    },
    {
        'name': 'Alimentation',
        'description': 'Produits alimentaires, boissons, épices',
        'icon': 'ri-restaurant-line',
        'order': 4,
    },
    {
        'name': 'Construction',
        'description': 'Matériaux de construction, outils, équipements',
        'icon': 'ri-building-line',
        'order': 5,
    },
    {
        'name': 'Automobile',
        'description': 'Véhicules, pièces détachées, accessoires auto',
        'icon': 'ri-car-line',
        'order': 6,
    },
    {
        'name': 'Santé & Beauté',
        'description': 'Produits de santé, cosmétiques, bien-être',
        'icon': 'ri-heart-pulse-line',
        'order': 7,
    },
    {
        'name': 'Éducation',
        'description': 'Livres, fournitures scolaires, équipements éducatifs',
        'icon': 'ri-book-line',
        'order': 8,
    },
    {
        'name': 'Services',
        'description': 'Services professionnels, consulting, maintenance',
        'icon': 'ri-service-line',
        'order': 9,
    },
]


class Category(db.Model):
    __tablename__ = 'category'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False, index=True)
    description = db.Column(db.Text)
    icon = db.Column(db.String(100))
    image = db.Column(db.String(500))
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    order = db.Column(db.Integer)  # Display order, NULL sorts last

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    created_by = db.Column(db.Integer, db.ForeignKey('user.id', ondelete='SET NULL'))

    def __repr__(self):
        return f'<Category {self.id}: {self.name}>'

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'icon': self.icon,
            'image': self.image,
            'is_active': self.is_active,
            'order': self.order,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'created_by': self.created_by,
        }
