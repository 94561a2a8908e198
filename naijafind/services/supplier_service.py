"""
Supplier service - search, public details, profile management and
admin moderation.
"""

import logging
import math
from typing import Optional

from flask import current_app

from ..extensions import db
from ..models import Supplier, Review, ReviewStatus, User, Order, DEFAULT_BUSINESS_HOURS
from ..utils.geo import distance_to
from . import notification_service
from .email_service import email_service
from .errors import InvalidRequestError, NotFoundError

logger = logging.getLogger(__name__)

SORT_OPTIONS = ('relevance', 'distance', 'rating', 'reviews')


# ============== Search ==============

def search_suppliers(q: Optional[str] = None, category: Optional[str] = None,
                     location: Optional[str] = None, lat: Optional[float] = None,
                     lng: Optional[float] = None, radius_km: Optional[float] = None,
                     min_rating: Optional[float] = None, verified: Optional[bool] = None,
                     sort_by: Optional[str] = None, limit: Optional[int] = None,
                     offset: Optional[int] = None) -> dict:
    """
    Searches approved suppliers.

    Filters are applied in memory one after another: text (business name
    or description), exact category, location substring, minimum rating,
    verified flag and, when lat/lng are given, the radius around that
    point. Suppliers without coordinates are dropped by the radius filter.

    Sorting: distance asc, rating desc, reviews desc, or relevance
    (insertion order). All sorts are stable.

    Returns:
        {'suppliers': [dict], 'total': count before paging}
    """
    sort_by = sort_by or 'relevance'
    if sort_by not in SORT_OPTIONS:
        raise InvalidRequestError(f'Tri invalide: {sort_by}')
    if limit is None:
        limit = current_app.config.get('SEARCH_DEFAULT_LIMIT', 20)
    offset = offset or 0

    suppliers = Supplier.query.filter_by(approved=True).order_by(Supplier.id).all()

    if q and q.strip():
        needle = q.lower()
        suppliers = [
            s for s in suppliers
            if needle in (s.business_name or '').lower()
            or needle in (s.description or '').lower()
        ]

    if category:
        suppliers = [s for s in suppliers if s.category == category]

    if location:
        loc = location.lower()
        suppliers = [s for s in suppliers if loc in (s.location or '').lower()]

    if min_rating and min_rating > 0:
        suppliers = [s for s in suppliers if (s.rating or 0) >= min_rating]

    if verified:
        suppliers = [s for s in suppliers if s.verified is True]

    distances = {}
    if lat is not None and lng is not None:
        radius = radius_km if radius_km is not None else current_app.config.get(
            'SEARCH_DEFAULT_RADIUS_KM', 50.0
        )
        for s in suppliers:
            distances[s.id] = distance_to(s, lat, lng)
        suppliers = [s for s in suppliers if distances[s.id] <= radius]

    if sort_by == 'distance':
        suppliers.sort(key=lambda s: distances.get(s.id, math.inf))
    elif sort_by == 'rating':
        suppliers.sort(key=lambda s: s.rating or 0, reverse=True)
    elif sort_by == 'reviews':
        suppliers.sort(key=lambda s: s.reviews_count or 0, reverse=True)

    total = len(suppliers)
    page = suppliers[offset:offset + limit]

    results = []
    for s in page:
        data = s.to_dict()
        if s.id in distances:
            data['distance'] = distances[s.id]
        results.append(data)

    return {'suppliers': results, 'total': total}


# ============== Details & profile ==============

def get_supplier_details(supplier_id: int) -> dict:
    """{supplier, reviews}; supplier is None when it does not exist."""
    supplier = db.session.get(Supplier, supplier_id)
    if not supplier:
        return {'supplier': None, 'reviews': []}

    reviews = supplier.reviews.filter(
        Review.status == ReviewStatus.PUBLISHED
    ).order_by(Review.created_at.desc()).all()
    return {
        'supplier': supplier.to_dict(),
        'reviews': [r.to_dict() for r in reviews],
    }


def update_supplier_profile(supplier: Supplier, data: dict) -> Supplier:
    """
    Updates the caller's own profile.

    business_hours falls back to the stored value, then to the defaults.
    location is recomputed from city and state.
    """
    supplier.business_name = data['business_name']
    supplier.email = data['email']
    supplier.phone = data.get('phone')
    supplier.description = data.get('description')
    supplier.category = data['category']
    supplier.address = data.get('address')
    supplier.city = data['city']
    supplier.state = data['state']
    supplier.location = f"{data['city']}, {data['state']}"
    supplier.website = data.get('website')
    supplier.image = data.get('image')
    supplier.image_gallery = data.get('image_gallery') or []
    supplier.business_hours = (
        data.get('business_hours') or supplier.business_hours or dict(DEFAULT_BUSINESS_HOURS)
    )
    supplier.social_links = data.get('social_links') or {}

    # Optional extras, kept when not sent
    for field in ('country', 'latitude', 'longitude', 'logo_url', 'cover_image_url'):
        if field in data and data[field] is not None:
            setattr(supplier, field, data[field])

    db.session.commit()
    logger.info('Supplier profile updated: %s', supplier.id)
    return supplier


# ============== Admin moderation ==============

def list_all_suppliers(approved: Optional[bool] = None):
    query = Supplier.query
    if approved is not None:
        query = query.filter_by(approved=approved)
    return query.order_by(Supplier.created_at.desc(), Supplier.id.desc()).all()


def _get_or_404(supplier_id: int) -> Supplier:
    supplier = db.session.get(Supplier, supplier_id)
    if not supplier:
        raise NotFoundError('Fournisseur introuvable')
    return supplier


def set_approval(supplier_id: int, approved: bool, reason: Optional[str] = None) -> Supplier:
    """
    Approves or rejects a supplier. The owner gets a notification and an
    email either way.
    """
    supplier = _get_or_404(supplier_id)
    supplier.approved = approved

    if approved:
        notification_service.notify_supplier_approved(supplier)
    else:
        notification_service.notify_supplier_rejected(supplier, reason)
    db.session.commit()
    logger.info('Supplier %s %s', supplier.id, 'approved' if approved else 'rejected')

    result = email_service.send_supplier_approval_email(supplier, approved, reason)
    if not result['success']:
        logger.warning('Approval email to %s failed: %s', supplier.email, result.get('error'))
    return supplier


def set_featured(supplier_id: int, featured: bool) -> Supplier:
    supplier = _get_or_404(supplier_id)
    supplier.featured = featured
    db.session.commit()
    return supplier


def set_verified(supplier_id: int, verified: bool) -> Supplier:
    supplier = _get_or_404(supplier_id)
    supplier.verified = verified
    db.session.commit()
    return supplier


def delete_supplier(supplier_id: int):
    """Deletes the profile with its products, reviews and documents."""
    supplier = _get_or_404(supplier_id)
    owner = db.session.get(User, supplier.user_id)
    # orders keep their history
    Order.query.filter_by(supplier_id=supplier_id).update({'supplier_id': None})
    db.session.delete(supplier)
    db.session.commit()
    logger.info('Supplier %s deleted (owner %s)', supplier_id, owner.email if owner else None)
