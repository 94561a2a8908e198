"""
Review service - buyer reviews and the supplier rating they drive.
"""

import logging
from typing import Optional

from ..extensions import db
from ..models import Review, ReviewStatus, Supplier, User
from . import notification_service
from .errors import ConflictError, InvalidRequestError, NotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)


def recompute_supplier_rating(supplier: Supplier):
    """Average of all reviews not marked deleted. Does not commit."""
    ratings = [
        r.rating for r in Review.query.filter(
            Review.supplier_id == supplier.id,
            Review.status != ReviewStatus.DELETED
        ).all()
    ]
    supplier.reviews_count = len(ratings)
    supplier.rating = sum(ratings) / len(ratings) if ratings else 0


def list_reviews(supplier: Supplier):
    """Reviews of the caller's own supplier, newest first."""
    return supplier.reviews.order_by(Review.created_at.desc(), Review.id.desc()).all()


def create_review(user: User, supplier_id: int, rating: int,
                  comment: Optional[str] = None) -> Review:
    if rating < 1 or rating > 5:
        raise InvalidRequestError('La note doit être comprise entre 1 et 5')

    existing = Review.query.filter_by(supplier_id=supplier_id, user_id=user.id).first()
    if existing:
        raise ConflictError('Vous avez déjà laissé un avis pour ce fournisseur')

    supplier = db.session.get(Supplier, supplier_id)
    if not supplier:
        raise NotFoundError('Fournisseur non trouvé')

    review = Review(
        supplier_id=supplier.id,
        user_id=user.id,
        rating=rating,
        comment=comment,
        status=ReviewStatus.PUBLISHED
    )
    db.session.add(review)
    db.session.flush()

    recompute_supplier_rating(supplier)
    notification_service.notify_new_review(
        supplier.user_id, review, user.full_name or user.email
    )
    db.session.commit()

    logger.info('Review %s created for supplier %s (rating %s)', review.id, supplier.id, rating)
    return review


def _get_owned(supplier: Optional[Supplier], review_id: int) -> Review:
    review = db.session.get(Review, review_id)
    if not review:
        raise NotFoundError('Avis introuvable')
    if supplier is None or review.supplier_id != supplier.id:
        raise PermissionDeniedError()
    return review


def update_review(supplier: Optional[Supplier], review_id: int,
                  status: Optional[str] = None, response: Optional[str] = None) -> Review:
    """Supplier owner sets the status and/or replies."""
    review = _get_owned(supplier, review_id)

    if status is not None:
        try:
            review.status = ReviewStatus(status)
        except ValueError:
            raise InvalidRequestError(f"Statut d'avis invalide: {status}")
    if response is not None:
        review.response = response

    if status is not None:
        db.session.flush()
        recompute_supplier_rating(supplier)
    db.session.commit()
    return review


def delete_review(supplier: Optional[Supplier], review_id: int):
    review = _get_owned(supplier, review_id)
    db.session.delete(review)
    db.session.flush()
    recompute_supplier_rating(supplier)
    db.session.commit()
    logger.info('Review %s deleted', review_id)
