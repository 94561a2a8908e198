"""
Reviews API - buyers write reviews, suppliers moderate and reply.
"""

from flask import Blueprint, jsonify, g

from naijafind.api.middleware import (
    jwt_required, user_required, supplier_required, current_supplier_or_none
)
from naijafind.api.schemas import parse_body
from naijafind.api.schemas.reviews import ReviewCreateRequest, ReviewUpdateRequest
from naijafind.services import review_service

bp = Blueprint('reviews', __name__, url_prefix='/reviews')


@bp.route('', methods=['GET'])
@jwt_required
@user_required
@supplier_required
def list_reviews():
    """Reviews of the caller's supplier, all statuses."""
    reviews = review_service.list_reviews(g.current_supplier)
    return jsonify({'reviews': [r.to_dict() for r in reviews]}), 200


@bp.route('', methods=['POST'])
@jwt_required
@user_required
def create_review():
    data = parse_body(ReviewCreateRequest)
    review = review_service.create_review(
        g.current_user, data.supplier_id, data.rating, data.comment
    )
    return jsonify({'success': True, 'review_id': review.id}), 201


@bp.route('/<int:review_id>', methods=['PUT'])
@jwt_required
@user_required
def update_review(review_id):
    data = parse_body(ReviewUpdateRequest)
    review = review_service.update_review(
        current_supplier_or_none(), review_id, data.status, data.response
    )
    return jsonify({'success': True, 'review': review.to_dict()}), 200


@bp.route('/<int:review_id>', methods=['DELETE'])
@jwt_required
@user_required
def delete_review(review_id):
    review_service.delete_review(current_supplier_or_none(), review_id)
    return jsonify({'success': True}), 200
