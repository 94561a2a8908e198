"""
Admin API - categories.
"""

from flask import Blueprint, jsonify, g

from naijafind.api.middleware import jwt_required, user_required, admin_required
from naijafind.api.schemas import parse_body
from naijafind.api.schemas.catalog import CategoryCreateRequest, CategoryUpdateRequest
from naijafind.services import category_service

bp = Blueprint('admin_categories', __name__, url_prefix='/categories')


@bp.route('', methods=['GET'])
@jwt_required
@user_required
@admin_required
def list_categories():
    """All categories, inactive included."""
    categories = category_service.list_all_categories()
    return jsonify({'categories': [c.to_dict() for c in categories]}), 200


@bp.route('', methods=['POST'])
@jwt_required
@user_required
@admin_required
def add_category():
    data = parse_body(CategoryCreateRequest)
    category = category_service.add_category(
        created_by=g.current_user.id, **data.model_dump()
    )
    return jsonify({'id': category.id, 'category': category.to_dict()}), 201


@bp.route('/<int:category_id>', methods=['PUT'])
@jwt_required
@user_required
@admin_required
def update_category(category_id):
    data = parse_body(CategoryUpdateRequest)
    category = category_service.update_category(
        category_id, data.model_dump(exclude_unset=True)
    )
    return jsonify({'success': True, 'category': category.to_dict()}), 200


@bp.route('/<int:category_id>', methods=['DELETE'])
@jwt_required
@user_required
@admin_required
def delete_category(category_id):
    category_service.delete_category(category_id)
    return jsonify({'success': True}), 200


@bp.route('/seed', methods=['POST'])
@jwt_required
@user_required
@admin_required
def seed_default_categories():
    result = category_service.seed_categories(created_by=g.current_user.id)
    return jsonify(result), 200


@bp.route('/stats', methods=['GET'])
@jwt_required
@user_required
@admin_required
def category_stats():
    """Number of suppliers per category name."""
    return jsonify(category_service.supplier_counts()), 200
