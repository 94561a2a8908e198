"""
Public Marketplace API - supplier directory.

Endpoints:
- GET /suppliers/search                        search approved suppliers
- GET /suppliers/<id>                          supplier with its published reviews
- GET /suppliers/<id>/verification-status      document checklist
- GET /categories                              active categories
"""

from flask import Blueprint, jsonify

from naijafind.api.schemas import parse_args
from naijafind.api.schemas.search import SupplierSearchQuery
from naijafind.services import supplier_service, category_service, verification_service

bp = Blueprint('public_marketplace', __name__)


@bp.route('/suppliers/search', methods=['GET'])
def search_suppliers():
    """
    Supplier search.

    Query params:
    - q: text in business name or description
    - category: exact category name
    - location: substring of "city, state"
    - lat, lng, radius_km: radius filter (default 50 km)
    - min_rating, verified
    - sort_by: relevance | distance | rating | reviews
    - limit (default 20), offset (default 0)
    """
    query = parse_args(SupplierSearchQuery)
    result = supplier_service.search_suppliers(**query.model_dump())
    return jsonify(result), 200


@bp.route('/suppliers/<int:supplier_id>', methods=['GET'])
def get_supplier(supplier_id):
    return jsonify(supplier_service.get_supplier_details(supplier_id)), 200


@bp.route('/suppliers/<int:supplier_id>/verification-status', methods=['GET'])
def verification_status(supplier_id):
    return jsonify(verification_service.verification_status(supplier_id)), 200


@bp.route('/categories', methods=['GET'])
def list_categories():
    categories = category_service.list_active_categories()
    return jsonify({'categories': [c.to_dict() for c in categories]}), 200
