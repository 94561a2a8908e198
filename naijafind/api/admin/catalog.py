"""
Admin API - products and orders across all suppliers.
"""

from flask import Blueprint, jsonify

from naijafind.api.middleware import jwt_required, user_required, admin_required
from naijafind.api.schemas import parse_args
from naijafind.api.schemas.orders import OrderListQuery
from naijafind.services import product_service, order_service

bp = Blueprint('admin_catalog', __name__)


@bp.route('/products', methods=['GET'])
@jwt_required
@user_required
@admin_required
def list_products():
    products = product_service.list_all_products()
    return jsonify({'products': [p.to_dict() for p in products]}), 200


@bp.route('/orders', methods=['GET'])
@jwt_required
@user_required
@admin_required
def list_orders():
    """Query params: status, supplier_id, limit."""
    query = parse_args(OrderListQuery)
    orders = order_service.list_all_orders(query.status, query.supplier_id, query.limit)
    return jsonify({'orders': orders}), 200


@bp.route('/orders/stats', methods=['GET'])
@jwt_required
@user_required
@admin_required
def order_stats():
    return jsonify(order_service.admin_order_stats()), 200
