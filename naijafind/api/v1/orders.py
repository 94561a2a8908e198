"""
Orders API.

Endpoints:
- POST   /orders                 place an order (buyer)
- GET    /orders/mine            the caller's orders as buyer
- GET    /orders/supplier        orders received by the caller's supplier
- GET    /orders/supplier/stats  order counts and revenue of the caller's supplier
- GET    /orders/<id>            customer, supplier owner or admin
- PUT    /orders/<id>/status     supplier owner or admin
- DELETE /orders/<id>            admin, or supplier owner while pending
"""

from flask import Blueprint, jsonify, g

from naijafind.api.middleware import (
    jwt_required, user_required, supplier_required, current_supplier_or_none
)
from naijafind.api.schemas import parse_body, parse_args
from naijafind.api.schemas.orders import (
    OrderCreateRequest, OrderStatusUpdateRequest, OrderListQuery
)
from naijafind.services import order_service

bp = Blueprint('orders', __name__, url_prefix='/orders')


@bp.route('', methods=['POST'])
@jwt_required
@user_required
def create_order():
    data = parse_body(OrderCreateRequest)
    order = order_service.create_order(
        g.current_user,
        data.supplier_id,
        [item.model_dump() for item in data.items],
        data.shipping_address.model_dump(),
        data.notes
    )
    return jsonify({
        'success': True,
        'id': order.id,
        'order_number': order.order_number,
        'order': order.to_dict(),
    }), 201


@bp.route('/mine', methods=['GET'])
@jwt_required
@user_required
def list_my_orders():
    query = parse_args(OrderListQuery)
    orders = order_service.list_customer_orders(g.current_user, query.status, query.limit)
    return jsonify({'orders': orders}), 200


@bp.route('/supplier', methods=['GET'])
@jwt_required
@user_required
@supplier_required
def list_supplier_orders():
    query = parse_args(OrderListQuery)
    orders = order_service.list_supplier_orders(g.current_supplier, query.status, query.limit)
    return jsonify({'orders': orders}), 200


@bp.route('/supplier/stats', methods=['GET'])
@jwt_required
@user_required
@supplier_required
def supplier_stats():
    return jsonify(order_service.supplier_order_stats(g.current_supplier)), 200


@bp.route('/<int:order_id>', methods=['GET'])
@jwt_required
@user_required
def get_order(order_id):
    order = order_service.get_order(g.current_user, current_supplier_or_none(), order_id)
    return jsonify({'order': order}), 200


@bp.route('/<int:order_id>/status', methods=['PUT'])
@jwt_required
@user_required
def update_status(order_id):
    data = parse_body(OrderStatusUpdateRequest)
    order = order_service.update_order_status(
        g.current_user, current_supplier_or_none(), order_id,
        data.status, data.payment_status
    )
    return jsonify({'success': True, 'order': order.to_dict()}), 200


@bp.route('/<int:order_id>', methods=['DELETE'])
@jwt_required
@user_required
def delete_order(order_id):
    order_service.delete_order(g.current_user, current_supplier_or_none(), order_id)
    return jsonify({'success': True}), 200
