"""
Order service - order placement, status changes and stock bookkeeping.

Stock is deducted when an order is placed and given back exactly once:
on cancellation, or on deletion of an order that was not cancelled.
A cancelled order is final.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..extensions import db
from ..models import (
    Order, OrderItem, OrderStatus, PaymentStatus, Product, Supplier, User,
    generate_order_number
)
from . import notification_service
from .errors import InvalidRequestError, NotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)


def _parse_status(value: str) -> OrderStatus:
    try:
        return OrderStatus(value)
    except ValueError:
        raise InvalidRequestError(f'Statut de commande invalide: {value}')


def _parse_payment_status(value: str) -> PaymentStatus:
    try:
        return PaymentStatus(value)
    except ValueError:
        raise InvalidRequestError(f'Statut de paiement invalide: {value}')


def _restore_stock(order: Order):
    for item in order.items:
        if item.product_id is None:
            continue
        product = db.session.get(Product, item.product_id)
        if product:
            product.stock += item.quantity


def _get_or_404(order_id: int) -> Order:
    order = db.session.get(Order, order_id)
    if not order:
        raise NotFoundError('Commande introuvable')
    return order


def _owns(supplier: Optional[Supplier], order: Order) -> bool:
    return supplier is not None and order.supplier_id == supplier.id


# ============== Placement ==============

def create_order(customer: User, supplier_id: int, items: list,
                 shipping_address: dict, notes: Optional[str] = None) -> Order:
    """
    Places an order.

    Every item is checked before anything is written: the product must
    exist, belong to the supplier and have enough stock. Prices come from
    the product record.

    Args:
        items: [{'product_id': int, 'quantity': int, 'image_url': str?}]
    """
    supplier = db.session.get(Supplier, supplier_id)
    if not supplier:
        raise NotFoundError('Fournisseur introuvable')
    if not items:
        raise InvalidRequestError('La commande doit contenir au moins un article')

    requested = {}
    products = {}
    for item in items:
        product = db.session.get(Product, item['product_id'])
        if not product:
            raise NotFoundError(f"Produit {item['product_id']} introuvable")
        if product.supplier_id != supplier.id:
            raise InvalidRequestError(
                f"Le produit {product.name} n'appartient pas à ce fournisseur"
            )
        products[product.id] = product
        requested[product.id] = requested.get(product.id, 0) + item['quantity']

    # lines for the same product share its stock
    for product_id, quantity in requested.items():
        product = products[product_id]
        if product.stock < quantity:
            raise InvalidRequestError(
                f'Stock insuffisant pour {product.name}. '
                f'Disponible: {product.stock}, Demandé: {quantity}'
            )
    checked = [(products[item['product_id']], item) for item in items]

    order = Order(
        order_number=generate_order_number(),
        supplier_id=supplier.id,
        customer_id=customer.id,
        status=OrderStatus.PENDING,
        payment_status=PaymentStatus.PENDING,
        shipping_address=shipping_address,
        notes=notes
    )

    total = Decimal('0')
    for product, item in checked:
        quantity = item['quantity']
        unit_price = Decimal(str(product.price))
        line_total = unit_price * quantity
        total += line_total
        order.items.append(OrderItem(
            product_id=product.id,
            product_name=product.name,
            quantity=quantity,
            unit_price=unit_price,
            total_price=line_total,
            image_url=item.get('image_url')
        ))
        product.stock -= quantity

    order.total_amount = total
    db.session.add(order)
    db.session.flush()

    customer_name = customer.full_name or customer.email
    notification_service.notify_new_order(supplier.user_id, order, customer_name)
    db.session.commit()

    logger.info('Order %s created: supplier=%s customer=%s total=%s',
                order.order_number, supplier.id, customer.id, total)
    return order


# ============== Status changes ==============

def update_order_status(user: User, supplier: Optional[Supplier], order_id: int,
                        status: str, payment_status: Optional[str] = None) -> Order:
    """
    Supplier owner or admin. Cancelling gives the stock back; a cancelled
    order cannot be reopened.
    """
    order = _get_or_404(order_id)
    if not (_owns(supplier, order) or user.is_platform_admin):
        raise PermissionDeniedError()

    new_status = _parse_status(status)
    new_payment_status = _parse_payment_status(payment_status) if payment_status else None

    if order.status == OrderStatus.CANCELLED and new_status != OrderStatus.CANCELLED:
        raise InvalidRequestError('Une commande annulée ne peut pas être réouverte')

    if new_status == OrderStatus.CANCELLED and order.status != OrderStatus.CANCELLED:
        _restore_stock(order)

    order.status = new_status
    if new_payment_status:
        order.payment_status = new_payment_status
    db.session.commit()

    logger.info('Order %s -> %s', order.order_number, new_status.value)
    return order


def delete_order(user: User, supplier: Optional[Supplier], order_id: int):
    """Admins always; the supplier owner only while the order is pending."""
    order = _get_or_404(order_id)
    allowed = user.is_platform_admin or (
        _owns(supplier, order) and order.status == OrderStatus.PENDING
    )
    if not allowed:
        raise PermissionDeniedError(
            'Accès refusé - Seuls les admins ou le fournisseur pour les commandes '
            'en attente peuvent supprimer'
        )

    if order.status != OrderStatus.CANCELLED:
        _restore_stock(order)

    db.session.delete(order)
    db.session.commit()
    logger.info('Order %s deleted', order.order_number)


# ============== Queries ==============

def get_order(user: User, supplier: Optional[Supplier], order_id: int) -> dict:
    """Customer, supplier owner or admin."""
    order = _get_or_404(order_id)
    allowed = (
        order.customer_id == user.id
        or _owns(supplier, order)
        or user.is_platform_admin
    )
    if not allowed:
        raise PermissionDeniedError()

    data = order.to_dict()
    data.update({
        'supplier_name': order.supplier.business_name if order.supplier else 'Fournisseur inconnu',
        'supplier_phone': order.supplier.phone if order.supplier else None,
        'supplier_email': order.supplier.email if order.supplier else None,
        'supplier_address': order.supplier.address if order.supplier else None,
    })
    return data


def _filtered(query, status: Optional[str], limit: Optional[int]):
    if status:
        query = query.filter(Order.status == _parse_status(status))
    query = query.order_by(Order.created_at.desc(), Order.id.desc())
    if limit:
        query = query.limit(limit)
    return query.all()


def _supplier_info(order: Order) -> dict:
    return {
        'supplier_name': order.supplier.business_name if order.supplier else 'Fournisseur inconnu',
        'supplier_logo': order.supplier.logo_url if order.supplier else None,
    }


def list_supplier_orders(supplier: Supplier, status: Optional[str] = None,
                         limit: Optional[int] = None):
    orders = _filtered(Order.query.filter_by(supplier_id=supplier.id), status, limit)
    return [o.to_dict() for o in orders]


def list_customer_orders(customer: User, status: Optional[str] = None,
                         limit: Optional[int] = None):
    orders = _filtered(Order.query.filter_by(customer_id=customer.id), status, limit)
    result = []
    for order in orders:
        data = order.to_dict()
        data.update(_supplier_info(order))
        result.append(data)
    return result


def list_all_orders(status: Optional[str] = None, supplier_id: Optional[int] = None,
                    limit: Optional[int] = None):
    """Admin view with supplier and customer info."""
    query = Order.query
    if supplier_id:
        query = query.filter_by(supplier_id=supplier_id)
    result = []
    for order in _filtered(query, status, limit):
        data = order.to_dict()
        data.update(_supplier_info(order))
        customer = order.customer
        data['customer_name'] = (
            (customer.full_name or customer.email) if customer else 'Client inconnu'
        )
        data['customer_email'] = customer.email if customer else None
        result.append(data)
    return result


def _stats(orders) -> dict:
    now = datetime.utcnow()
    counted = [o for o in orders if o.status != OrderStatus.CANCELLED]
    stats = {'total': len(orders)}
    for status in OrderStatus:
        stats[status.value] = sum(1 for o in orders if o.status == status)
    stats['monthlyRevenue'] = float(sum(
        (o.total_amount for o in counted
         if o.created_at.year == now.year and o.created_at.month == now.month),
        Decimal('0')
    ))
    stats['totalRevenue'] = float(sum((o.total_amount for o in counted), Decimal('0')))
    return stats


def supplier_order_stats(supplier: Supplier) -> dict:
    return _stats(Order.query.filter_by(supplier_id=supplier.id).all())


def admin_order_stats() -> dict:
    return _stats(Order.query.all())
