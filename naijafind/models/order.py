"""
Order model - buyer orders placed with a single supplier.

Order items snapshot the product name and price at order time so later
product edits do not rewrite order history.
"""

import enum
import random
import string
import time
from datetime import datetime
from ..extensions import db


class OrderStatus(enum.Enum):
    """Fulfilment status."""
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    PROCESSING = 'processing'
    SHIPPED = 'shipped'
    DELIVERED = 'delivered'
    CANCELLED = 'cancelled'


class PaymentStatus(enum.Enum):
    PENDING = 'pending'
    PAID = 'paid'
    FAILED = 'failed'
    REFUNDED = 'refunded'


class Order(db.Model):
    """
    Order from a customer to a supplier.

    shipping_address - {full_name, phone, address, city, state, country, postal_code}
    """
    __tablename__ = 'order'

    id = db.Column(db.Integer, primary_key=True)
    order_number = db.Column(db.String(40), unique=True, nullable=False, index=True)

    supplier_id = db.Column(
        db.Integer,
        db.ForeignKey('supplier.id', ondelete='SET NULL'),
        index=True
    )
    customer_id = db.Column(
        db.Integer,
        db.ForeignKey('user.id', ondelete='SET NULL'),
        index=True
    )

    total_amount = db.Column(db.Numeric(12, 2), default=0, nullable=False)
    status = db.Column(db.Enum(OrderStatus), default=OrderStatus.PENDING, nullable=False, index=True)
    payment_status = db.Column(db.Enum(PaymentStatus), default=PaymentStatus.PENDING, nullable=False)

    shipping_address = db.Column(db.JSON, default=dict)
    notes = db.Column(db.Text)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(
        db.DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False
    )

    # Relations
    items = db.relationship(
        'OrderItem',
        backref='order',
        cascade='all, delete-orphan',
        order_by='OrderItem.id'
    )
    supplier = db.relationship('Supplier', foreign_keys=[supplier_id])
    customer = db.relationship('User', foreign_keys=[customer_id])

    def __repr__(self):
        return f'<Order {self.order_number}: {self.status.value}>'

    def to_dict(self, include_items=True):
        data = {
            'id': self.id,
            'order_number': self.order_number,
            'supplier_id': self.supplier_id,
            'customer_id': self.customer_id,
            'total_amount': float(self.total_amount or 0),
            'status': self.status.value,
            'payment_status': self.payment_status.value,
            'shipping_address': self.shipping_address or {},
            'notes': self.notes,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
        if include_items:
            data['items'] = [item.to_dict() for item in self.items]
        return data


class OrderItem(db.Model):
    __tablename__ = 'order_item'

    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(
        db.Integer,
        db.ForeignKey('order.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    product_id = db.Column(
        db.Integer,
        db.ForeignKey('product.id', ondelete='SET NULL'),
        index=True
    )

    # Snapshot at order time
    product_name = db.Column(db.String(200), nullable=False)
    quantity = db.Column(db.Integer, nullable=False)
    unit_price = db.Column(db.Numeric(12, 2), nullable=False)
    total_price = db.Column(db.Numeric(12, 2), nullable=False)
    image_url = db.Column(db.String(500))

    def __repr__(self):
        return f'<OrderItem {self.id}: {self.product_name} x{self.quantity}>'

    def to_dict(self):
        return {
            'id': self.id,
            'product_id': self.product_id,
            'product_name': self.product_name,
            'quantity': self.quantity,
            'unit_price': float(self.unit_price),
            'total_price': float(self.total_price),
            'image_url': self.image_url,
        }


def _to_base36(number):
    digits = string.digits + string.ascii_uppercase
    if number == 0:
        return '0'
    result = ''
    while number:
        number, rem = divmod(number, 36)
        result = digits[rem] + result
    return result


def generate_order_number():
    """Order number: ORD-<base36 epoch ms>-<4 random chars>, e.g. ORD-LZ3K9Q1A-X7P2"""
    timestamp = _to_base36(int(time.time() * 1000))
    suffix = ''.join(random.choices(string.ascii_uppercase + string.digits, k=4))
    return f'ORD-{timestamp}-{suffix}'
