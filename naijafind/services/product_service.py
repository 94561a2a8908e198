"""
Product service - supplier catalogue.
"""

import logging
from typing import Optional

from ..extensions import db
from ..models import Product, ProductStatus, Supplier
from .errors import InvalidRequestError, NotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)


def _parse_status(value: Optional[str]) -> ProductStatus:
    try:
        return ProductStatus(value or ProductStatus.ACTIVE.value)
    except ValueError:
        raise InvalidRequestError(f'Statut de produit invalide: {value}')


def list_products(supplier: Supplier):
    return supplier.products.order_by(Product.id).all()


def list_all_products():
    """Admin view."""
    return Product.query.order_by(Product.id).all()


def create_product(supplier: Supplier, name: str, price, stock: int,
                   status: Optional[str] = None) -> Product:
    product = Product(
        supplier_id=supplier.id,
        name=name,
        price=price,
        stock=stock,
        status=_parse_status(status)
    )
    db.session.add(product)
    db.session.commit()
    logger.info('Product %s created for supplier %s', product.id, supplier.id)
    return product


def _get_owned(supplier: Optional[Supplier], product_id: int) -> Product:
    product = db.session.get(Product, product_id)
    if not product:
        raise NotFoundError('Produit introuvable')
    if supplier is None or product.supplier_id != supplier.id:
        raise PermissionDeniedError()
    return product


def update_product(supplier: Optional[Supplier], product_id: int, data: dict) -> Product:
    """Partial update, fields left out keep their value."""
    product = _get_owned(supplier, product_id)

    if data.get('name') is not None:
        product.name = data['name']
    if data.get('price') is not None:
        product.price = data['price']
    if data.get('stock') is not None:
        product.stock = data['stock']
    if data.get('status') is not None:
        product.status = _parse_status(data['status'])

    db.session.commit()
    return product


def delete_product(supplier: Optional[Supplier], product_id: int):
    product = _get_owned(supplier, product_id)
    db.session.delete(product)
    db.session.commit()
    logger.info('Product %s deleted', product_id)
