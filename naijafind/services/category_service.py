"""
Category service - supplier categories and their seed data.
"""

import logging
from typing import Optional

from sqlalchemy import func

from ..extensions import db
from ..models import Category, Supplier, DEFAULT_CATEGORIES
from .errors import ConflictError, InvalidRequestError, NotFoundError

logger = logging.getLogger(__name__)

DUPLICATE_NAME = 'Une catégorie avec ce nom existe déjà'


def _sort_key(category: Category):
    # Ordered categories first (ascending), then the rest by name
    if category.order is not None:
        return (0, category.order, category.name)
    return (1, 0, category.name)


def list_active_categories():
    categories = Category.query.filter_by(is_active=True).all()
    return sorted(categories, key=_sort_key)


def list_all_categories():
    """Admin view, inactive categories included."""
    return sorted(Category.query.all(), key=_sort_key)


def add_category(name: str, description: Optional[str] = None, icon: Optional[str] = None,
                 image: Optional[str] = None, is_active: bool = True,
                 order: Optional[int] = None, created_by: Optional[int] = None) -> Category:
    if Category.query.filter_by(name=name).first():
        raise ConflictError(DUPLICATE_NAME)

    category = Category(
        name=name,
        description=description,
        icon=icon,
        image=image,
        is_active=is_active if is_active is not None else True,
        order=order,
        created_by=created_by
    )
    db.session.add(category)
    db.session.commit()
    logger.info('Category created: %s', name)
    return category


def update_category(category_id: int, data: dict) -> Category:
    """Partial update; renaming to a taken name is refused."""
    category = db.session.get(Category, category_id)
    if not category:
        raise NotFoundError('Catégorie non trouvée')

    new_name = data.get('name')
    if new_name and new_name != category.name:
        if Category.query.filter_by(name=new_name).first():
            raise ConflictError(DUPLICATE_NAME)

    for field in ('name', 'description', 'icon', 'image', 'is_active', 'order'):
        if field in data and data[field] is not None:
            setattr(category, field, data[field])

    db.session.commit()
    return category


def delete_category(category_id: int):
    """Refused while a supplier still uses the category name."""
    category = db.session.get(Category, category_id)
    if not category:
        raise NotFoundError('Catégorie non trouvée')

    in_use = Supplier.query.filter_by(category=category.name).first()
    if in_use:
        raise ConflictError(
            "Impossible de supprimer cette catégorie : des fournisseurs l'utilisent encore"
        )

    db.session.delete(category)
    db.session.commit()
    logger.info('Category deleted: %s', category.name)


def seed_categories(categories: Optional[list] = None, created_by: Optional[int] = None) -> dict:
    """
    Creates the given categories (default list when None), skipping names
    that already exist.

    Returns:
        {'success': True, 'created': [names], 'skipped': [names], 'message': str}
    """
    if categories is None:
        categories = DEFAULT_CATEGORIES

    existing_names = {name for (name,) in db.session.query(Category.name).all()}
    created = []
    skipped = []

    for item in categories:
        name = (item.get('name') or '').strip()
        if not name:
            raise InvalidRequestError('Chaque catégorie doit avoir un nom')
        if name in existing_names:
            skipped.append(name)
            continue

        db.session.add(Category(
            name=name,
            description=item.get('description'),
            icon=item.get('icon'),
            image=item.get('image'),
            is_active=item.get('is_active', True),
            order=item.get('order'),
            created_by=created_by
        ))
        existing_names.add(name)
        created.append(name)

    db.session.commit()
    message = f'{len(created)} catégories créées, {len(skipped)} déjà existantes'
    logger.info(message)
    return {'success': True, 'created': created, 'skipped': skipped, 'message': message}


def supplier_counts() -> dict:
    """{category name: number of suppliers}"""
    rows = db.session.query(
        Supplier.category, func.count(Supplier.id)
    ).group_by(Supplier.category).all()
    return {name: count for name, count in rows if name}
