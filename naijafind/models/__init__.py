"""
SQLAlchemy models for NaijaFind.

Everything is re-exported here so callers can import from naijafind.models.
"""

from .user import User, UserType
from .supplier import Supplier, DEFAULT_BUSINESS_HOURS
from .product import Product, ProductStatus
from .order import Order, OrderItem, OrderStatus, PaymentStatus, generate_order_number
from .review import Review, ReviewStatus
from .category import Category, DEFAULT_CATEGORIES
from .notification import Notification, NotificationType
from .verification import (
    VerificationDocument, DocumentType, DocumentStatus,
    REQUIRED_DOCUMENT_TYPES, DOCUMENT_TYPE_LABELS
)
from .rate_limit import RateLimitAttempt
from .contact import (
    ContactMessage, SupplierMessage, NewsletterSubscription,
    ContactType, MessageStatus, SubscriptionStatus
)

__all__ = [
    'User', 'UserType',
    'Supplier', 'DEFAULT_BUSINESS_HOURS',
    'Product', 'ProductStatus',
    'Order', 'OrderItem', 'OrderStatus', 'PaymentStatus', 'generate_order_number',
    'Review', 'ReviewStatus',
    'Category', 'DEFAULT_CATEGORIES',
    'Notification', 'NotificationType',
    'VerificationDocument', 'DocumentType', 'DocumentStatus',
    'REQUIRED_DOCUMENT_TYPES', 'DOCUMENT_TYPE_LABELS',
    'RateLimitAttempt',
    'ContactMessage', 'SupplierMessage', 'NewsletterSubscription',
    'ContactType', 'MessageStatus', 'SubscriptionStatus',
]
