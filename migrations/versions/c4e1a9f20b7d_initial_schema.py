"""Initial schema

Revision ID: c4e1a9f20b7d
Revises:
Create Date: 2026-10-19

- user, supplier, product, order, order_item, review
- category, notification, verification_document
- rate_limit_attempt, contact_message, supplier_message, newsletter_subscription
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = 'c4e1a9f20b7d'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # 1. Users
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('auth_subject', sa.String(255), nullable=True),
        sa.Column('phone', sa.String(30), nullable=True),
        sa.Column('first_name', sa.String(100), nullable=True),
        sa.Column('last_name', sa.String(100), nullable=True),
        sa.Column('user_type', sa.Enum('USER', 'SUPPLIER', 'ADMIN', name='usertype'), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_user_email', 'user', ['email'], unique=True)
    op.create_index('ix_user_auth_subject', 'user', ['auth_subject'], unique=True)
    op.create_index('ix_user_phone', 'user', ['phone'])

    # 2. Suppliers
    op.create_table(
        'supplier',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('user.id', ondelete='CASCADE'), nullable=False),
        sa.Column('business_name', sa.String(200), nullable=False),
        sa.Column('slug', sa.String(220), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(30), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('website', sa.String(255), nullable=True),
        sa.Column('address', sa.String(300), nullable=True),
        sa.Column('city', sa.String(100), nullable=False),
        sa.Column('state', sa.String(100), nullable=False),
        sa.Column('country', sa.String(100), nullable=True),
        sa.Column('location', sa.String(220), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('rating', sa.Float(), nullable=False, server_default='0'),
        sa.Column('reviews_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('approved', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('featured', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('logo_url', sa.String(500), nullable=True),
        sa.Column('cover_image_url', sa.String(500), nullable=True),
        sa.Column('image', sa.String(500), nullable=True),
        sa.Column('image_gallery', sa.JSON(), nullable=True),
        sa.Column('business_hours', sa.JSON(), nullable=True),
        sa.Column('social_links', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_supplier_user_id', 'supplier', ['user_id'])
    op.create_index('ix_supplier_slug', 'supplier', ['slug'], unique=True)
    op.create_index('ix_supplier_category', 'supplier', ['category'])
    op.create_index('ix_supplier_approved', 'supplier', ['approved'])
    op.create_index('ix_supplier_featured', 'supplier', ['featured'])

    # 3. Products
    op.create_table(
        'product',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('supplier_id', sa.Integer(), sa.ForeignKey('supplier.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        sa.Column('stock', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('status', sa.Enum('ACTIVE', 'INACTIVE', 'OUT_OF_STOCK', name='productstatus'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_product_supplier_id', 'product', ['supplier_id'])

    # 4. Orders
    op.create_table(
        'order',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('order_number', sa.String(40), nullable=False),
        sa.Column('supplier_id', sa.Integer(), sa.ForeignKey('supplier.id', ondelete='SET NULL'), nullable=True),
        sa.Column('customer_id', sa.Integer(), sa.ForeignKey('user.id', ondelete='SET NULL'), nullable=True),
        sa.Column('total_amount', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('status', sa.Enum(
            'PENDING', 'CONFIRMED', 'PROCESSING', 'SHIPPED', 'DELIVERED', 'CANCELLED',
            name='orderstatus'
        ), nullable=False),
        sa.Column('payment_status', sa.Enum(
            'PENDING', 'PAID', 'FAILED', 'REFUNDED', name='paymentstatus'
        ), nullable=False),
        sa.Column('shipping_address', sa.JSON(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_order_order_number', 'order', ['order_number'], unique=True)
    op.create_index('ix_order_supplier_id', 'order', ['supplier_id'])
    op.create_index('ix_order_customer_id', 'order', ['customer_id'])
    op.create_index('ix_order_status', 'order', ['status'])
    op.create_index('ix_order_created_at', 'order', ['created_at'])

    op.create_table(
        'order_item',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('order_id', sa.Integer(), sa.ForeignKey('order.id', ondelete='CASCADE'), nullable=False),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('product.id', ondelete='SET NULL'), nullable=True),
        sa.Column('product_name', sa.String(200), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('unit_price', sa.Numeric(12, 2), nullable=False),
        sa.Column('total_price', sa.Numeric(12, 2), nullable=False),
        sa.Column('image_url', sa.String(500), nullable=True),
    )
    op.create_index('ix_order_item_order_id', 'order_item', ['order_id'])
    op.create_index('ix_order_item_product_id', 'order_item', ['product_id'])

    # 5. Reviews
    op.create_table(
        'review',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('supplier_id', sa.Integer(), sa.ForeignKey('supplier.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('user.id', ondelete='CASCADE'), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('comment', sa.Text(), nullable=True),
        sa.Column('response', sa.Text(), nullable=True),
        sa.Column('status', sa.Enum('PUBLISHED', 'HIDDEN', 'DELETED', name='reviewstatus'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('rating >= 1 AND rating <= 5', name='check_review_rating_range'),
        sa.UniqueConstraint('supplier_id', 'user_id', name='uq_review_per_user'),
    )
    op.create_index('ix_review_supplier_id', 'review', ['supplier_id'])
    op.create_index('ix_review_user_id', 'review', ['user_id'])

    # 6. Categories
    op.create_table(
        'category',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('icon', sa.String(100), nullable=True),
        sa.Column('image', sa.String(500), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('order', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('created_by', sa.Integer(), sa.ForeignKey('user.id', ondelete='SET NULL'), nullable=True),
    )
    op.create_index('ix_category_name', 'category', ['name'], unique=True)

    # 7. Notifications
    op.create_table(
        'notification',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('user.id', ondelete='CASCADE'), nullable=False),
        sa.Column('type', sa.Enum(
            'ORDER', 'REVIEW', 'MESSAGE', 'SYSTEM', 'APPROVAL', 'VERIFICATION',
            name='notificationtype'
        ), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('data', sa.JSON(), nullable=True),
        sa.Column('read', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('action_url', sa.String(500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_notification_user_id', 'notification', ['user_id'])
    op.create_index('ix_notification_read', 'notification', ['read'])
    op.create_index('ix_notification_created_at', 'notification', ['created_at'])

    # 8. Verification documents
    op.create_table(
        'verification_document',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('supplier_id', sa.Integer(), sa.ForeignKey('supplier.id', ondelete='CASCADE'), nullable=False),
        sa.Column('document_type', sa.Enum(
            'BUSINESS_REGISTRATION', 'TAX_CERTIFICATE', 'ID_CARD', 'PROOF_OF_ADDRESS',
            name='documenttype'
        ), nullable=False),
        sa.Column('document_url', sa.String(500), nullable=False),
        sa.Column('document_name', sa.String(255), nullable=True),
        sa.Column('status', sa.Enum('PENDING', 'APPROVED', 'REJECTED', name='documentstatus'), nullable=False),
        sa.Column('rejection_reason', sa.Text(), nullable=True),
        sa.Column('uploaded_at', sa.DateTime(), nullable=False),
        sa.Column('reviewed_at', sa.DateTime(), nullable=True),
        sa.Column('reviewed_by', sa.Integer(), sa.ForeignKey('user.id', ondelete='SET NULL'), nullable=True),
        sa.UniqueConstraint('supplier_id', 'document_type', name='uq_verification_document_type'),
    )
    op.create_index('ix_verification_document_supplier_id', 'verification_document', ['supplier_id'])
    op.create_index('ix_verification_document_status', 'verification_document', ['status'])

    # 9. Rate limiting
    op.create_table(
        'rate_limit_attempt',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('identifier', sa.String(255), nullable=False),
        sa.Column('action', sa.String(50), nullable=False),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_rate_limit_identifier_action', 'rate_limit_attempt', ['identifier', 'action'])
    op.create_index('ix_rate_limit_attempt_timestamp', 'rate_limit_attempt', ['timestamp'])

    # 10. Contact, supplier messages, newsletter
    op.create_table(
        'contact_message',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('subject', sa.String(200), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('type', sa.Enum(
            'GENERAL', 'SUPPLIER', 'TECHNICAL', 'PARTNERSHIP', 'FEEDBACK', name='contacttype'
        ), nullable=False),
        sa.Column('status', sa.Enum('UNREAD', 'READ', name='messagestatus'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )

    op.create_table(
        'supplier_message',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('supplier_id', sa.Integer(), sa.ForeignKey('supplier.id', ondelete='CASCADE'), nullable=False),
        sa.Column('sender_name', sa.String(100), nullable=False),
        sa.Column('sender_email', sa.String(255), nullable=False),
        sa.Column('sender_phone', sa.String(30), nullable=True),
        sa.Column('subject', sa.String(200), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('status', postgresql.ENUM('UNREAD', 'READ', name='messagestatus', create_type=False), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_supplier_message_supplier_id', 'supplier_message', ['supplier_id'])

    op.create_table(
        'newsletter_subscription',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('name', sa.String(100), nullable=True),
        sa.Column('sector', sa.String(100), nullable=True),
        sa.Column('status', sa.Enum('ACTIVE', 'UNSUBSCRIBED', name='subscriptionstatus'), nullable=False),
        sa.Column('subscribed_at', sa.DateTime(), nullable=False),
        sa.Column('unsubscribed_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_newsletter_subscription_email', 'newsletter_subscription', ['email'], unique=True)


def downgrade():
    op.drop_table('newsletter_subscription')
    op.drop_table('supplier_message')
    op.drop_table('contact_message')
    op.drop_table('rate_limit_attempt')
    op.drop_table('verification_document')
    op.drop_table('notification')
    op.drop_table('category')
    op.drop_table('review')
    op.drop_table('order_item')
    op.drop_table('order')
    op.drop_table('product')
    op.drop_table('supplier')
    op.drop_table('user')

    # Postgres keeps enum types after drop_table
    bind = op.get_bind()
    for enum_name in ('usertype', 'productstatus', 'orderstatus', 'paymentstatus', 'reviewstatus',
                      'notificationtype', 'documenttype', 'documentstatus', 'contacttype',
                      'messagestatus', 'subscriptionstatus'):
        sa.Enum(name=enum_name).drop(bind, checkfirst=True)
