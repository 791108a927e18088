"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'accounts',
        sa.Column('account_id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(100), nullable=False, unique=True),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('full_name', sa.String(255)),
        sa.Column('status', sa.Integer(), nullable=False),
        sa.Column('role_id', sa.String(20), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP()),
    )
    op.create_index('ix_accounts_account_id', 'accounts', ['account_id'])

    op.create_table(
        'categories',
        sa.Column('category_id', sa.String(50), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False, unique=True),
        sa.Column('description', sa.Text()),
        sa.Column('created_at', sa.TIMESTAMP()),
    )
    op.create_index('ix_categories_category_id', 'categories', ['category_id'])

    op.create_table(
        'images',
        sa.Column('image_id', sa.String(32), primary_key=True),
        sa.Column('filename', sa.String(255)),
        sa.Column('content_type', sa.String(100), nullable=False),
        sa.Column('size', sa.Integer(), nullable=False),
        sa.Column('data', sa.LargeBinary(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP()),
    )

    op.create_table(
        'products',
        sa.Column('product_id', sa.String(50), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False, unique=True),
        sa.Column('category_id', sa.String(50), sa.ForeignKey('categories.category_id'), nullable=False),
        sa.Column('thumbnail', sa.String(32), sa.ForeignKey('images.image_id', ondelete='SET NULL')),
        sa.Column('description', sa.Text()),
        sa.Column('sold', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('status', sa.Integer(), nullable=False),
        sa.Column('featured', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP()),
        sa.Column('updated_at', sa.TIMESTAMP()),
    )
    op.create_index('ix_products_product_id', 'products', ['product_id'])

    op.create_table(
        'price_details',
        sa.Column('price_detail_id', sa.Integer(), primary_key=True),
        sa.Column('admin_id', sa.Integer(), sa.ForeignKey('accounts.account_id')),
        sa.Column('product_id', sa.String(50), sa.ForeignKey('products.product_id'), nullable=False),
        sa.Column('new_price', sa.DECIMAL(12, 2), nullable=False),
        sa.Column('applied_at', sa.TIMESTAMP(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP()),
    )
    op.create_index('ix_price_details_price_detail_id', 'price_details', ['price_detail_id'])
    op.create_index('ix_price_details_product_id', 'price_details', ['product_id'])
    op.create_index('ix_price_details_applied_at', 'price_details', ['applied_at'])

    op.create_table(
        'orders',
        sa.Column('order_id', sa.Integer(), primary_key=True),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(20), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('note', sa.Text()),
        sa.Column('status', sa.Integer(), nullable=False),
        sa.Column('total', sa.DECIMAL(12, 2), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP()),
    )
    op.create_index('ix_orders_order_id', 'orders', ['order_id'])

    op.create_table(
        'order_details',
        sa.Column('order_detail_id', sa.Integer(), primary_key=True),
        sa.Column('order_id', sa.Integer(), sa.ForeignKey('orders.order_id', ondelete='CASCADE'), nullable=False),
        sa.Column('product_id', sa.String(50), sa.ForeignKey('products.product_id'), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('price', sa.DECIMAL(12, 2), nullable=False),
    )
    op.create_index('ix_order_details_order_detail_id', 'order_details', ['order_detail_id'])
    op.create_index('ix_order_details_order_id', 'order_details', ['order_id'])
    op.create_index('ix_order_details_product_id', 'order_details', ['product_id'])

    op.create_table(
        'notifications',
        sa.Column('notification_id', sa.Integer(), primary_key=True),
        sa.Column('order_id', sa.Integer(), sa.ForeignKey('orders.order_id', ondelete='CASCADE'), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP()),
    )
    op.create_index('ix_notifications_notification_id', 'notifications', ['notification_id'])

    op.create_table(
        'notification_details',
        sa.Column('notification_detail_id', sa.Integer(), primary_key=True),
        sa.Column('notification_id', sa.Integer(),
                  sa.ForeignKey('notifications.notification_id', ondelete='CASCADE'), nullable=False),
        sa.Column('account_id', sa.Integer(), sa.ForeignKey('accounts.account_id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', sa.Boolean(), nullable=False),
    )
    op.create_index('ix_notification_details_notification_detail_id', 'notification_details', ['notification_detail_id'])
    op.create_index('ix_notification_details_account_id', 'notification_details', ['account_id'])


def downgrade():
    op.drop_table('notification_details')
    op.drop_table('notifications')
    op.drop_table('order_details')
    op.drop_table('orders')
    op.drop_table('price_details')
    op.drop_table('products')
    op.drop_table('images')
    op.drop_table('categories')
    op.drop_table('accounts')
