"""create profiles, quotes and orders tables

Revision ID: 3c1f2a9b7d10
Revises:
Create Date: 2026-10-19 10:12:41.318204

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3c1f2a9b7d10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # 用户资料表（买家/供应商/管理员）
    op.create_table('profiles',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('role', sa.Enum('buyer', 'supplier', 'admin', name='roleenum'), nullable=False),
        sa.Column('is_verified', sa.Boolean(), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('company_name', sa.String(length=255), nullable=True),
        sa.Column('specialization', sa.JSON(), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('capacity', sa.Integer(), nullable=True),
        sa.Column('rating', sa.Float(), nullable=True),
        sa.Column('average_response_time', sa.Float(), nullable=True),
        sa.Column('price_competitiveness', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_profiles_id', 'profiles', ['id'])
    op.create_index('ix_profiles_role', 'profiles', ['role'])
    op.create_index('ix_profiles_email', 'profiles', ['email'], unique=True)

    # 报价请求表
    op.create_table('quotes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('buyer_id', sa.Integer(), nullable=True),
        sa.Column('product_type', sa.String(length=255), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('target_price', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('specifications', sa.JSON(), nullable=True),
        sa.Column('status', sa.String(length=32), nullable=False),
        sa.Column('supplier_id', sa.Integer(), nullable=True),
        sa.Column('assigned_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['buyer_id'], ['profiles.id'], ),
        sa.ForeignKeyConstraint(['supplier_id'], ['profiles.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_quotes_id', 'quotes', ['id'])
    op.create_index('ix_quotes_buyer_id', 'quotes', ['buyer_id'])
    op.create_index('ix_quotes_supplier_id', 'quotes', ['supplier_id'])
    op.create_index('ix_quotes_created_at', 'quotes', ['created_at'])

    # 订单表
    op.create_table('orders',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('supplier_id', sa.Integer(), nullable=True),
        sa.Column('buyer_id', sa.Integer(), nullable=True),
        sa.Column('quote_id', sa.Integer(), nullable=True),
        sa.Column('status', sa.String(length=32), nullable=False),
        sa.Column('total_amount', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['supplier_id'], ['profiles.id'], ),
        sa.ForeignKeyConstraint(['buyer_id'], ['profiles.id'], ),
        sa.ForeignKeyConstraint(['quote_id'], ['quotes.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_orders_id', 'orders', ['id'])
    op.create_index('ix_orders_supplier_id', 'orders', ['supplier_id'])


def downgrade():
    op.drop_table('orders')
    op.drop_table('quotes')
    op.drop_table('profiles')
