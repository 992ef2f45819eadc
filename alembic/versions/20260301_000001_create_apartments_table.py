"""Create apartments table

Revision ID: 20260301_000001
Revises: None
Create Date: 2026-03-01

Single table behind the apartments listing API, with soft delete via the
lifecycle column.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20260301_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the apartments table and its indexes."""
    op.create_table(
        'apartments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('unit_name', sa.String(255), nullable=False),
        sa.Column('unit_number', sa.String(100), nullable=False),
        sa.Column('project', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(300), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('bedrooms', sa.Integer(), nullable=False),
        sa.Column('bathrooms', sa.Integer(), nullable=False),
        sa.Column('area', sa.Numeric(precision=8, scale=2), nullable=False),
        sa.Column('security_deposit', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('images', sa.JSON(), nullable=True),
        sa.Column('amenities', sa.JSON(), nullable=True),
        sa.Column('apartment_type', sa.String(50), nullable=True),
        sa.Column('furnishing', sa.String(50), nullable=True),
        sa.Column('pet_friendly', sa.Boolean(), nullable=True),
        sa.Column('contact_phone', sa.String(20), nullable=True),
        sa.Column('contact_email', sa.String(255), nullable=True),
        sa.Column('available_from', sa.Date(), nullable=True),
        sa.Column('lease_duration', sa.Integer(), nullable=True),
        sa.Column('is_available', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('is_featured', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('view_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column(
            'lifecycle',
            sa.Enum('ACTIVE', 'DELETED', name='apartment_lifecycle', create_constraint=True),
            nullable=False,
            server_default='ACTIVE'
        ),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    # Create indexes for common queries
    op.create_index('ix_apartments_unit_name', 'apartments', ['unit_name'])
    op.create_index('ix_apartments_slug', 'apartments', ['slug'])
    op.create_index('ix_apartments_is_featured', 'apartments', ['is_featured'])
    op.create_index('ix_apartments_lifecycle', 'apartments', ['lifecycle'])
    op.create_index('ix_apartments_project_is_available', 'apartments', ['project', 'is_available'])
    op.create_index(
        'ix_apartments_price_bedrooms_is_available', 'apartments',
        ['price', 'bedrooms', 'is_available']
    )
    op.create_index(
        'ux_apartments_unit_number_active', 'apartments', ['unit_number'],
        unique=True,
        mssql_where=sa.text("lifecycle = 'ACTIVE'"),
        postgresql_where=sa.text("lifecycle = 'ACTIVE'"),
        sqlite_where=sa.text("lifecycle = 'ACTIVE'"),
    )


def downgrade() -> None:
    """Drop the apartments table."""
    op.drop_index('ux_apartments_unit_number_active', table_name='apartments')
    op.drop_index('ix_apartments_price_bedrooms_is_available', table_name='apartments')
    op.drop_index('ix_apartments_project_is_available', table_name='apartments')
    op.drop_index('ix_apartments_lifecycle', table_name='apartments')
    op.drop_index('ix_apartments_is_featured', table_name='apartments')
    op.drop_index('ix_apartments_slug', table_name='apartments')
    op.drop_index('ix_apartments_unit_name', table_name='apartments')
    op.drop_table('apartments')
