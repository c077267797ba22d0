"""create_services_and_booked_services

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 10:00:00.000000

서비스(services) 및 예약(booked_services) 테이블 생성.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # services: 제공자가 등록한 서비스
    op.create_table(
        'services',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('provider_email', sa.String(255), nullable=True),
        sa.Column('provider_name', sa.String(255), nullable=True),
        sa.Column('provider_image', sa.String(1000), nullable=True),
        sa.Column('service_name', sa.String(255), nullable=False),
        sa.Column('image_url', sa.String(1000), nullable=True),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('service_area', sa.String(255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_services_provider_email', 'services', ['provider_email'])

    # booked_services: 예약 스냅샷
    op.create_table(
        'booked_services',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('service_id', sa.Uuid(), nullable=True),
        sa.Column('user_email', sa.String(255), nullable=False),
        sa.Column('user_name', sa.String(255), nullable=True),
        sa.Column('provider_email', sa.String(255), nullable=False),
        sa.Column('provider_name', sa.String(255), nullable=True),
        sa.Column('service_name', sa.String(255), nullable=False),
        sa.Column('image_url', sa.String(1000), nullable=True),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('service_date', sa.Date(), nullable=True),
        sa.Column('special_instruction', sa.Text(), nullable=True),
        sa.Column('service_status', sa.String(50), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_booked_services_user_email', 'booked_services', ['user_email'])
    op.create_index('ix_booked_services_provider_email', 'booked_services', ['provider_email'])


def downgrade() -> None:
    op.drop_index('ix_booked_services_provider_email', table_name='booked_services')
    op.drop_index('ix_booked_services_user_email', table_name='booked_services')
    op.drop_table('booked_services')
    op.drop_index('ix_services_provider_email', table_name='services')
    op.drop_table('services')
