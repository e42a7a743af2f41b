"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns() -> list[sa.Column]:
    return [
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    # SEO pages
    op.create_table(
        'seo_pages',
        *_base_columns(),
        sa.Column('path', sa.String(2048), nullable=False, unique=True),
        sa.Column('title', sa.String(255), nullable=True),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('canonical_url', sa.String(2048), nullable=True),
        sa.Column('robots', sa.String(100), nullable=True),
        sa.Column('json_ld', postgresql.JSONB, nullable=True),
        sa.Column('changefreq', sa.String(20), nullable=True),
        sa.Column('priority', sa.Float, nullable=True),
    )
    op.create_index('ix_seo_pages_path', 'seo_pages', ['path'], unique=True)

    # Indexing log (append-only, also used for ping rate limiting)
    op.create_table(
        'seo_index_log',
        *_base_columns(),
        sa.Column('action', sa.String(50), nullable=False),
        sa.Column('target_url', sa.String(2048), nullable=True),
        sa.Column('status_code', sa.Integer, nullable=True),
        sa.Column('success', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('metadata', postgresql.JSONB, server_default='{}'),
    )
    op.create_index('ix_seo_index_log_action', 'seo_index_log', ['action'])
    op.create_index('ix_seo_index_log_action_created_at', 'seo_index_log', ['action', 'created_at'])

    # Admin content
    op.create_table(
        'admin_content',
        *_base_columns(),
        sa.Column('content_type', sa.String(50), nullable=False),
        sa.Column('title', sa.String(500), nullable=False),
        sa.Column('body', sa.Text, nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='draft'),
        sa.Column('is_published', sa.Boolean, nullable=False, server_default=sa.false()),
    )
    op.create_index('ix_admin_content_content_type', 'admin_content', ['content_type'])
    op.create_index('ix_admin_content_status', 'admin_content', ['status'])

    # App settings
    op.create_table(
        'app_settings',
        *_base_columns(),
        sa.Column('setting_key', sa.String(100), nullable=False, unique=True),
        sa.Column('setting_value', postgresql.JSONB, nullable=False, server_default='{}'),
    )
    op.create_index('ix_app_settings_setting_key', 'app_settings', ['setting_key'], unique=True)

    # Layout settings
    op.create_table(
        'admin_layout_settings',
        *_base_columns(),
        sa.Column('layout_key', sa.String(100), nullable=False),
        sa.Column('platform', sa.String(20), nullable=False, server_default='web'),
        sa.Column('order_index', sa.Integer, nullable=False, server_default='0'),
        sa.Column('section_key', sa.String(100), nullable=False),
        sa.Column('visible', sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column('size', sa.String(20), nullable=False, server_default='normal'),
        sa.Column('settings', postgresql.JSONB, server_default='{}'),
    )
    op.create_index('ix_admin_layout_settings_layout_key', 'admin_layout_settings', ['layout_key'])

    # Page builder sections
    op.create_table(
        'admin_page_sections',
        *_base_columns(),
        sa.Column('page', sa.String(100), nullable=False),
        sa.Column('section_key', sa.String(100), nullable=False),
        sa.Column('title', sa.String(255), nullable=False, server_default=''),
        sa.Column('position', sa.Integer, nullable=False, server_default='0'),
        sa.Column('visible', sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column('settings', postgresql.JSONB, server_default='{}'),
        sa.Column('platform', sa.String(10), nullable=False, server_default='all'),
    )
    op.create_index('ix_admin_page_sections_page', 'admin_page_sections', ['page'])

    # Ads
    op.create_table(
        'admin_ads',
        *_base_columns(),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('ad_type', sa.String(20), nullable=False, server_default='image'),
        sa.Column('ad_code', sa.Text, nullable=True),
        sa.Column('image_path', sa.String(2048), nullable=True),
        sa.Column('link_url', sa.String(2048), nullable=True),
        sa.Column('button_text', sa.String(100), nullable=True),
        sa.Column('placement', sa.String(100), nullable=True),
        sa.Column('target_platform', sa.String(10), nullable=False, server_default='all'),
        sa.Column('priority', sa.Integer, nullable=False, server_default='0'),
        sa.Column('start_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('end_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='draft'),
        sa.Column('show_after_n_items', sa.Integer, nullable=True),
        sa.Column('frequency_per_session', sa.Integer, nullable=True),
        sa.Column('max_daily_views', sa.Integer, nullable=True),
    )
    op.create_index('ix_admin_ads_placement', 'admin_ads', ['placement'])
    op.create_index('ix_admin_ads_status', 'admin_ads', ['status'])

    # Notifications
    op.create_table(
        'admin_notifications',
        *_base_columns(),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('body', sa.Text, nullable=True),
        sa.Column('target_platform', sa.String(20), nullable=False, server_default='all'),
        sa.Column('status', sa.String(20), nullable=False, server_default='draft'),
        sa.Column('scheduled_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('sent_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('sent_count', sa.Integer, nullable=False, server_default='0'),
        sa.Column('failed_count', sa.Integer, nullable=False, server_default='0'),
    )
    op.create_index('ix_admin_notifications_status', 'admin_notifications', ['status'])


def downgrade() -> None:
    # Drop tables in reverse order
    op.drop_table('admin_notifications')
    op.drop_table('admin_ads')
    op.drop_table('admin_page_sections')
    op.drop_table('admin_layout_settings')
    op.drop_table('app_settings')
    op.drop_table('admin_content')
    op.drop_table('seo_index_log')
    op.drop_table('seo_pages')
