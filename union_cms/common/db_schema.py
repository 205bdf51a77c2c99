"""
Relational table definitions for the website backend.
Tables are declared with SQLAlchemy Core so the same schema can be created on SQLite or MySQL.
Unique constraints here back the duplicate checks performed by the services.
"""

from __future__ import annotations

import sqlalchemy as sa

metadata = sa.MetaData()

admins = sa.Table(
    "admins",
    metadata,
    sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
    sa.Column("username", sa.String(length=150), nullable=False),
    sa.Column("password", sa.String(length=255), nullable=False),
    sa.Column("created_at", sa.DateTime(), server_default=sa.func.current_timestamp()),
    sa.UniqueConstraint("username", name="uq_admins_username"),
)

news = sa.Table(
    "news",
    metadata,
    sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
    sa.Column("title", sa.String(length=500), nullable=False),
    sa.Column("content", sa.Text(), nullable=False),
    sa.Column("category", sa.String(length=32), nullable=False, server_default="news"),
    sa.Column("image_url", sa.String(length=500), nullable=True),
    sa.Column("location", sa.String(length=255), nullable=True),
    sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.text("1")),
    sa.Column("created_at", sa.DateTime(), server_default=sa.func.current_timestamp()),
    sa.Column("updated_at", sa.DateTime(), server_default=sa.func.current_timestamp()),
)

messages = sa.Table(
    "messages",
    metadata,
    sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
    sa.Column("name", sa.String(length=255), nullable=False),
    sa.Column("email", sa.String(length=255), nullable=False),
    sa.Column("phone", sa.String(length=64), nullable=True),
    sa.Column("subject", sa.String(length=500), nullable=False),
    sa.Column("message", sa.Text(), nullable=False),
    sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.text("0")),
    sa.Column("created_at", sa.DateTime(), server_default=sa.func.current_timestamp()),
)

page_content = sa.Table(
    "page_content",
    metadata,
    sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
    sa.Column("page_name", sa.String(length=100), nullable=False),
    sa.Column("section_id", sa.String(length=150), nullable=False),
    sa.Column("section_title", sa.String(length=255), nullable=True),
    sa.Column("content", sa.Text(), nullable=False),
    sa.Column("content_type", sa.String(length=16), nullable=False, server_default="text"),
    sa.Column("display_order", sa.Integer(), nullable=False, server_default=sa.text("0")),
    sa.Column("updated_at", sa.DateTime(), server_default=sa.func.current_timestamp()),
    sa.UniqueConstraint("page_name", "section_id", name="uq_page_content_page_section"),
)

memberships = sa.Table(
    "memberships",
    metadata,
    sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
    sa.Column("full_name", sa.String(length=255), nullable=False),
    sa.Column("email", sa.String(length=255), nullable=False),
    sa.Column("phone", sa.String(length=64), nullable=False),
    sa.Column("university", sa.String(length=255), nullable=False),
    sa.Column("major", sa.String(length=255), nullable=False),
    sa.Column("academic_level", sa.String(length=100), nullable=False),
    sa.Column("wilaya", sa.String(length=100), nullable=False),
    sa.Column("status", sa.String(length=16), nullable=False, server_default="pending"),
    sa.Column("created_at", sa.DateTime(), server_default=sa.func.current_timestamp()),
    sa.UniqueConstraint("email", name="uq_memberships_email"),
)

hero_slides = sa.Table(
    "hero_slides",
    metadata,
    sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
    sa.Column("title", sa.String(length=255), nullable=True),
    sa.Column("subtitle", sa.String(length=500), nullable=True),
    sa.Column("image_url", sa.String(length=500), nullable=False),
    sa.Column("link_url", sa.String(length=500), nullable=True),
    sa.Column("link_text", sa.String(length=255), nullable=True),
    sa.Column("display_order", sa.Integer(), nullable=False, server_default=sa.text("0")),
    sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("1")),
    sa.Column("created_at", sa.DateTime(), server_default=sa.func.current_timestamp()),
)

specialties = sa.Table(
    "specialties",
    metadata,
    sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
    sa.Column("name", sa.String(length=255), nullable=False),
    sa.Column("name_ar", sa.String(length=255), nullable=False),
    sa.Column("icon", sa.String(length=64), nullable=True),
    sa.Column("description", sa.Text(), nullable=True),
    sa.Column("image_url", sa.String(length=500), nullable=True),
    sa.Column("video_url", sa.String(length=500), nullable=True),
    sa.Column("video_type", sa.String(length=16), nullable=False, server_default="youtube"),
    sa.Column("items", sa.Text(), nullable=True),
    sa.Column("duration", sa.String(length=100), nullable=True),
    sa.Column("display_order", sa.Integer(), nullable=False, server_default=sa.text("0")),
    sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("1")),
    sa.Column("created_at", sa.DateTime(), server_default=sa.func.current_timestamp()),
    sa.Column("updated_at", sa.DateTime(), server_default=sa.func.current_timestamp()),
)

CORE_TABLE_NAMES: tuple[str, ...] = tuple(metadata.tables)
