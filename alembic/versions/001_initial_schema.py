"""Initial schema: one table per portfolio collection.

Revision ID: 001
Revises: None
Create Date: 2026-10-17
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

PROFILE_STATUSES = (
    "Seeking New Career Opportunities",
    "Open to Work",
    "Freelancing",
    "Employed",
    "Available for Collaboration",
    "Working on Personal Projects",
    "Interning",
    "Exploring New Technologies",
    "Unavailable",
    "Remote Only",
    "Contract-Based Work Only",
)

TECHNOLOGY_CATEGORIES = (
    "Frontend",
    "Backend",
    "Mobile Development",
    "AI & Machine Learning",
    "Data Science",
    "DevOps",
    "Database",
    "IoT",
    "UI/UX Design",
    "Scientific Computing",
    "Programming Languages",
)


def _document_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "profiles",
        *_document_columns(),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("tagline", sa.String(500), nullable=False),
        sa.Column("introduction", sa.Text(), nullable=False),
        sa.Column("key_skills", sa.JSON(), nullable=True),
        sa.Column(
            "status",
            sa.Enum(*PROFILE_STATUSES, name="profile_status"),
            nullable=False,
            server_default="Open to Work",
        ),
        sa.Column("years_of_experience", sa.Integer(), server_default="1"),
        sa.Column("image", sa.String(1000), server_default=""),
        sa.Column("cv", sa.String(1000), server_default=""),
    )

    op.create_table(
        "work_experiences",
        *_document_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("company", sa.String(255), nullable=False),
        sa.Column("company_logo", sa.String(1000), server_default=""),
        sa.Column("location", sa.String(255), server_default=""),
        sa.Column("period", sa.String(100), server_default=""),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("responsibilities", sa.JSON(), nullable=True),
        sa.Column("technologies", sa.JSON(), nullable=True),
    )

    op.create_table(
        "education",
        *_document_columns(),
        sa.Column("degree", sa.String(255), nullable=False),
        sa.Column("institution", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255), server_default=""),
        sa.Column("period", sa.String(100), server_default=""),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("courses", sa.JSON(), nullable=True),
        sa.Column("options", sa.Text(), nullable=True),
    )

    op.create_table(
        "certifications",
        *_document_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("provider", sa.String(255), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("certificate_url", sa.String(1000), nullable=False),
        sa.Column("details", sa.Text(), nullable=True),
    )

    op.create_table(
        "technologies",
        *_document_columns(),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("category", sa.Enum(*TECHNOLOGY_CATEGORIES, name="technology_category"), nullable=False),
        sa.Column("icon", sa.String(1000), nullable=True, unique=True),
    )

    op.create_table(
        "testimonials",
        *_document_columns(),
        sa.Column("quote", sa.Text(), nullable=False),
        sa.Column("author_name", sa.String(255), nullable=False),
        sa.Column("author_position", sa.String(255), nullable=False),
        sa.Column("author_image", sa.String(1000), server_default=""),
    )

    op.create_table(
        "projects",
        *_document_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("domain", sa.String(255), nullable=False),
        sa.Column("thumbnail", sa.String(1000), server_default=""),
        sa.Column("images", sa.JSON(), nullable=True),
        sa.Column("icon_lists", sa.JSON(), nullable=True),
        sa.Column("live_url", sa.String(1000), server_default=""),
        sa.Column("github_url", sa.String(1000), server_default=""),
        sa.Column("key_features", sa.JSON(), nullable=True),
    )

    op.create_table(
        "contact",
        *_document_columns(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=False),
        sa.Column("social_links", sa.JSON(), nullable=True),
    )


def downgrade() -> None:
    for table in (
        "contact",
        "projects",
        "testimonials",
        "technologies",
        "certifications",
        "education",
        "work_experiences",
        "profiles",
    ):
        op.drop_table(table)
    sa.Enum(name="technology_category").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="profile_status").drop(op.get_bind(), checkfirst=True)
