"""Alembic environment configuration."""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from portfolio_cms.config import settings

# Import all models so Alembic can detect them
from portfolio_cms.database.base import Base
from portfolio_cms.certifications.models import Certification  # noqa: F401
from portfolio_cms.contact.models import Contact  # noqa: F401
from portfolio_cms.education.models import Education  # noqa: F401
from portfolio_cms.profile.models import Profile  # noqa: F401
from portfolio_cms.projects.models import Project  # noqa: F401
from portfolio_cms.technologies.models import Technology  # noqa: F401
from portfolio_cms.testimonials.models import Testimonial  # noqa: F401
from portfolio_cms.work_experience.models import WorkExperience  # noqa: F401

config = context.config
if not config.get_main_option("sqlalchemy.url"):
    config.set_main_option("sqlalchemy.url", settings.effective_database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(url=url, target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
