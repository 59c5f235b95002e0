from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from metabox.config import settings
import logging

logger = logging.getLogger(__name__)

DATABASE_URL = settings.database_url

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# Environment-based configurations
if settings.environment == "production" and not DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        DATABASE_URL,
        pool_size=20,
        max_overflow=50,
        pool_timeout=60,
        pool_recycle=1800,
    )
else:
    engine = create_engine(
        DATABASE_URL,
        echo=settings.debug,  # Enable query logging in debug mode
        connect_args=connect_args,
    )

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False,
)

Base = declarative_base()


def init_db(bind=None) -> None:
    """Create the metadata tables if they do not exist."""
    # models must be imported so their tables are on Base.metadata
    from metabox.models import ItemMeta, SiteOption  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Metadata tables created (if not existing).")
