"""Database helpers for connecting to SQLite and preparing the roster tables."""

import logging
import time
from typing import Optional

from sqlalchemy import create_engine, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker

from hospital_roster.config.settings import settings
from hospital_roster.database.schema import HOSPITAL_INFO_ID, Admin, Base, HospitalInfo

logger = logging.getLogger(__name__)


def get_engine(database_url: Optional[str] = None) -> Engine:
    """Create and return a SQLAlchemy engine instance."""
    url = database_url or settings.database_url
    connect_args = {}
    if url.startswith("sqlite"):
        # one engine is shared by the request threadpool
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=False, connect_args=connect_args)


def get_session_factory(engine: Engine) -> sessionmaker:
    """Return a session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_tables(engine: Engine) -> None:
    """Create every table that does not exist yet. Errors propagate."""
    for table in Base.metadata.sorted_tables:
        try:
            table.create(engine, checkfirst=True)
        except Exception as e:
            logger.error(f"Failed to create table {table.name}: {e}")
            raise
        logger.info(f"✓ Table {table.name} ready")


def seed_defaults(engine: Engine) -> None:
    """Insert the default admin and hospital info when they are missing."""
    session = get_session_factory(engine)()
    try:
        admin_count = session.scalar(select(func.count()).select_from(Admin))
        if admin_count == 0:
            session.add(Admin(
                username=settings.admin_username,
                password=settings.admin_password_hash,
            ))
            session.commit()
            logger.info(f"✓ Default admin '{settings.admin_username}' created")

        if session.get(HospitalInfo, HOSPITAL_INFO_ID) is None:
            session.add(HospitalInfo(
                id=HOSPITAL_INFO_ID,
                name=settings.hospital_name,
                introduction=settings.hospital_introduction,
                address=settings.hospital_address,
                phone=settings.hospital_phone,
                emergency_phone=settings.hospital_emergency_phone,
            ))
            session.commit()
            logger.info("✓ Default hospital info created")
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_database(engine: Engine) -> None:
    """
    Prepare the database on startup.

    Table creation failures abort. A failing seed step is retried every
    ``settings.seed_retry_delay`` seconds, up to ``settings.seed_max_attempts``
    attempts (0 keeps retrying).
    """
    init_tables(engine)

    attempt = 0
    while True:
        attempt += 1
        try:
            seed_defaults(engine)
            break
        except OperationalError as e:
            if settings.seed_max_attempts and attempt >= settings.seed_max_attempts:
                logger.error(f"Seeding default data failed after {attempt} attempts: {e}")
                raise
            logger.warning(
                f"Seeding default data failed (attempt {attempt}): {e}; "
                f"retrying in {settings.seed_retry_delay}s"
            )
            time.sleep(settings.seed_retry_delay)

    logger.info("✓ Database initialized")

