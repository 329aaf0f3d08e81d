# jobboard/db/database.py
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from jobboard.db.data import districts_data, users_data, jobs_data
from jobboard.db.models import Base, District, User, Job
from jobboard.errors import StorageError
from jobboard.utils import hash_password, utcnow, JOB_LIFETIME

log = logging.getLogger(__name__)


def make_engine(db_url: str, echo: bool = False) -> Engine:
    """Creates the engine; SQLite connections are shared with FastAPI's worker threads."""
    connect_args = {}
    if db_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(db_url, echo=echo, connect_args=connect_args)  # Set echo=True for debugging SQL


def make_session_factory(engine: Engine) -> sessionmaker:
    # Results outlive their session, so attributes must not expire on commit
    return sessionmaker(bind=engine, expire_on_commit=False)


@contextmanager
def storage_errors(action: str):
    """Re-raises unexpected SQLAlchemy failures as an opaque StorageError."""
    try:
        yield
    except SQLAlchemyError as e:
        log.error(f"Storage failure while {action}: {e}", exc_info=True)
        raise StorageError(f"A storage error occurred while {action}.") from e


def prepare_database(engine: Engine, session_factory: sessionmaker, seed_samples: bool = False):
    # Create tables if they don't exist. If they exist, this does nothing.
    Base.metadata.create_all(engine)

    with session_factory() as session:
        existing = set(session.scalars(select(District.name)))
        missing = [d for d in districts_data if d["name"] not in existing]
        for district in missing:
            session.add(District(**district))
        if missing:
            log.info(f"Seeded {len(missing)} districts.")

        if seed_samples and session.query(User).count() == 0:
            _seed_samples(session)
        session.commit()
    log.info("Database tables ensured.")


def _seed_samples(session):
    now = utcnow()
    users_by_email = {}
    for data in users_data:
        user = User(
            email=data["email"],
            password_hash=hash_password(data["password"]),
            name=data["name"],
            role=data["role"],
            district=data["district"],
            skills=",".join(data["skills"]),
            created_at=now,
        )
        session.add(user)
        users_by_email[user.email] = user
    session.flush()

    for data in jobs_data:
        fields = {k: v for k, v in data.items() if k != "employer_email"}
        employer = users_by_email[data["employer_email"]]
        session.add(Job(**fields, employer_id=employer.id, created_at=now, expires_at=now + JOB_LIFETIME))
    log.info(f"Seeded {len(users_data)} sample users and {len(jobs_data)} sample jobs.")
