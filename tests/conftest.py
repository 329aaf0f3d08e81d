"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timedelta

import pytest

from jobboard.board import JobBoard
from jobboard.db.database import make_engine, make_session_factory, prepare_database
from jobboard.services.catalog import JobCatalog, JobInput
from jobboard.services.credentials import CredentialStore
from jobboard.services.districts import DistrictDirectory
from jobboard.services.ledger import ApplicationLedger
from jobboard.services.sessions import SessionIssuer

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


class FakeClock:
    """Returns a strictly increasing naive UTC timestamp on every call."""

    def __init__(self, start=datetime(2025, 1, 1, 9, 0, 0), step=timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self):
        self.current += self.step
        return self.current


@pytest.fixture
def engine(tmp_path):
    """File-backed SQLite so several threads can share it."""
    engine = make_engine(f"sqlite:///{tmp_path / 'jobboard.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    factory = make_session_factory(engine)
    prepare_database(engine, factory)
    return factory


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def credentials(session_factory, clock):
    return CredentialStore(session_factory, clock=clock)


@pytest.fixture
def issuer():
    return SessionIssuer(TEST_SECRET)


@pytest.fixture
def catalog(session_factory, clock):
    return JobCatalog(session_factory, clock=clock)


@pytest.fixture
def ledger(session_factory, clock):
    return ApplicationLedger(session_factory, clock=clock)


@pytest.fixture
def districts(session_factory):
    return DistrictDirectory(session_factory)


@pytest.fixture
def board(credentials, issuer, catalog, ledger, districts):
    return JobBoard(credentials, issuer, catalog, ledger, districts)


@pytest.fixture
def employer(board):
    """A registered employer with a valid token."""
    return board.register("hr@techsl.com", "employer-pass", "Tech Sierra Leone", "employer",
                          "Western Area Urban (Freetown)")


@pytest.fixture
def seeker(board):
    """A registered job seeker with a valid token."""
    return board.register("aminata@slmail.com", "seeker-pass", "Aminata Kamara", "jobseeker", "Bo",
                          "076123456", ["Nursing", "Communication"])


def make_job_input(**overrides) -> JobInput:
    fields = {
        "title": "Junior Software Developer",
        "company": "Tech Sierra Leone",
        "location": "Freetown",
        "district": "Western Area Urban (Freetown)",
        "type": "Full-time",
        "experience": "Entry Level",
        "salary": "SLL 800,000 - 1,200,000",
        "category": "technology",
        "description": "Build web applications with our growing team.",
        "requirements": "Knowledge of JavaScript, HTML, CSS",
    }
    fields.update(overrides)
    return JobInput(**fields)


@pytest.fixture
def job_input():
    return make_job_input
