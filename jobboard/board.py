# jobboard/board.py
import logging
from dataclasses import dataclass

from sqlalchemy.orm import sessionmaker

from jobboard.db.models import User, Job, Application, District
from jobboard.errors import InvalidInput
from jobboard.services import policy
from jobboard.services.catalog import JobCatalog, JobFilters, JobInput
from jobboard.services.credentials import CredentialStore
from jobboard.services.districts import DistrictDirectory
from jobboard.services.ledger import ApplicationLedger
from jobboard.services.sessions import SessionIssuer, Claims

log = logging.getLogger(__name__)


@dataclass
class AuthResult:
    token: str
    user: User


class JobBoard:
    """
    The operations offered to the REST and GraphQL layers.

    Every write that needs an identity takes the raw bearer token, verifies it,
    applies the access policy and only then touches storage.
    """

    def __init__(self, credentials: CredentialStore, sessions: SessionIssuer, catalog: JobCatalog,
                 ledger: ApplicationLedger, districts: DistrictDirectory):
        self.credentials = credentials
        self.sessions = sessions
        self.catalog = catalog
        self.ledger = ledger
        self.districts = districts

    @classmethod
    def from_session_factory(cls, session_factory: sessionmaker, secret_key: str, algorithm: str = "HS256"):
        return cls(
            credentials=CredentialStore(session_factory),
            sessions=SessionIssuer(secret_key, algorithm),
            catalog=JobCatalog(session_factory),
            ledger=ApplicationLedger(session_factory),
            districts=DistrictDirectory(session_factory),
        )

    # --- Public reads ---
    def list_districts(self) -> list[District]:
        return self.districts.list_all()

    def district_job_counts(self) -> list[tuple[str, int]]:
        return self.districts.job_counts_by_district()

    def regions(self) -> list[str]:
        return self.districts.regions()

    def search_jobs(self, filters: JobFilters | None = None) -> list[Job]:
        return self.catalog.search(filters)

    def get_job(self, job_id: int) -> Job:
        return self.catalog.get_by_id(job_id)

    # --- Accounts ---
    def register(self, email, password, name, role, district=None, phone=None, skills=None) -> AuthResult:
        user = self.credentials.register(email, password, name, role, district, phone, skills)
        return AuthResult(token=self.sessions.issue(user.id, user.email, user.role), user=user)

    def login(self, email, password) -> AuthResult:
        user = self.credentials.verify_credentials(email, password)
        return AuthResult(token=self.sessions.issue(user.id, user.email, user.role), user=user)

    def authenticate(self, token: str | None) -> Claims:
        return self.sessions.verify(token)

    # --- Authenticated writes ---
    def post_job(self, token: str | None, job_input: JobInput) -> int:
        claims = self.sessions.verify(token)
        policy.require_can_post_job(claims.role)
        return self.catalog.create(job_input, claims.user_id)

    def apply_to_job(self, token: str | None, job_id: int | None, cover_letter: str | None = None) -> int:
        claims = self.sessions.verify(token)
        policy.require_can_apply(claims.role)
        if job_id is None:
            raise InvalidInput("Job ID is required")
        return self.ledger.apply(job_id, claims.user_id, cover_letter)

    def current_user(self, token: str | None) -> User:
        claims = self.sessions.verify(token)
        return self.credentials.get_user(claims.user_id)

    def my_applications(self, token: str | None) -> list[Application]:
        claims = self.sessions.verify(token)
        return self.ledger.list_for_user(claims.user_id)
