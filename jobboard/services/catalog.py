# jobboard/services/catalog.py
import logging
from dataclasses import dataclass, fields
from typing import Callable, Optional

from sqlalchemy import or_
from sqlalchemy.orm import sessionmaker

from jobboard.db.database import storage_errors
from jobboard.db.models import Job
from jobboard.errors import InvalidInput, NotFound
from jobboard.utils import utcnow, JOB_LIFETIME

log = logging.getLogger(__name__)

REQUIRED_JOB_FIELDS = ("title", "company", "location", "district", "type", "category", "description")


@dataclass
class JobInput:
    title: str = ""
    company: str = ""
    location: str = ""
    district: str = ""
    type: str = ""
    category: str = ""
    description: str = ""
    experience: Optional[str] = None
    salary: Optional[str] = None
    requirements: Optional[str] = None
    is_remote: bool = False
    is_green_job: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "JobInput":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def missing_fields(self) -> list[str]:
        return [name for name in REQUIRED_JOB_FIELDS
                if not getattr(self, name) or not str(getattr(self, name)).strip()]


@dataclass
class JobFilters:
    """
    Optional predicates for a job search. Every filter that is set must hold.

    ``search`` is a case-insensitive substring matched against title, description
    or company (any one is enough). ``remote`` and ``green`` only narrow the result
    when they are exactly True.
    """
    category: Optional[str] = None
    district: Optional[str] = None
    experience: Optional[str] = None
    search: Optional[str] = None
    remote: Optional[bool] = None
    green: Optional[bool] = None

    def predicates(self) -> list:
        clauses = []
        if self.category:
            clauses.append(Job.category == self.category)
        if self.district:
            clauses.append(Job.district == self.district)
        if self.experience:
            clauses.append(Job.experience == self.experience)
        if self.search:
            pattern = f"%{_escape_like(self.search)}%"
            clauses.append(or_(
                Job.title.ilike(pattern, escape="\\"),
                Job.description.ilike(pattern, escape="\\"),
                Job.company.ilike(pattern, escape="\\"),
            ))
        if self.remote is True:
            clauses.append(Job.is_remote.is_(True))
        if self.green is True:
            clauses.append(Job.is_green_job.is_(True))
        return clauses


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class JobCatalog:
    """ Stores job postings and answers filtered listings. """

    def __init__(self, session_factory: sessionmaker, clock: Callable = utcnow):
        self.session_factory = session_factory
        self.clock = clock

    def create(self, job_input: JobInput, employer_id: int) -> int:
        missing = job_input.missing_fields()
        if missing:
            log.warning(f"Job rejected for employer {employer_id}: missing {missing}")
            raise InvalidInput(f"Required fields are missing: {', '.join(missing)}")

        created_at = self.clock()
        job = Job(
            title=job_input.title,
            company=job_input.company,
            location=job_input.location,
            district=job_input.district,
            type=job_input.type,
            experience=job_input.experience,
            salary=job_input.salary,
            category=job_input.category,
            description=job_input.description,
            requirements=job_input.requirements,
            is_remote=bool(job_input.is_remote),
            is_green_job=bool(job_input.is_green_job),
            employer_id=employer_id,
            created_at=created_at,
            expires_at=created_at + JOB_LIFETIME,
        )
        with self.session_factory() as session, storage_errors("creating a job"):
            session.add(job)
            session.commit()
        log.info(f"Job added: ID={job.id}, Title={job.title}, Employer={employer_id}")
        return job.id

    def get_by_id(self, job_id: int) -> Job:
        with self.session_factory() as session, storage_errors("loading a job"):
            job = session.query(Job).filter(Job.id == job_id).first()
        if not job:
            raise NotFound("Job not found")
        return job

    def search(self, filters: JobFilters | None = None) -> list[Job]:
        filters = filters or JobFilters()
        with self.session_factory() as session, storage_errors("searching jobs"):
            query = session.query(Job).filter(*filters.predicates())
            return query.order_by(Job.created_at.desc(), Job.id.desc()).all()
