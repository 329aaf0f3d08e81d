# jobboard/services/ledger.py
import logging
from typing import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from jobboard.db.database import storage_errors
from jobboard.db.models import Application, Job
from jobboard.errors import NotFound, DuplicateApplication, StorageError
from jobboard.utils import utcnow

log = logging.getLogger(__name__)


class ApplicationLedger:
    """ Records applications; a seeker can apply to a given job only once. """

    def __init__(self, session_factory: sessionmaker, clock: Callable = utcnow):
        self.session_factory = session_factory
        self.clock = clock

    def apply(self, job_id: int, seeker_id: int, cover_letter: str | None = None) -> int:
        with self.session_factory() as session, storage_errors("submitting an application"):
            if session.query(Job.id).filter(Job.id == job_id).first() is None:
                log.warning(f"Application failed: Job {job_id} not found.")
                raise NotFound(f"Job with ID {job_id} not found.")

            application = Application(
                job_id=job_id,
                user_id=seeker_id,
                status="pending",
                cover_letter=cover_letter or "",
                created_at=self.clock(),
            )
            session.add(application)
            try:
                session.commit()
            except IntegrityError as e:
                session.rollback()
                # (job_id, user_id) is unique, so a concurrent duplicate loses here
                if self._exists(session, job_id, seeker_id):
                    log.warning(f"User {seeker_id} already applied to job {job_id}.")
                    raise DuplicateApplication()
                log.error(f"Integrity error applying user {seeker_id} to job {job_id}: {e}", exc_info=True)
                raise StorageError("Could not submit the application due to a data conflict.") from e
        log.info(f"User {seeker_id} successfully applied to job {job_id}. App ID: {application.id}")
        return application.id

    @staticmethod
    def _exists(session, job_id, seeker_id) -> bool:
        return session.query(Application.id).filter(
            Application.job_id == job_id, Application.user_id == seeker_id
        ).first() is not None

    def list_for_user(self, seeker_id: int) -> list[Application]:
        """Applications newest first, each with its job loaded for the summary fields."""
        with self.session_factory() as session, storage_errors("listing applications"):
            return (
                session.query(Application)
                .join(Job, Application.job_id == Job.id)
                .filter(Application.user_id == seeker_id)
                .order_by(Application.created_at.desc(), Application.id.desc())
                .all()
            )
