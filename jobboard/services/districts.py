# jobboard/services/districts.py
from sqlalchemy import func
from sqlalchemy.orm import sessionmaker

from jobboard.db.data import REGIONS
from jobboard.db.database import storage_errors
from jobboard.db.models import District, Job


class DistrictDirectory:
    """ Read-only view over the seeded districts. """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def list_all(self) -> list[District]:
        with self.session_factory() as session, storage_errors("listing districts"):
            return session.query(District).order_by(District.name).all()

    def job_counts_by_district(self) -> list[tuple[str, int]]:
        """
        Every district with the number of jobs whose district text equals its name.

        Districts without jobs report 0. Order among equal counts is whatever the
        database returns.
        """
        job_count = func.count(Job.id)
        with self.session_factory() as session, storage_errors("counting jobs by district"):
            rows = (
                session.query(District.name, job_count)
                .outerjoin(Job, Job.district == District.name)
                .group_by(District.name)
                .order_by(job_count.desc())
                .all()
            )
        return [(name, count) for name, count in rows]

    @staticmethod
    def regions() -> list[str]:
        return list(REGIONS)
