from sqlalchemy import (
    Column, Integer, String, Text, Boolean, DateTime, ForeignKey, UniqueConstraint
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()

ROLES = ("admin", "employer", "jobseeker")


class District(Base):
    __tablename__ = "districts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, unique=True, nullable=False)
    region = Column(String)
    coordinates = Column(String)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Uniqueness is the only guard against concurrent registrations
    email = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False)
    name = Column(String, nullable=False)
    role = Column(String, nullable=False)
    district = Column(String)
    phone = Column(String)
    skills = Column(Text)  # comma separated
    education = Column(Text)
    experience = Column(Text)
    created_at = Column(DateTime)

    jobs = relationship("Job", back_populates="employer", lazy="select")
    applications = relationship("Application", back_populates="user", lazy="select")

    @property
    def skill_list(self) -> list[str]:
        if not self.skills:
            return []
        return [skill.strip() for skill in self.skills.split(",") if skill.strip()]


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    company = Column(String, nullable=False)
    location = Column(String, nullable=False)
    # Free text matched against District.name, not a foreign key
    district = Column(String, nullable=False)
    type = Column(String, nullable=False)
    experience = Column(String)
    salary = Column(String)
    category = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    requirements = Column(Text)
    is_remote = Column(Boolean, nullable=False, default=False)
    is_green_job = Column(Boolean, nullable=False, default=False)
    employer_id = Column(Integer, ForeignKey("users.id"))
    created_at = Column(DateTime, nullable=False)
    expires_at = Column(DateTime)

    employer = relationship("User", back_populates="jobs", lazy="selectin")
    applications = relationship("Application", back_populates="job", lazy="select")

    @property
    def employer_name(self):
        return self.employer.name if self.employer else None

    @property
    def employer_email(self):
        return self.employer.email if self.employer else None


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_id", "user_id", name="uq_application_job_user"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    job_id = Column(Integer, ForeignKey("jobs.id"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    status = Column(String, nullable=False, default="pending")
    cover_letter = Column(Text, default="")
    created_at = Column(DateTime, nullable=False)

    user = relationship("User", back_populates="applications", lazy="select")
    job = relationship("Job", back_populates="applications", lazy="selectin")
