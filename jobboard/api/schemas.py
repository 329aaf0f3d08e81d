# jobboard/api/schemas.py
from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, AliasChoices


class DistrictOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    region: Optional[str] = None
    coordinates: Optional[str] = None


class DistrictJobCountOut(BaseModel):
    name: str
    job_count: int


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    role: str
    district: Optional[str] = None
    # ORM users expose the parsed list as skill_list; "skills" there is the raw text
    skills: list[str] = Field(default_factory=list, validation_alias=AliasChoices("skill_list", "skills"))


class AuthOut(BaseModel):
    message: str
    token: str
    user: UserOut


class JobOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    company: str
    location: str
    district: str
    type: str
    experience: Optional[str] = None
    salary: Optional[str] = None
    category: str
    description: str
    requirements: Optional[str] = None
    is_remote: bool
    is_green_job: bool
    employer_id: Optional[int] = None
    employer_name: Optional[str] = None
    employer_email: Optional[str] = None
    created_at: datetime
    expires_at: Optional[datetime] = None


class ApplicationOut(BaseModel):
    id: int
    job_id: int
    user_id: int
    status: str
    cover_letter: Optional[str] = None
    created_at: datetime
    title: str
    company: str
    location: str
    district: str

    @classmethod
    def from_application(cls, application) -> "ApplicationOut":
        job = application.job
        return cls(
            id=application.id,
            job_id=application.job_id,
            user_id=application.user_id,
            status=application.status,
            cover_letter=application.cover_letter,
            created_at=application.created_at,
            title=job.title,
            company=job.company,
            location=job.location,
            district=job.district,
        )


class RegisterIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    # The original web client sends "userType"
    role: Optional[str] = Field(default=None, validation_alias=AliasChoices("role", "userType"))
    district: Optional[str] = None
    phone: Optional[str] = None
    skills: Union[list[str], str, None] = None


class LoginIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class JobIn(BaseModel):
    # Required fields are checked by the catalog so every caller gets the same error
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


class ApplicationIn(BaseModel):
    job_id: Optional[int] = Field(default=None, validation_alias=AliasChoices("job_id", "jobId"))
    cover_letter: Optional[str] = Field(default=None, validation_alias=AliasChoices("cover_letter", "coverLetter"))
