# jobboard/api/routes.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Header, Request, status
from fastapi.responses import JSONResponse

from jobboard.api.schemas import (
    DistrictOut, DistrictJobCountOut, JobOut, AuthOut, UserOut, ApplicationOut,
    RegisterIn, LoginIn, JobIn, ApplicationIn,
)
from jobboard.board import JobBoard, AuthResult
from jobboard.errors import (
    JobBoardError, InvalidInput, Conflict, AuthError, Forbidden, NotFound,
    DuplicateApplication, InvalidToken, StorageError,
)
from jobboard.services.catalog import JobFilters, JobInput
from jobboard.utils import token_from_header

log = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    InvalidInput: status.HTTP_400_BAD_REQUEST,
    AuthError: status.HTTP_401_UNAUTHORIZED,
    InvalidToken: status.HTTP_401_UNAUTHORIZED,
    Forbidden: status.HTTP_403_FORBIDDEN,
    NotFound: status.HTTP_404_NOT_FOUND,
    Conflict: status.HTTP_409_CONFLICT,
    DuplicateApplication: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

router = APIRouter(prefix="/api")


def get_board(request: Request) -> JobBoard:
    return request.app.state.board


def get_token(authorization: Optional[str] = Header(default=None)) -> Optional[str]:
    return token_from_header(authorization)


def install_error_handlers(app: FastAPI):
    @app.exception_handler(JobBoardError)
    async def job_board_error_handler(request: Request, exc: JobBoardError):
        status_code = STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
        if status_code >= 500:
            log.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=status_code, content={"error": exc.message, "code": exc.code})


def _auth_response(message: str, result: AuthResult) -> AuthOut:
    return AuthOut(message=message, token=result.token, user=UserOut.model_validate(result.user))


@router.get("/districts", response_model=list[DistrictOut])
def list_districts(board: JobBoard = Depends(get_board)):
    return board.list_districts()


@router.get("/stats/districts", response_model=list[DistrictJobCountOut])
def district_job_counts(board: JobBoard = Depends(get_board)):
    return [DistrictJobCountOut(name=name, job_count=count) for name, count in board.district_job_counts()]


@router.get("/jobs", response_model=list[JobOut])
def search_jobs(
    category: Optional[str] = None,
    district: Optional[str] = None,
    experience: Optional[str] = None,
    search: Optional[str] = None,
    remote: Optional[str] = None,
    green: Optional[str] = None,
    board: JobBoard = Depends(get_board),
):
    filters = JobFilters(
        category=category, district=district, experience=experience,
        search=search, remote=remote == "true", green=green == "true",
    )
    return board.search_jobs(filters)


@router.get("/jobs/{job_id}", response_model=JobOut)
def get_job(job_id: int, board: JobBoard = Depends(get_board)):
    return board.get_job(job_id)


@router.post("/register", response_model=AuthOut, status_code=status.HTTP_201_CREATED)
def register(body: RegisterIn, board: JobBoard = Depends(get_board)):
    result = board.register(
        body.email, body.password, body.name, body.role, body.district, body.phone, body.skills
    )
    return _auth_response("User created successfully", result)


@router.post("/login", response_model=AuthOut)
def login(body: LoginIn, board: JobBoard = Depends(get_board)):
    if not body.email or not body.password:
        raise InvalidInput("Email and password are required")
    return _auth_response("Login successful", board.login(body.email, body.password))


@router.post("/jobs", status_code=status.HTTP_201_CREATED)
def post_job(body: JobIn, token: Optional[str] = Depends(get_token), board: JobBoard = Depends(get_board)):
    job_id = board.post_job(token, JobInput(**body.model_dump()))
    return {"message": "Job posted successfully", "jobId": job_id}


@router.post("/applications", status_code=status.HTTP_201_CREATED)
def apply_to_job(body: ApplicationIn, token: Optional[str] = Depends(get_token),
                 board: JobBoard = Depends(get_board)):
    application_id = board.apply_to_job(token, body.job_id, body.cover_letter)
    return {"message": "Application submitted successfully", "applicationId": application_id}


@router.get("/my-applications", response_model=list[ApplicationOut])
def my_applications(token: Optional[str] = Depends(get_token), board: JobBoard = Depends(get_board)):
    return [ApplicationOut.from_application(a) for a in board.my_applications(token)]
