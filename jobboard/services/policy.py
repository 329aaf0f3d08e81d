# jobboard/services/policy.py
from jobboard.errors import Forbidden


def can_post_job(role: str) -> bool:
    return role == "employer"


def can_apply(role: str) -> bool:
    return role == "jobseeker"


def require_can_post_job(role: str):
    if not can_post_job(role):
        raise Forbidden("Only employers can post jobs")


def require_can_apply(role: str):
    if not can_apply(role):
        raise Forbidden("Only job seekers can apply for jobs")
