from graphene import Mutation, String, Int, Field, Boolean
import logging
from jobboard.gql.auth import get_board, bearer_token, board_errors
from jobboard.gql.types import JobObject
from jobboard.services.catalog import JobInput

log = logging.getLogger(__name__)


class PostJob(Mutation):
    """ Creates a new job posting (Employers Only). Expires 30 days after posting. """
    class Arguments:
        title = String(required=True)
        company = String(required=True)
        location = String(required=True)
        district = String(required=True)
        type = String(required=True)
        category = String(required=True)
        description = String(required=True)
        experience = String()
        salary = String()
        requirements = String()
        is_remote = Boolean(default_value=False)
        is_green_job = Boolean(default_value=False)
    job_id = Int()
    job = Field(lambda: JobObject)

    @staticmethod
    @board_errors
    def mutate(root, info, **fields):
        board = get_board(info)
        job_id = board.post_job(bearer_token(info), JobInput.from_dict(fields))
        return PostJob(job_id=job_id, job=board.get_job(job_id))
