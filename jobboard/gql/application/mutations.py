from graphene import Mutation, String, Int
from jobboard.gql.auth import get_board, bearer_token, board_errors


class ApplyToJob(Mutation):
    """ Allows an authenticated job seeker to apply for a job, once per job. """
    class Arguments:
        job_id = Int(required=True)
        cover_letter = String()
    application_id = Int()
    status = String()

    @staticmethod
    @board_errors
    def mutate(root, info, job_id, cover_letter=None):
        application_id = get_board(info).apply_to_job(bearer_token(info), job_id, cover_letter)
        return ApplyToJob(application_id=application_id, status="pending")
