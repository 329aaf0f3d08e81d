import logging
from graphene import Mutation, String, Field, List

from jobboard.gql.auth import get_board, board_errors
from jobboard.gql.types import UserObject

log = logging.getLogger(__name__)


class RegisterUser(Mutation):
    """ Creates an employer or job seeker account and returns a JWT token. """
    class Arguments:
        email = String(required=True)
        password = String(required=True)
        name = String(required=True)
        role = String(required=True, description="User role: 'employer' or 'jobseeker'")
        district = String()
        phone = String()
        skills = List(String)
    token = String()
    user = Field(lambda: UserObject)

    @staticmethod
    @board_errors
    def mutate(root, info, email, password, name, role, district=None, phone=None, skills=None):
        log.info(f"RegisterUser attempt: role={role}")
        result = get_board(info).register(email, password, name, role, district, phone, skills)
        return RegisterUser(token=result.token, user=result.user)


class LoginUser(Mutation):
    """ Authenticates a user and returns a JWT token. """
    class Arguments:
        email = String(required=True)
        password = String(required=True)
    token = String()
    user = Field(lambda: UserObject)

    @staticmethod
    @board_errors
    def mutate(root, info, email, password):
        result = get_board(info).login(email, password)
        return LoginUser(token=result.token, user=result.user)
