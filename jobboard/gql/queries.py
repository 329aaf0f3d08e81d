from graphene import ObjectType, List, Field, Int, String, Boolean

from jobboard.gql.auth import get_board, bearer_token, board_errors
from jobboard.gql.types import JobObject, DistrictObject, DistrictJobCountObject, ApplicationObject, UserObject
from jobboard.services.catalog import JobFilters


class Query(ObjectType):
    """ Defines the available GraphQL queries. """

    me = Field(UserObject, description="Get the currently authenticated user's details.")
    districts = List(DistrictObject, description="All districts, alphabetically.")
    regions = List(String, description="The region names used to group districts.")
    district_job_counts = List(DistrictJobCountObject, description="Job count per district, busiest first.")
    jobs = List(
        JobObject,
        category=String(),
        district=String(),
        experience=String(),
        search=String(description="Matches title, description or company, case-insensitively."),
        remote=Boolean(description="Only remote jobs when true."),
        green=Boolean(description="Only green jobs when true."),
        description="Search jobs, newest first. All given filters must match.",
    )
    job = Field(JobObject, id=Int(required=True), description="Get a specific job by ID.")
    my_applications = List(ApplicationObject, description="The caller's applications. (Requires Auth)")

    # --- RESOLVERS ---

    @staticmethod
    @board_errors
    def resolve_me(root, info):
        return get_board(info).current_user(bearer_token(info))

    @staticmethod
    @board_errors
    def resolve_districts(root, info):
        return get_board(info).list_districts()

    @staticmethod
    @board_errors
    def resolve_regions(root, info):
        return get_board(info).regions()

    @staticmethod
    @board_errors
    def resolve_district_job_counts(root, info):
        return get_board(info).district_job_counts()

    @staticmethod
    @board_errors
    def resolve_jobs(root, info, **filters):
        return get_board(info).search_jobs(JobFilters(**filters))

    @staticmethod
    @board_errors
    def resolve_job(root, info, id):
        return get_board(info).get_job(id)

    @staticmethod
    @board_errors
    def resolve_my_applications(root, info):
        return get_board(info).my_applications(bearer_token(info))
