from graphene import ObjectType
from jobboard.gql.job.mutations import PostJob
from jobboard.gql.application.mutations import ApplyToJob
from jobboard.gql.user.mutations import RegisterUser, LoginUser


class Mutation(ObjectType):
    """ Aggregates all mutations for the GraphQL schema. """

    register_user = RegisterUser.Field()  # Public Access (employer/jobseeker only)
    login_user = LoginUser.Field()        # Public Access
    post_job = PostJob.Field()            # Requires Employer token
    apply_to_job = ApplyToJob.Field()     # Requires Job Seeker token
