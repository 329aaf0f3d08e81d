from graphene import Schema

from jobboard.gql.queries import Query
from jobboard.gql.mutations import Mutation

schema = Schema(query=Query, mutation=Mutation)
