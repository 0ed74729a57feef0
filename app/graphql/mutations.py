"""GraphQL Mutation resolvers."""

import strawberry
from strawberry.types import Info

from app.graphql.context import GraphQLContext
from app.graphql.types import UsernamePasswordInput, UserResponseType, user_response_to_type
from app.services import auth_service


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(description="Create an account and start a session for it.")
    async def register(
        self,
        info: Info[GraphQLContext, None],
        options: UsernamePasswordInput,
    ) -> UserResponseType:
        ctx = info.context
        result = await auth_service.register(ctx.store, ctx.session, options.username, options.password)
        return user_response_to_type(result)

    @strawberry.mutation(description="Check credentials and start a session for the user.")
    async def login(
        self,
        info: Info[GraphQLContext, None],
        options: UsernamePasswordInput,
    ) -> UserResponseType:
        ctx = info.context
        result = await auth_service.login(
            ctx.store,
            ctx.session,
            options.username,
            options.password,
            set_session=ctx.login_sets_session,
        )
        return user_response_to_type(result)
