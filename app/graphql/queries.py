"""GraphQL Query resolvers."""

import strawberry
from strawberry.types import Info

from app.graphql.context import GraphQLContext
from app.graphql.types import UserType, user_to_type
from app.services import auth_service


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="Get the user bound to the current session, or null if not logged in.")
    async def me(self, info: Info[GraphQLContext, None]) -> UserType | None:
        ctx = info.context
        user = await auth_service.me(ctx.store, ctx.session)
        if not user:
            return None
        return user_to_type(user)
