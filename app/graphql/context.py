"""GraphQL context: carries the DB session, user store and cookie session into resolvers."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from app.config import settings
from app.database import get_db
from app.services.user_store import SQLAlchemyUserStore, UserStore
from app.session import SessionSink


class GraphQLContext(BaseContext):
    """Context passed to every GraphQL resolver."""

    def __init__(
        self,
        db: AsyncSession | None,
        session: SessionSink,
        store: UserStore | None = None,
        login_sets_session: bool | None = None,
    ) -> None:
        super().__init__()
        self.db = db
        self.session = session
        self.store = store if store is not None else SQLAlchemyUserStore(db)
        self.login_sets_session = settings.login_sets_session if login_sets_session is None else login_sets_session


async def get_context(request: Request, db: AsyncSession = Depends(get_db)) -> GraphQLContext:
    return GraphQLContext(db=db, session=SessionSink(request.session))
