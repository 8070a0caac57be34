from fastapi import Depends, Request

from backoffice.adapter.database import Database
from backoffice.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from backoffice.app.services.auth_service import AuthService
from backoffice.app.services.unit_of_work import UnitOfWork


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_unit_of_work(database: Database = Depends(get_database)):
    async with database.session() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_auth_service(
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> AuthService:
    """Request-scoped AuthService over a request-scoped unit of work"""
    config = request.app.state.config
    return AuthService(
        uow,
        hasher=request.app.state.password_hasher,
        issuer=request.app.state.credential_issuer,
        default_ttl_hours=config.SESSION_TTL_HOURS,
        max_ttl_hours=config.MAX_SESSION_TTL_HOURS,
    )
