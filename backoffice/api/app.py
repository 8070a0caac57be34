import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from backoffice.adapter.database import Database
from backoffice.adapter.services.session_pruner import SessionPruner
from backoffice.app.services.credential_issuer import CredentialIssuer
from backoffice.app.services.password_hasher import PasswordHasher
from .error import ClientError, ServerError

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_store_error(request: Request, exc: SQLAlchemyError):
    logger.error(f"Credential store failure on {request.url.path}: {exc}", exc_info=True)
    error_dict = {"code": "STORE_FAILURE", "message": "Internal server error"}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig, database: Optional[Database] = None) -> FastAPI:
    if database is None:
        database = Database(ApplicationConfig.DB_URI, echo=ApplicationConfig.DB_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.connect()
        if ApplicationConfig.DB_CREATE_TABLES:
            await database.create_all()

        pruner = None
        if ApplicationConfig.SESSION_PRUNE_INTERVAL_SECONDS > 0:
            pruner = SessionPruner(database, ApplicationConfig.SESSION_PRUNE_INTERVAL_SECONDS)
            await pruner.start()
        app.state.session_pruner = pruner

        yield

        if pruner is not None:
            await pruner.stop()
        await database.dispose()

    app = FastAPI(title="Back-office Admin Auth API", version=VERSION, lifespan=lifespan)

    app.state.config = ApplicationConfig
    app.state.database = database
    app.state.password_hasher = PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
    app.state.credential_issuer = CredentialIssuer(api_key_prefix=ApplicationConfig.API_KEY_PREFIX)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from backoffice.api.routes import accounts, auth, health_check

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=ApplicationConfig.API_PREFIX, tags=["Authentication"])
    app.include_router(accounts.router, prefix=ApplicationConfig.API_PREFIX, tags=["Admin Accounts"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(SQLAlchemyError, handle_store_error)

    return app
