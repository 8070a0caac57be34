from abc import ABC, abstractmethod

from backoffice.app.repositories.account_repository import IAccountRepository
from backoffice.app.repositories.session_repository import ISessionRepository


class UnitOfWork(ABC):
    """
    Abstract UnitOfWork - repository access plus one transaction.

    Work that is not committed before the context exits is rolled back, so
    an exception anywhere inside `async with uow` leaves the store untouched.
    """

    # Repository properties (initialized in __aenter__)
    accounts: IAccountRepository
    sessions: ISessionRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
