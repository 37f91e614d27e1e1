"""
Unit of Work Port - Transaction boundary for one request.

Repositories resolved for the same request share one transaction. Nothing
they write is visible to other requests until commit(); leaving the request
without committing rolls everything back.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    @abstractmethod
    async def commit(self) -> None: ...

    @abstractmethod
    async def rollback(self) -> None: ...
