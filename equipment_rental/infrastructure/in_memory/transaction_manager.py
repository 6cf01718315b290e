from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from equipment_rental.application.interfaces.transaction_manager import TransactionManager


class NoopTransactionManager(TransactionManager):
    """Los repos en memoria escriben de inmediato; no hay nada que confirmar."""

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        yield
