"""Interface TransactionManager - unidad de trabajo de los casos de uso."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol


class TransactionManager(Protocol):
    """Delimita una unidad de trabajo; los repos confirman al salir sin error."""

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        yield
