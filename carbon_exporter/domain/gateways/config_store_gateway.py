"""Config document store gateway interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from carbon_exporter.domain.entities.config_document import ConfigDocument


class IConfigStoreGateway(ABC):
    """Defines operations required to read and write config documents."""

    @abstractmethod
    async def get_document(
        self, namespace: str, name: str
    ) -> Optional[ConfigDocument]:
        """Return the document, or ``None`` when it does not exist."""
        raise NotImplementedError

    @abstractmethod
    async def create_document(self, document: ConfigDocument) -> ConfigDocument:
        """Create the document and return the stored copy."""
        raise NotImplementedError

    @abstractmethod
    async def update_document(self, document: ConfigDocument) -> ConfigDocument:
        """Replace the stored document with ``document`` in a single write."""
        raise NotImplementedError
