"""
Store for the service catalog.

``ServiceStore`` holds the studio's offerings under the ``services``
key.  Ids are generated by the ``Service`` model, not by the store.
"""

from typing import List

from pydantic import TypeAdapter

from studio_manager.app.core.storage import SERVICES_KEY
from studio_manager.app.schemas.service import Service

from .collection_store import CollectionStore


class ServiceStore(CollectionStore[Service]):
    """Catalog of services with auto-persisting CRUD."""

    key = SERVICES_KEY
    adapter = TypeAdapter(List[Service])
    label = "service"

    @property
    def services(self) -> List[Service]:
        return self.items
