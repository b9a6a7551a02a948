"""Stores: implementações concretas dos registries.

Módulos disponíveis:
    - firestore_registry_store: Projetos e ambientes no Firestore
    - memory_stores: Registries em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.firestore_registry_store import FirestoreRegistryStore
from app.infra.stores.memory_stores import (
    MemoryEnvironmentStore,
    MemoryProjectStore,
)

__all__ = [
    # Firestore
    "FirestoreRegistryStore",
    # Memory (dev/test)
    "MemoryEnvironmentStore",
    "MemoryProjectStore",
]
