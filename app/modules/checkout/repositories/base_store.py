# -*- coding: utf-8 -*-
"""
backend/app/modules/checkout/repositories/base_store.py

Contrato de almacenamiento de registros y su implementación en memoria.

El motor de checkout no depende de un backend concreto: cualquier
implementación de RecordStore (memoria, Redis, SQL) que respete este
contrato es intercambiable.

Garantías del contrato:
- get() devuelve una copia independiente; mutarla no afecta al store
  y un lector nunca observa una escritura a medias.
- put() reemplaza el registro completo de forma atómica e incrementa
  su `version`.
- compare_and_swap() escribe solo si la versión almacenada coincide con
  la esperada (concurrencia optimista).
- locked() toma el candado del registro para secciones
  check-then-act; es reentrante para el mismo hilo.

Autor: Ixchel Beristain
Fecha: 2026-10-19
"""

from __future__ import annotations

import copy
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Generic, Iterator, Optional, Protocol, TypeVar


class VersionedRecord(Protocol):
    id: str
    version: int


T = TypeVar("T", bound=VersionedRecord)


class RecordStore(ABC, Generic[T]):
    """Interfaz abstracta para stores de registros versionados."""

    @abstractmethod
    def get(self, record_id: str) -> Optional[T]:
        """Copia del registro o None si no existe."""
        ...

    @abstractmethod
    def put(self, record: T) -> T:
        """
        Inserta o reemplaza el registro.

        Actualiza record.version con la versión asignada y devuelve una copia.
        """
        ...

    @abstractmethod
    def compare_and_swap(self, record: T, expected_version: int) -> bool:
        """
        Reemplaza el registro solo si la versión almacenada es expected_version.

        Returns:
            True si se escribió (record.version queda actualizado), False si no.
        """
        ...

    @abstractmethod
    def locked(self, record_id: str):
        """Context manager que serializa secciones críticas sobre un registro."""
        ...

    @abstractmethod
    def list(self) -> list[T]:
        """Copias de todos los registros en orden de inserción."""
        ...

    @abstractmethod
    def count(self) -> int:
        ...


class InMemoryRecordStore(RecordStore[T]):
    """
    Store en memoria del proceso.

    Un candado global protege el diccionario y un RLock por registro
    serializa escrituras y secciones check-then-act sobre ese registro.
    """

    def __init__(self, name: str = "records") -> None:
        self.name = name
        self._records: dict[str, T] = {}
        self._record_locks: dict[str, threading.RLock] = {}
        self._map_lock = threading.Lock()

    # ------------------------------------------------------------------ #
    # Candados
    # ------------------------------------------------------------------ #
    def _lock_for(self, record_id: str) -> threading.RLock:
        with self._map_lock:
            lock = self._record_locks.get(record_id)
            if lock is None:
                lock = threading.RLock()
                self._record_locks[record_id] = lock
            return lock

    @contextmanager
    def locked(self, record_id: str) -> Iterator[None]:
        with self._lock_for(record_id):
            yield

    # ------------------------------------------------------------------ #
    # Lectura
    # ------------------------------------------------------------------ #
    def get(self, record_id: str) -> Optional[T]:
        with self._map_lock:
            record = self._records.get(record_id)
            return copy.deepcopy(record) if record is not None else None

    def list(self) -> list[T]:
        with self._map_lock:
            return [copy.deepcopy(r) for r in self._records.values()]

    def count(self) -> int:
        with self._map_lock:
            return len(self._records)

    # ------------------------------------------------------------------ #
    # Escritura
    # ------------------------------------------------------------------ #
    def put(self, record: T) -> T:
        with self.locked(record.id):
            with self._map_lock:
                current = self._records.get(record.id)
                new_version = current.version + 1 if current is not None else 1
                self._store(record, new_version)
            return copy.deepcopy(record)

    def compare_and_swap(self, record: T, expected_version: int) -> bool:
        with self.locked(record.id):
            with self._map_lock:
                current = self._records.get(record.id)
                if current is None or current.version != expected_version:
                    return False
                self._store(record, expected_version + 1)
            return True

    def _store(self, record: T, version: int) -> None:
        # Llamar con _map_lock tomado
        record.version = version
        self._records[record.id] = copy.deepcopy(record)


__all__ = ["RecordStore", "InMemoryRecordStore", "VersionedRecord"]

# Fin del archivo backend/app/modules/checkout/repositories/base_store.py
