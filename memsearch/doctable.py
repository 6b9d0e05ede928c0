"""A bidirectional mapping between document names and document IDs."""

from __future__ import annotations

from typing import Optional

from memsearch.hashtable import HashTable, fnv_hash64

INVALID_DOCID = 0
"""The reserved document ID that never names a document."""

_INITIAL_NUM_BUCKETS = 2


class DocTable:
    """Associates document path names with small integer document IDs.

    IDs are handed out in increasing order starting from 1; 0 is reserved
    as INVALID_DOCID.
    """

    def __init__(self) -> None:
        self._id_to_name = HashTable(_INITIAL_NUM_BUCKETS)
        self._name_to_id = HashTable(_INITIAL_NUM_BUCKETS)
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._id_to_name)

    def __repr__(self) -> str:
        return f"DocTable(num_docs={len(self)})"

    def add(self, doc_name: str) -> int:
        """Register doc_name and return its ID.

        If the document is already known, its existing ID is returned.
        """
        key = fnv_hash64(doc_name)
        existing = self._name_to_id.find(key)
        if existing is not None:
            return existing.value

        doc_id = self._next_id
        self._next_id += 1
        self._id_to_name.insert(doc_id, doc_name)
        self._name_to_id.insert(key, doc_id)
        return doc_id

    def get_doc_id(self, doc_name: str) -> int:
        """Return the ID of doc_name, or INVALID_DOCID if it is unknown."""
        found = self._name_to_id.find(fnv_hash64(doc_name))
        return found.value if found is not None else INVALID_DOCID

    def get_doc_name(self, doc_id: int) -> Optional[str]:
        """Return the name registered under doc_id, or None if unknown."""
        if doc_id == INVALID_DOCID:
            raise ValueError("INVALID_DOCID does not name a document")
        found = self._id_to_name.find(doc_id)
        return found.value if found is not None else None

    def id_to_name_table(self) -> HashTable:
        """Return the underlying ID -> name table; callers must not modify it."""
        return self._id_to_name

    def name_to_id_table(self) -> HashTable:
        """Return the underlying name-hash -> ID table; callers must not modify it."""
        return self._name_to_id