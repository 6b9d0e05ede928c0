"""An in-memory inverted index from words to per-document posting lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Union

from memsearch.hashtable import HashTable, fnv_hash64
from memsearch.linkedlist import LinkedList

_INDEX_INITIAL_BUCKETS = 16
_POSTINGS_INITIAL_BUCKETS = 10


@dataclass
class SearchResult:
    """A document matching a query, with the quality of the match."""

    doc_id: int
    rank: int


@dataclass
class WordPostings:
    """A word and its doc_id -> positions table."""

    word: str
    postings: HashTable = field(
        default_factory=lambda: HashTable(_POSTINGS_INITIAL_BUCKETS))


class MemIndex:
    """Maps each word to the documents, and offsets within them, where it occurs."""

    def __init__(self) -> None:
        self._table = HashTable(_INDEX_INITIAL_BUCKETS)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"MemIndex(num_words={len(self)})"

    def num_words(self) -> int:
        """Return the number of distinct words in the index."""
        return len(self._table)

    def find_word(self, word: str) -> Optional[WordPostings]:
        """Return the postings recorded for word, or None if it is unknown."""
        found = self._table.find(fnv_hash64(word))
        if found is None:
            return None
        entry: WordPostings = found.value
        if entry.word != word:
            raise RuntimeError(
                f"hash collision between {entry.word!r} and {word!r}")
        return entry

    def add_posting_list(self, word: str, doc_id: int,
                         postings: Union[LinkedList, Iterable[int]]) -> None:
        """Record the positions at which word occurs in document doc_id.

        Raises ValueError if postings for this word and document were
        already added.
        """
        if not isinstance(postings, LinkedList):
            postings = LinkedList(postings)
        entry = self.find_word(word)
        if entry is None:
            entry = WordPostings(word)
            self._table.insert(fnv_hash64(word), entry)
        if entry.postings.find(doc_id) is not None:
            raise ValueError(
                f"document {doc_id} already has postings for {word!r}")
        entry.postings.insert(doc_id, postings)

    def search(self, query: Sequence[str]) -> List[SearchResult]:
        """Return the documents containing every query word, best first.

        A document's rank is the total number of occurrences of the query
        words in it. Ties keep the index's own document order. An empty
        query, or one with no matching document, gives an empty list.
        """
        if not query:
            return []
        first = self.find_word(query[0])
        if first is None:
            return []
        results = [SearchResult(pair.key, len(pair.value))
                   for pair in first.postings]

        for word in query[1:]:
            entry = self.find_word(word)
            if entry is None:
                return []
            kept = []
            for result in results:
                found = entry.postings.find(result.doc_id)
                if found is not None:
                    result.rank += len(found.value)
                    kept.append(result)
            results = kept
            if not results:
                return []

        results.sort(key=lambda result: result.rank, reverse=True)
        return results