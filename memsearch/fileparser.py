"""Reading text files and splitting them into word -> positions tables."""

from __future__ import annotations

import os
import re
import stat
from dataclasses import dataclass, field
from typing import Optional, Union

from memsearch.hashtable import HashTable, fnv_hash64
from memsearch.linkedlist import LinkedList

_ASCII_UPPER_BOUND = 0x7F
_INITIAL_NUM_BUCKETS = 32
_WORD = re.compile(rb"[A-Za-z]+")


@dataclass
class WordPositions:
    """A normalised word and the byte offsets at which it occurs."""

    word: str
    positions: LinkedList = field(default_factory=LinkedList)


def read_file_to_string(file_name: Union[str, os.PathLike]) -> bytes:
    """Return the full contents of a regular file.

    Raises FileNotFoundError (or another OSError) if the file cannot be
    read, IsADirectoryError for a directory and ValueError for any other
    kind of non-regular file.
    """
    mode = os.stat(file_name).st_mode
    if stat.S_ISDIR(mode):
        raise IsADirectoryError(f"{os.fspath(file_name)!s} is a directory")
    if not stat.S_ISREG(mode):
        raise ValueError(f"{os.fspath(file_name)!s} is not a regular file")
    with open(file_name, "rb") as handle:
        return handle.read()


def parse_into_word_positions_table(
        file_contents: Union[bytes, bytearray, str, None]
) -> Optional[HashTable]:
    """Split text into lower-cased alphabetic words and record their offsets.

    Returns a HashTable mapping fnv_hash64(word) to WordPositions, or None
    if the contents are empty, contain non-ASCII bytes or hold no words.
    Content after the first NUL byte is ignored. A word that runs up to the
    very end of the contents, with no boundary character after it, is not
    recorded.
    """
    if file_contents is None:
        return None
    if isinstance(file_contents, str):
        data = file_contents.encode("utf-8")
    else:
        data = bytes(file_contents)

    nul = data.find(b"\0")
    if nul != -1:
        data = data[:nul]
    if not data:
        return None
    if any(octet > _ASCII_UPPER_BOUND for octet in data):
        return None

    table = HashTable(_INITIAL_NUM_BUCKETS)
    end = len(data)
    for match in _WORD.finditer(data):
        if match.end() >= end:
            break
        _add_word_position(table, match.group().lower().decode("ascii"),
                           match.start())

    return table if len(table) > 0 else None


def _add_word_position(table: HashTable, word: str, position: int) -> None:
    key = fnv_hash64(word)
    found = table.find(key)
    if found is not None:
        entry: WordPositions = found.value
        if entry.word != word:
            raise RuntimeError(
                f"hash collision between {entry.word!r} and {word!r}")
        entry.positions.append(position)
        return
    entry = WordPositions(word)
    entry.positions.append(position)
    table.insert(key, entry)