"""Crawling a directory tree and indexing the ASCII text files in it."""

from __future__ import annotations

import os
import stat
from typing import List, Tuple, Union

from memsearch.doctable import DocTable
from memsearch.fileparser import (parse_into_word_positions_table,
                                  read_file_to_string)
from memsearch.memindex import MemIndex


class CrawlError(Exception):
    """Raised when a directory tree cannot be crawled."""


def crawl_file_tree(
        root_dir: Union[str, os.PathLike, None]) -> Tuple[DocTable, MemIndex]:
    """Index every ASCII text file under root_dir.

    Entries of each directory are visited in byte order of their path
    names, so document IDs are assigned deterministically. Returns the
    populated DocTable and MemIndex. Raises CrawlError if root_dir is
    missing, is not a directory or cannot be listed.
    """
    if root_dir is None:
        raise CrawlError("no root directory given")
    root = os.fsdecode(root_dir)
    try:
        mode = os.stat(root).st_mode
    except OSError as exc:
        raise CrawlError(f"cannot stat {root!r}: {exc.strerror}") from exc
    if not stat.S_ISDIR(mode):
        raise CrawlError(f"{root!r} is not a directory")
    try:
        names = os.listdir(root)
    except OSError as exc:
        raise CrawlError(f"cannot open {root!r}: {exc.strerror}") from exc

    doc_table = DocTable()
    index = MemIndex()
    _handle_dir(root, names, doc_table, index)
    return doc_table, index


def _join(dir_path: str, name: str) -> str:
    if dir_path.endswith("/"):
        return dir_path + name
    return f"{dir_path}/{name}"


def _handle_dir(dir_path: str, names: List[str],
                doc_table: DocTable, index: MemIndex) -> None:
    entries: List[Tuple[str, bool]] = []
    for name in names:
        path = _join(dir_path, name)
        try:
            mode = os.stat(path).st_mode
        except OSError:
            continue
        if stat.S_ISREG(mode):
            entries.append((path, False))
        elif stat.S_ISDIR(mode):
            entries.append((path, True))

    entries.sort(key=lambda entry: os.fsencode(entry[0]))

    for path, is_dir in entries:
        if is_dir:
            try:
                sub_names = os.listdir(path)
            except OSError:
                continue
            _handle_dir(path, sub_names, doc_table, index)
        else:
            _handle_file(path, doc_table, index)


def _handle_file(file_path: str, doc_table: DocTable,
                 index: MemIndex) -> None:
    try:
        contents = read_file_to_string(file_path)
    except (OSError, ValueError):
        return
    table = parse_into_word_positions_table(contents)
    if table is None:
        return

    doc_id = doc_table.add(file_path)
    for pair in table:
        entry = pair.value
        index.add_posting_list(entry.word, doc_id, entry.positions)