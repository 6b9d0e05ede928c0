"""An interactive shell that indexes a directory and answers queries."""

from __future__ import annotations

import string
import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from memsearch.crawler import CrawlError, crawl_file_tree
from memsearch.doctable import DocTable
from memsearch.memindex import MemIndex, SearchResult

_MAX_LINE = 1023
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_USAGE = (
    "Usage: searchshell <docroot>\n"
    "where <docroot> is an absolute or relative "
    "path to a directory to build an index under.\n"
)


def parse_query(line: str) -> List[str]:
    """Lower-case the ASCII letters of line and split it on spaces."""
    return [word for word in line.translate(_ASCII_LOWER).split(" ") if word]


def format_results(doc_table: DocTable,
                   results: Iterable[SearchResult]) -> str:
    """Render search results one per line as '  <name> (<rank>) '."""
    lines = []
    for result in results:
        name = doc_table.get_doc_name(result.doc_id)
        shown = name if name is not None else "(null)"
        lines.append(f"  {shown} ({result.rank}) \n")
    return "".join(lines)


def process_queries(doc_table: DocTable, index: MemIndex,
                    infile: TextIO, outfile: TextIO) -> None:
    """Prompt for queries on infile and answer them on outfile until EOF.

    Each line is read up to 1023 characters; its last character (normally
    the newline) is dropped. A final line with no newline is not run.
    """
    while True:
        outfile.write("enter query:\n")
        line = infile.readline(_MAX_LINE)
        if len(line) < _MAX_LINE and not line.endswith("\n"):
            outfile.write("shutting down ...\n")
            return
        query = parse_query(line[:-1])
        results = index.search(query)
        if results:
            outfile.write(format_results(doc_table, results))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Index the directory named by the single argument and run the shell."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write(_USAGE)
        return 1

    directory = args[0]
    sys.stdout.write(f"Indexing '{directory}'\n")
    try:
        doc_table, index = crawl_file_tree(directory)
    except CrawlError:
        sys.stderr.write(_USAGE)
        return 1

    process_queries(doc_table, index, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())