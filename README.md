# memsearch

memsearch builds an in-memory inverted index over a directory tree of
ASCII text files and answers multi-word queries against it.

## Installation

```
pip install .
```

## The search shell

```
searchshell <docroot>
```

The same shell can also be started with `python -m memsearch.searchshell <docroot>`.

The shell prints `Indexing '<docroot>'`, crawls the directory, and then
prompts with `enter query:`. Type one or more words separated by spaces.
Every document that holds all of the words is listed, most relevant
first, as `  <path> (<rank>) `, where the rank is the total number of
times the query words appear in that document. A query with no matching
document prints nothing but the next prompt. End input (Ctrl-D) to quit;
the shell answers `shutting down ...`.

```
Indexing 'docs'
enter query:
report normal
  docs/notes.txt (12) 
  docs/guide/intro.txt (3) 
enter query:
shutting down ...
```

Details of the shell:

- Queries are lower-cased (ASCII letters only) and split on spaces.
- Each line is read up to 1023 characters and its last character,
  normally the newline, is dropped. A final line with no newline is not
  run.
- With a wrong number of arguments, or a root that cannot be crawled,
  a usage message goes to standard error and `main` returns 1.

## What gets indexed

The crawler walks the tree below the root, visiting the entries of each
directory in byte order of their path names, so document IDs come out
the same on every run. Every regular file is read; a file is indexed
only if it is non-empty and holds nothing but ASCII bytes (anything
after a first NUL byte is ignored). Other entries, and files that cannot
be read, are skipped.

Words are runs of ASCII letters and are stored lower-cased, together
with the byte offset at which each occurrence starts. A word that runs
right up to the end of a file, with no character after it, is not
recorded.

## Using the library

```python
from memsearch.crawler import crawl_file_tree
from memsearch.searchshell import parse_query

doc_table, index = crawl_file_tree("docs")
for result in index.search(parse_query("report normal")):
    print(doc_table.get_doc_name(result.doc_id), result.rank)
```

`crawl_file_tree` returns a `(DocTable, MemIndex)` pair and raises
`memsearch.crawler.CrawlError` when the root is missing, is not a
directory or cannot be listed. `MemIndex.search` returns a list of
`SearchResult(doc_id, rank)` sorted by rank, highest first; the list is
empty when the query is empty or nothing matches.

The building blocks can also be used on their own:

- `memsearch.linkedlist`: `LinkedList`, a doubly-linked list with
  `push`, `pop`, `append`, `slice` (remove from the tail), a bubble
  `sort` taking a comparator and a direction, and `clear`; and
  `LLIterator`, a cursor that can `get`, `next`, `rewind` and `remove`
  the element under it. `pop` and `slice` raise `IndexError` on an
  empty list.
- `memsearch.hashtable`: `HashTable`, a chained hash table keyed by
  integers that grows nine-fold once its load factor reaches 3;
  `insert` returns the replaced `KeyValue` or `None`, `find` and
  `remove` return the `KeyValue` or `None`. `HTIterator` walks the
  table and can remove pairs as it goes. `fnv_hash64` computes the
  64-bit FNV-1a hash of bytes or of a UTF-8 encoded string.
- `memsearch.doctable`: `DocTable`, a two-way map between document
  names and document IDs. IDs start at 1; `INVALID_DOCID` (0) is
  returned by `get_doc_id` for an unknown name, and `get_doc_name`
  returns `None` for an unknown ID and raises `ValueError` for 0.
- `memsearch.fileparser`: `read_file_to_string`, which returns a
  regular file's bytes, and `parse_into_word_positions_table`, which
  maps `fnv_hash64(word)` to a `WordPositions(word, positions)` entry,
  or returns `None` when there is nothing to index.
- `memsearch.memindex`: `MemIndex`, the inverted index itself, with
  `add_posting_list`, `find_word`, `num_words` and `search`.
  `add_posting_list` raises `ValueError` if the same word is added
  twice for one document.

## Limitations

The index lives only in memory: it is rebuilt on every run and is not
saved to or loaded from disk. Only ASCII text is indexed; files with
any other bytes are skipped.

## Running the tests

```
pip install .[test]
pytest
```