import pytest

from memsearch.doctable import INVALID_DOCID, DocTable
from memsearch.hashtable import fnv_hash64

FILE1 = "foo/bar/baz.txt"
FILE2 = "bar/baz.txt"


def test_empty_table_has_no_docs():
    table = DocTable()
    assert len(table) == 0
    assert table.get_doc_id(FILE1) == INVALID_DOCID


def test_add_two_documents():
    table = DocTable()
    d1 = table.add(FILE1)
    assert d1 != 0
    assert len(table) == 1
    assert len(table) <= d1

    d2 = table.add(FILE2)
    assert d2 != 0
    assert len(table) == 2
    assert len(table) <= d2
    assert d1 != d2


def test_duplicate_add_returns_existing_id():
    table = DocTable()
    d1 = table.add(FILE1)
    d2 = table.add(FILE2)
    assert table.add(FILE2) == d2
    assert table.add(FILE1) == d1
    assert len(table) == 2


def test_lookup_by_name_and_id():
    table = DocTable()
    d1 = table.add(FILE1)
    table.add(FILE2)
    assert table.get_doc_id(FILE1) == d1
    assert table.get_doc_id("nonexistent/file") == 0
    assert table.get_doc_name(d1) == FILE1
    assert table.get_doc_name(0xDEADBEEF) is None


def test_ids_start_at_one_and_increase():
    table = DocTable()
    ids = [table.add(f"doc{n}") for n in range(5)]
    assert ids == [1, 2, 3, 4, 5]


def test_get_doc_name_rejects_invalid_docid():
    table = DocTable()
    table.add(FILE1)
    with pytest.raises(ValueError):
        table.get_doc_name(INVALID_DOCID)


def test_internal_tables_hold_both_mappings():
    table = DocTable()
    d1 = table.add(FILE1)
    d2 = table.add(FILE2)

    name_to_id = table.name_to_id_table()
    assert len(name_to_id) == 2
    assert name_to_id.find(fnv_hash64(FILE1)).value == d1
    assert name_to_id.find(fnv_hash64(FILE2)).value == d2

    id_to_name = table.id_to_name_table()
    assert len(id_to_name) == 2
    assert id_to_name.find(d1).value == FILE1
    assert id_to_name.find(d2).value == FILE2


def test_many_documents_survive_table_growth():
    table = DocTable()
    names = [f"dir/file{n}.txt" for n in range(50)]
    ids = {name: table.add(name) for name in names}
    assert len(table) == 50
    for name, doc_id in ids.items():
        assert table.get_doc_id(name) == doc_id
        assert table.get_doc_name(doc_id) == name