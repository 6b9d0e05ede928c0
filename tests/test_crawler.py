import pytest

from memsearch.crawler import CrawlError, crawl_file_tree
from memsearch.doctable import INVALID_DOCID


@pytest.fixture
def tree(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_bytes(b"hello world\n")
    (root / "b").mkdir()
    (root / "b" / "c.txt").write_bytes(b"Hello there, hello.\n")
    (root / "d.bin").write_bytes(b"abc \xff\xfe def\n")
    (root / "e.txt").write_bytes(b"")
    (root / "f.txt").write_bytes(b"1234 5678\n")
    return root


def test_valid_directory_is_crawled(tree):
    doc_table, index = crawl_file_tree(str(tree))
    assert len(doc_table) == 2
    assert index.num_words() == 3


def test_nonexistent_directory_raises(tmp_path):
    with pytest.raises(CrawlError):
        crawl_file_tree(str(tmp_path / "nonexistent") + "/")


def test_regular_file_is_rejected(tree):
    with pytest.raises(CrawlError):
        crawl_file_tree(str(tree / "a.txt"))


@pytest.mark.parametrize("bad", [None, ""])
def test_bad_arguments_raise(bad):
    with pytest.raises(CrawlError):
        crawl_file_tree(bad)


def test_doc_ids_follow_sorted_order(tree):
    root = str(tree)
    doc_table, _ = crawl_file_tree(root)
    assert doc_table.get_doc_id(f"{root}/a.txt") == 1
    assert doc_table.get_doc_id(f"{root}/b/c.txt") == 2
    assert doc_table.get_doc_name(1) == f"{root}/a.txt"
    assert doc_table.get_doc_name(2) == f"{root}/b/c.txt"


def test_skipped_files_are_not_registered(tree):
    root = str(tree)
    doc_table, _ = crawl_file_tree(root)
    for name in ("d.bin", "e.txt", "f.txt"):
        assert doc_table.get_doc_id(f"{root}/{name}") == INVALID_DOCID


def test_trailing_slash_adds_no_extra_separator(tree):
    root = str(tree) + "/"
    doc_table, _ = crawl_file_tree(root)
    names = {doc_table.get_doc_name(doc_id) for doc_id in (1, 2)}
    assert names == {root + "a.txt", root + "b/c.txt"}


def test_every_crawled_name_round_trips(tree):
    doc_table, _ = crawl_file_tree(str(tree))
    for pair in doc_table.id_to_name_table():
        assert doc_table.get_doc_id(pair.value) == pair.key


def test_index_records_positions(tree):
    root = str(tree)
    doc_table, index = crawl_file_tree(root)
    a_id = doc_table.get_doc_id(f"{root}/a.txt")
    c_id = doc_table.get_doc_id(f"{root}/b/c.txt")

    world = index.find_word("world")
    assert list(world.postings.find(a_id).value) == [6]

    hello = index.find_word("hello")
    assert list(hello.postings.find(a_id).value) == [0]
    assert list(hello.postings.find(c_id).value) == [0, 13]


def test_search_over_crawled_tree(tree):
    root = str(tree)
    doc_table, index = crawl_file_tree(root)
    results = index.search(["hello"])
    assert [doc_table.get_doc_name(r.doc_id) for r in results] == [
        f"{root}/b/c.txt", f"{root}/a.txt"]
    assert [r.rank for r in results] == [2, 1]
    assert index.search(["hello", "missing"]) == []


def test_empty_directory_gives_empty_tables(tmp_path):
    doc_table, index = crawl_file_tree(tmp_path)
    assert len(doc_table) == 0
    assert len(index) == 0