import io
import sys

from labstructs import menus


def feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def key(k):
    return menus.KEY_LINE.format(k)


def test_list_menu_inserts_at_head(monkeypatch, capsys):
    feed(monkeypatch, "2 33 2 11 2 22 5 0\n")
    code = menus.list_menu(None)
    out = capsys.readouterr().out
    assert code == 0
    assert out.index(key(22)) < out.index(key(11)) < out.index(key(33))


def test_list_menu_search_absent(monkeypatch, capsys):
    feed(monkeypatch, "2 11 3 44 0\n")
    menus.list_menu(None)
    out = capsys.readouterr().out
    assert menus.ELEMENT_ABSENT in out
    assert key(44) not in out


def test_list_menu_search_found(monkeypatch, capsys):
    feed(monkeypatch, "2 11 3 11 0\n")
    menus.list_menu(None)
    out = capsys.readouterr().out
    assert out.index(menus.ELEMENT_FOUND) < out.index(key(11))


def test_list_menu_delete_then_empty(monkeypatch, capsys):
    feed(monkeypatch, "2 11 4 11 5 4 11 0\n")
    code = menus.list_menu(None)
    out = capsys.readouterr().out
    assert code == 0
    assert menus.NODE_DELETED in out
    assert menus.LIST_EMPTY in out
    assert menus.NODE_ABSENT not in out


def test_list_menu_delete_missing(monkeypatch, capsys):
    feed(monkeypatch, "2 11 4 22 0\n")
    code = menus.list_menu(None)
    out = capsys.readouterr().out
    assert code == 0
    assert menus.NODE_ABSENT in out


def test_list_menu_invalid_choice_and_eof(monkeypatch, capsys):
    feed(monkeypatch, "9 abc\n")
    code = menus.list_menu(None)
    out = capsys.readouterr().out
    assert code == 0
    assert out.count(menus.INVALID_CHOICE) == 2


def test_item_list_menu_shows_satellite_data(monkeypatch, capsys):
    feed(monkeypatch, "2 alpha 7 3 3 alpha 0\n")
    menus.item_list_menu(None)
    out = capsys.readouterr().out
    assert key("alpha") in out
    assert menus.VALUE_LINE.format(7) in out
    assert menus.IDENT_LINE.format(3) in out


def test_item_list_menu_rejects_long_key(monkeypatch, capsys):
    feed(monkeypatch, "2 abcdefghijklmnopq 1 1 5 0\n")
    code = menus.item_list_menu(None)
    out = capsys.readouterr().out
    assert code == 0
    assert menus.INVALID_INPUT in out
    assert menus.LIST_EMPTY in out


def test_queue_menu_requires_creation(monkeypatch, capsys):
    feed(monkeypatch, "2 11 3 0\n")
    code = menus.queue_menu(None)
    out = capsys.readouterr().out
    assert code == 0
    assert out.count(menus.QUEUE_NOT_CREATED) == 2


def test_queue_menu_fifo(monkeypatch, capsys):
    feed(monkeypatch, "1 2 11 2 22 2 33 4 6 5 0\n")
    menus.queue_menu(None)
    out = capsys.readouterr().out
    dequeued = out.index(menus.QUEUE_DEQUEUED)
    assert dequeued < out.index(key(11))
    assert menus.QUEUE_SIZE.format(2) in out
    assert out.index(menus.QUEUE_TAIL) < out.index(key(33))


def test_queue_menu_empty_after_destroy(monkeypatch, capsys):
    feed(monkeypatch, "1 4 8 4 0\n")
    code = menus.queue_menu(None)
    out = capsys.readouterr().out
    assert code == 0
    assert menus.QUEUE_EMPTY in out
    assert menus.QUEUE_NOT_CREATED in out


def test_stack_menu_lifo(monkeypatch, capsys):
    feed(monkeypatch, "3 1 2 aa 1 1 2 bb 2 2 3 4 0\n")
    menus.stack_menu(None)
    out = capsys.readouterr().out
    assert menus.STACK_UNAVAILABLE in out
    assert out.index(key("bb")) < out.index(key("aa"))
    assert menus.VALUE_LINE.format(1) in out


def test_stack_menu_push_before_create(monkeypatch, capsys):
    feed(monkeypatch, "2 5 0\n")
    code = menus.stack_menu(None)
    out = capsys.readouterr().out
    assert code == 0
    assert menus.STACK_NOT_CREATED in out
    assert menus.STACK_MISSING in out


def test_bst_menu_visit_sorted(monkeypatch, capsys):
    feed(monkeypatch, "2 50 2 30 2 70 2 20 5 0\n")
    menus.bst_menu(None)
    out = capsys.readouterr().out
    positions = [out.index(key(k)) for k in (20, 30, 50, 70)]
    assert positions == sorted(positions)


def test_bst_menu_min_max(monkeypatch, capsys):
    feed(monkeypatch, "2 50 2 30 2 70 6 7 0\n")
    menus.bst_menu(None)
    out = capsys.readouterr().out
    assert out.index(menus.MIN_KEY) < out.index(key(30))
    assert out.index(menus.MAX_KEY) < out.index(key(70))


def test_bst_menu_delete_then_search(monkeypatch, capsys):
    feed(monkeypatch, "2 50 2 30 2 70 3 30 4 30 0\n")
    code = menus.bst_menu(None)
    out = capsys.readouterr().out
    assert code == 0
    assert menus.KEY_FOUND_DELETE in out
    assert menus.KEY_ABSENT in out


def test_bst_menu_empty_tree(monkeypatch, capsys):
    feed(monkeypatch, "4 5 0\n")
    menus.bst_menu(None)
    out = capsys.readouterr().out
    assert menus.TREE_NOT_CREATED in out
    assert menus.TREE_EMPTY in out


def test_priority_queue_menu_extract_order(monkeypatch, capsys):
    feed(monkeypatch, "1 3 2 55 2 33 2 88 4 4 4 4 0\n")
    menus.priority_queue_menu(None)
    out = capsys.readouterr().out
    tail = out[out.index(menus.PQ_EXTRACTED):]
    assert tail.index(key(33)) < tail.index(key(55)) < tail.index(key(88))
    assert menus.PQ_EMPTY in out


def test_graph_menu_operations(monkeypatch, capsys, tmp_path):
    edges = tmp_path / "edges.txt"
    edges.write_text("0 1\n1 2\n", encoding="utf-8")
    feed(monkeypatch, "4 5 1 1 2 0 2 3 0 5 3 0 1 3 0 1 4 0\n")
    menus.graph_menu(["3", str(edges)])
    out = capsys.readouterr().out
    assert menus.EDGE_COUNT.format(2) in out
    assert menus.VERTEX_COUNT.format(3) in out
    assert out.index(key(2)) < out.index(key(0))
    assert menus.EDGE_ADDED in out
    assert menus.NODE_MISSING in out
    assert menus.EDGE_MISSING in out


def test_graph_menu_destroyed(monkeypatch, capsys, tmp_path):
    edges = tmp_path / "edges.txt"
    edges.write_text("0 1\n", encoding="utf-8")
    feed(monkeypatch, "6 4 0\n")
    menus.graph_menu(["2", str(edges)])
    out = capsys.readouterr().out
    assert menus.GRAPH_DESTROYED in out


def test_graph_menu_missing_file(monkeypatch, capsys, tmp_path):
    feed(monkeypatch, "0\n")
    code = menus.graph_menu(["2", str(tmp_path / "absent.txt")])
    capsys.readouterr()
    assert code == 2