import pytest

from pipex.linkedlist import LinkedList, Node, delete_node


def test_build_from_items_keeps_order():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_push_front():
    lst = LinkedList(["b", "c"])
    lst.push_front(Node("a"))
    assert list(lst) == ["a", "b", "c"]


def test_push_front_on_empty_list_clears_next():
    stale = Node("x", Node("y"))
    lst = LinkedList()
    lst.push_front(stale)
    assert list(lst) == ["x"]


def test_push_front_none_ignored():
    lst = LinkedList([1])
    lst.push_front(None)
    assert list(lst) == [1]


def test_push_back():
    lst = LinkedList([1])
    lst.push_back(Node(2))
    assert list(lst) == [1, 2]
    assert lst.last().content == 2


def test_push_back_on_empty():
    lst = LinkedList()
    node = Node("only")
    lst.push_back(node)
    assert lst.head is node
    assert lst.last() is node


def test_push_back_attaches_chain():
    lst = LinkedList([1])
    lst.push_back(Node(2, Node(3)))
    assert list(lst) == [1, 2, 3]


def test_push_back_none_ignored():
    lst = LinkedList([1, 2])
    lst.push_back(None)
    assert len(lst) == 2


def test_last_returns_tail_node():
    lst = LinkedList(["a", "b", "c"])
    tail = lst.last()
    assert tail.content == "c"
    assert tail.next is None


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_keeps_list():
    lst = LinkedList([1, 2])
    lst.clear(None)
    assert list(lst) == [1, 2]


def test_for_each_visits_every_content():
    seen = []
    lst = LinkedList(["x", "y"])
    lst.for_each(seen.append)
    assert seen == ["x", "y"]


def test_for_each_none_leaves_list():
    lst = LinkedList([5])
    lst.for_each(None)
    assert list(lst) == [5]


def test_map_builds_new_list():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda x: x * 10, lambda x: None)
    assert list(mapped) == [10, 20, 30]
    assert list(lst) == [1, 2, 3]


def test_map_of_empty_list():
    mapped = LinkedList().map(str, lambda x: None)
    assert len(mapped) == 0


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(x):
        if x == 3:
            raise RuntimeError("boom")
        return x + 100

    lst = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        lst.map(func, deleted.append)
    assert deleted == [101, 102]


def test_map_requires_functions():
    lst = LinkedList([1])
    with pytest.raises(TypeError):
        lst.map(None, lambda x: None)
    with pytest.raises(TypeError):
        lst.map(str, None)


def test_delete_node_calls_delete():
    deleted = []
    node = Node("data")
    delete_node(node, deleted.append)
    assert deleted == ["data"]
    assert node.content is None


def test_delete_node_missing_arguments():
    node = Node("data")
    delete_node(node, None)
    delete_node(None, lambda x: None)
    assert node.content == "data"