from dsakit.linked_list import DoublyLinkedList, Node


def test_empty_list():
    dll = DoublyLinkedList()
    assert len(dll) == 0
    assert list(dll) == []
    assert list(dll.backward()) == []
    assert dll.head is None and dll.tail is None


def test_append_to_empty_sets_head_and_tail():
    dll = DoublyLinkedList()
    node = dll.append(5)
    assert dll.head is node
    assert dll.tail is node
    assert node.prev is None and node.next is None
    assert list(dll) == [5]


def test_append_links_both_ways():
    dll = DoublyLinkedList([10, 20, 30, 40])
    assert list(dll) == [10, 20, 30, 40]
    assert list(dll.backward()) == [40, 30, 20, 10]
    assert len(dll) == 4
    assert dll.head.next.prev is dll.head


def test_reverse_source_example():
    dll = DoublyLinkedList([10, 20, 30, 40])
    dll.reverse()
    assert list(dll) == [40, 30, 20, 10]
    assert list(dll.backward()) == [10, 20, 30, 40]
    assert dll.head.prev is None
    assert dll.tail.next is None


def test_reverse_twice_restores_order():
    values = ["a", "b", "c"]
    dll = DoublyLinkedList(values)
    dll.reverse()
    dll.reverse()
    assert list(dll) == values


def test_reverse_empty_and_single():
    empty = DoublyLinkedList()
    empty.reverse()
    assert list(empty) == []
    single = DoublyLinkedList([1])
    single.reverse()
    assert list(single) == [1]
    assert single.head is single.tail


def test_append_after_reverse():
    dll = DoublyLinkedList([1, 2, 3])
    dll.reverse()
    dll.append(0)
    assert list(dll) == [3, 2, 1, 0]
    assert list(dll.backward()) == [0, 1, 2, 3]
    assert len(dll) == 4


def test_node_equality_is_identity():
    first = Node(1)
    second = Node(1)
    assert first.data == 1
    assert first.prev is None and first.next is None
    assert (first == second) is False
    assert (first == first) is True