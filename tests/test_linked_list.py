import pytest

from classicds.linked_list import LinkedList


def test_push_and_pop_sequence():
    ls1 = LinkedList()
    for i in range(1, 6):
        ls1.push_back(i)
    ls2 = LinkedList()
    ls2.push_back(6)
    ls1.pop_back()
    ls1.pop_front()
    ls1.pop_front()
    assert list(ls2) == [6]
    assert list(ls1) == [3, 4]


def test_copy_is_independent():
    ls1 = LinkedList("xunyi")
    ls2 = LinkedList(ls1)
    ls2.pop_front()
    assert "".join(ls1) == "xunyi"
    assert "".join(ls2) == "unyi"


def test_pop_returns_values():
    ls = LinkedList([5, 2, 0, 1, 1])
    assert ls.pop_front() == 5
    assert ls.pop_back() == 1
    assert list(ls) == [2, 0, 1]


def test_push_front_order():
    ls = LinkedList()
    for ch in "nux":
        ls.push_front(ch)
    assert "".join(ls) == "xun"


def test_reversed_matches_list():
    items = [1, 2, 3, 4, 5, 6, 7]
    ls = LinkedList(items)
    assert list(reversed(ls)) == items[::-1]


@pytest.mark.parametrize("index", [0, 1, 3, 5, 6])
def test_insert_matches_list_insert(index):
    items = [10, 20, 30, 40, 50, 60]
    ls = LinkedList(items)
    ls.insert(index, 99)
    expected = list(items)
    expected.insert(index, 99)
    assert list(ls) == expected
    assert list(reversed(ls)) == expected[::-1]


@pytest.mark.parametrize("index", [0, 2, 4])
def test_erase_matches_list(index):
    items = ["a", "b", "c", "d", "e"]
    ls = LinkedList(items)
    removed = ls.erase(index)
    expected = list(items)
    assert removed == expected.pop(index)
    assert list(ls) == expected
    assert len(ls) == len(expected)


def test_insert_out_of_range():
    ls = LinkedList([1, 2])
    with pytest.raises(IndexError):
        ls.insert(3, 0)
    with pytest.raises(IndexError):
        ls.insert(-1, 0)


def test_erase_out_of_range():
    ls = LinkedList([1])
    with pytest.raises(IndexError):
        ls.erase(1)


def test_pop_empty_raises():
    ls = LinkedList()
    with pytest.raises(IndexError):
        ls.pop_back()
    with pytest.raises(IndexError):
        ls.pop_front()


def test_clear_empties_and_reusable():
    ls = LinkedList([1, 2, 3])
    ls.clear()
    assert len(ls) == 0
    assert list(ls) == []
    ls.push_back(4)
    assert list(ls) == [4]


def test_len_tracks_operations():
    ls = LinkedList(range(10))
    assert len(ls) == 10
    ls.pop_back()
    ls.erase(0)
    ls.insert(2, -1)
    assert len(ls) == 9
    assert len(list(ls)) == len(ls)


def test_equality():
    assert LinkedList([1, 2, 3]) == LinkedList([1, 2, 3])
    assert not LinkedList([1, 2]) == LinkedList([1, 2, 3])