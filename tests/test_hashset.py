import pytest

from calgcollections.hashset import HashSet


def _nocase_hash(value):
    return hash(value.lower())


def _nocase_equal(a, b):
    return a.lower() == b.lower()


def test_add_and_contains():
    s = HashSet()
    assert s.add("apple") is True
    assert s.add("pear") is True
    assert "apple" in s
    assert "pear" in s
    assert "plum" not in s
    assert len(s) == 2


def test_duplicate_add_rejected():
    s = HashSet()
    assert s.add(5) is True
    assert s.add(5) is False
    assert len(s) == 1


def test_remove():
    s = HashSet.from_iterable(range(10))
    assert s.remove(3) is True
    assert 3 not in s
    assert len(s) == 9
    assert s.remove(3) is False
    assert s.remove(100) is False
    assert len(s) == 9


def test_many_values_survive_enlargement():
    count = 10000
    s = HashSet()
    for i in range(count):
        assert s.add(i) is True
        assert len(s) == i + 1
    assert all(i in s for i in range(count))
    assert -1 not in s
    assert sorted(s.to_list()) == list(range(count))


def test_remove_all_values():
    count = 5000
    s = HashSet.from_iterable(range(count))
    for i in range(count):
        assert s.remove(i) is True
    assert len(s) == 0
    assert s.to_list() == []


def test_iteration_yields_each_value_once():
    values = [f"value {i}" for i in range(500)]
    s = HashSet.from_iterable(values)
    seen = list(s)
    assert len(seen) == len(values)
    assert set(seen) == set(values)


def test_iterating_empty_set():
    assert list(HashSet()) == []


def test_colliding_hashes():
    s = HashSet(lambda v: 0)
    for i in range(50):
        assert s.add(i) is True
    assert len(s) == 50
    assert all(i in s for i in range(50))
    assert s.remove(25) is True
    assert 25 not in s
    assert len(s) == 49


def test_custom_equality():
    s = HashSet(_nocase_hash, _nocase_equal)
    assert s.add("Hello") is True
    assert s.add("HELLO") is False
    assert "hello" in s
    assert s.remove("hElLo") is True
    assert len(s) == 0


def test_free_func_called_on_remove():
    freed = []
    s = HashSet(free_func=freed.append)
    s.add("a")
    s.add("b")
    s.add("a")
    assert freed == []
    s.remove("a")
    assert freed == ["a"]
    s.remove("zzz")
    assert freed == ["a"]


def test_clear_frees_everything():
    freed = []
    s = HashSet(free_func=freed.append)
    for i in range(300):
        s.add(i)
    s.clear()
    assert len(s) == 0
    assert sorted(freed) == list(range(300))
    assert 5 not in s
    assert s.add(5) is True
    assert len(s) == 1


def test_union():
    first = HashSet.from_iterable([1, 2, 3, 4])
    second = HashSet.from_iterable([3, 4, 5, 6])
    result = first.union(second)
    assert sorted(result) == [1, 2, 3, 4, 5, 6]
    assert len(result) == 6
    assert len(first) == 4
    assert len(second) == 4


def test_intersection():
    first = HashSet.from_iterable([1, 2, 3, 4])
    second = HashSet.from_iterable([3, 4, 5, 6])
    result = first.intersection(second)
    assert sorted(result) == [3, 4]
    assert len(result) == 2


def test_intersection_uses_other_equality():
    first = HashSet.from_iterable(["Alpha", "beta"], _nocase_hash)
    second = HashSet.from_iterable(["ALPHA", "gamma"], _nocase_hash, _nocase_equal)
    result = first.intersection(second)
    assert result.to_list() == ["Alpha"]
    assert result.add("alpha") is False


@pytest.mark.parametrize("values", [[], [1], list(range(1000))])
def test_to_list_matches_contents(values):
    s = HashSet.from_iterable(values)
    assert sorted(s.to_list()) == values
    assert len(s.to_list()) == len(s)