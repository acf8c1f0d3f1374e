import pytest
from hypothesis import given
from hypothesis import strategies as st

from structdiff.slots import DEFAULT_CAPACITY, MAX_CAPACITY, ArrayMap

CAP = 8


def test_construction_preserves_order():
    values = ["a", "b", "c"]
    am = ArrayMap(values)
    assert list(am) == values
    assert len(am) == len(values)
    assert am.capacity == DEFAULT_CAPACITY


def test_capacity_too_large():
    with pytest.raises(ValueError):
        ArrayMap(capacity=MAX_CAPACITY + 1)


def test_too_many_values():
    with pytest.raises(ValueError):
        ArrayMap(range(CAP + 1), capacity=CAP)


def test_insert_at_front():
    am = ArrayMap([1, 2, 3], capacity=CAP)
    am.insert(0, 9)
    assert list(am) == [9, 1, 2, 3]


def test_insert_into_full_raises():
    am = ArrayMap(range(CAP), capacity=CAP)
    with pytest.raises(ValueError):
        am.insert(0, 1)


def test_insert_beyond_capacity_raises():
    am = ArrayMap(capacity=CAP)
    with pytest.raises(IndexError):
        am.insert(CAP, 1)


def test_remove_returns_value():
    values = list(range(5))
    am = ArrayMap(values, capacity=CAP)
    assert am.remove(2) == values[2]
    assert list(am) == values[:2] + values[3:]


def test_remove_missing_raises():
    am = ArrayMap([1], capacity=CAP)
    with pytest.raises(IndexError):
        am.remove(1)


def test_getitem_out_of_range():
    am = ArrayMap([5], capacity=CAP)
    assert am[0] == 5
    with pytest.raises(IndexError):
        _ = am[1]
    empty = ArrayMap([], capacity=CAP)
    with pytest.raises(IndexError):
        _ = empty[0]


def test_swap_same_index_is_noop_even_out_of_range():
    am = ArrayMap([1, 2], capacity=CAP)
    am.swap(5, 5)
    assert list(am) == [1, 2]


def test_swap_out_of_range_raises():
    am = ArrayMap([1, 2], capacity=CAP)
    with pytest.raises(IndexError):
        am.swap(0, 3)


def test_drain_middle():
    values = list(range(10))
    am = ArrayMap(values, capacity=16)
    assert list(am.drain(2, 5)) == values[2:5]
    assert list(am) == values[:2] + values[5:]


def test_drain_everything():
    values = list(range(4))
    am = ArrayMap(values, capacity=CAP)
    assert list(am.drain()) == values
    assert len(am) == 0


def test_extend_stops_at_capacity():
    am = ArrayMap([1, 2], capacity=4)
    extra = list(range(10, 20))
    am.extend(iter(extra))
    assert list(am) == [1, 2] + extra[:2]
    assert am.is_full


@given(
    st.lists(st.integers(), max_size=CAP),
    st.lists(
        st.tuples(
            st.sampled_from(["insert", "remove", "swap", "drain", "set", "extend"]),
            st.integers(0, 10),
            st.integers(0, 10),
        ),
        max_size=30,
    ),
)
def test_matches_list_model(initial, ops):
    am = ArrayMap(initial, capacity=CAP)
    model = list(initial)
    for name, a, b in ops:
        if name == "insert":
            if a >= CAP or (len(model) < CAP and a > len(model)):
                with pytest.raises(IndexError):
                    am.insert(a, b)
            elif len(model) == CAP:
                with pytest.raises(ValueError):
                    am.insert(a, b)
            else:
                am.insert(a, b)
                model.insert(a, b)
        elif name == "remove":
            if a < len(model):
                assert am.remove(a) == model.pop(a)
            else:
                with pytest.raises(IndexError):
                    am.remove(a)
        elif name == "swap":
            if a == b or (a < len(model) and b < len(model)):
                am.swap(a, b)
                if a != b:
                    model[a], model[b] = model[b], model[a]
            else:
                with pytest.raises(IndexError):
                    am.swap(a, b)
        elif name == "drain":
            lo, hi = sorted((a, b))
            assert list(am.drain(lo, hi)) == model[lo:hi]
            del model[lo:hi]
        elif name == "set":
            if a < len(model):
                am[a] = b
                model[a] = b
                assert am[a] == b
            else:
                with pytest.raises(IndexError):
                    am[a] = b
        else:
            am.extend([a, b])
            model.extend([a, b][: CAP - len(model)])
        assert list(am) == model
        assert len(am) == len(model)