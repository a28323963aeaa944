import copy

import pytest

from tlib.containers import Bitset, LimitedStack, PointerVector, Ref, valid_index


def test_limited_stack_order():
    stack = LimitedStack(3)
    stack.push("a")
    stack.push("b")
    assert stack.bottom() == "a"
    assert stack.top() == "b"
    assert list(stack) == ["a", "b"]
    assert len(stack) == 2


def test_limited_stack_full_push_drops_newest():
    stack = LimitedStack(2)
    for value in ("a", "b", "c"):
        stack.push(value)
    assert list(stack) == ["a", "b"]
    assert stack.top() == "b"


def test_limited_stack_shrink_pops_from_top():
    stack = LimitedStack(5)
    for value in range(5):
        stack.push(value)
    stack.set_max_size(2)
    assert list(stack) == [0, 1]
    assert stack.max_size == 2


def test_limited_stack_pop_and_clear():
    stack = LimitedStack(4)
    stack.push(1)
    stack.push(2)
    assert stack.pop() == 2
    stack.clear()
    assert len(stack) == 0
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()
    with pytest.raises(IndexError):
        stack.bottom()


def test_bitset_initialised_from_flags():
    bits = Bitset(8, [(0, True), (1, False), (2, True)])
    assert bits.test(0) is True
    assert bits.test(1) is False
    assert bits.test(2) is True
    assert bits.count() == 2
    assert len(bits) == 8


def test_bitset_set_and_reset():
    bits = Bitset(4)
    bits.set(3)
    assert bits.test(3)
    bits.set(3, False)
    assert not bits.test(3)
    bits.set(1)
    bits.reset()
    assert bits.count() == 0


def test_bitset_out_of_range():
    bits = Bitset(4)
    with pytest.raises(IndexError):
        bits.test(4)
    with pytest.raises(IndexError):
        bits.set(-1)


def test_valid_index():
    items = [1, 2, 3]
    assert valid_index(items, 0)
    assert valid_index(items, 2)
    assert not valid_index(items, 3)
    assert not valid_index(items, -1)


def test_pointer_vector_emplace_and_access():
    vec = PointerVector(dict)
    first = vec.emplace_back()
    second = vec.emplace_back(list)
    assert vec.at(0) is first
    assert vec[1] is second
    assert isinstance(second, list)
    assert len(vec) == 2
    assert list(reversed(vec)) == [second, first]


def test_pointer_vector_push_erase_clear():
    vec = PointerVector()
    a, b, c = object(), object(), object()
    for item in (a, b, c):
        vec.push_back(item)
    vec.erase(1)
    assert list(vec) == [a, c]
    vec.clear()
    assert len(vec) == 0


def test_pointer_vector_errors():
    vec = PointerVector()
    with pytest.raises(TypeError):
        vec.emplace_back()
    with pytest.raises(IndexError):
        vec.at(0)
    vec.push_back(1)
    with pytest.raises(IndexError):
        vec.at(-1)
    with pytest.raises(TypeError):
        copy.copy(vec)


def test_ref_identity_equality():
    a = [1]
    b = [1]
    assert Ref(a) == Ref(a)
    assert not (Ref(a) == Ref(b))
    assert Ref(a).get() is a
    assert len({Ref(a), Ref(a), Ref(b)}) == 2