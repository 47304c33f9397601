import pytest

from stilib.dynarray import DynArray


def _int_array():
    array = DynArray(0)
    for i in range(10):
        array.push(i)
    return array


def test_push_grows_size_and_capacity():
    array = _int_array()
    assert len(array) == 10
    assert array.capacity == 16
    assert list(array) == list(range(10))


def test_get_by_index():
    array = _int_array()
    for i in range(10):
        assert array[i] == i


def test_find_present_value():
    array = _int_array()
    finder = array.find(5, lambda a, b: a == b)
    assert finder.is_found
    assert finder.index == 5


def test_find_missing_value():
    array = _int_array()
    finder = array.find(42, lambda a, b: a == b)
    assert not finder.is_found


def test_swap_first_and_fifth():
    array = _int_array()
    array.swap(0, 4)
    assert list(array) == [4, 1, 2, 3, 0, 5, 6, 7, 8, 9]


def test_for_each_visits_in_order():
    array = _int_array()
    seen = []
    array.for_each(lambda item, ctx: ctx.append(item), seen)
    assert seen == list(range(10))


def _boxed_array(deleted):
    array = DynArray(10, deleter=lambda box: deleted.append(box[0]))
    for i in range(10):
        array.push([i])
    return array


def test_reserved_capacity_is_not_exceeded_by_pushes():
    array = _boxed_array([])
    assert len(array) == 10
    assert array.capacity == 10


def test_for_each_sum():
    array = _boxed_array([])
    total = [0]

    def summer(box, ctx):
        ctx[0] += box[0]

    array.for_each(summer, total)
    assert total[0] == 45


def test_erase_if_removes_and_deletes_matches():
    deleted = []
    array = _boxed_array(deleted)
    array.erase_if(3, lambda value, box: value == box[0])
    assert [box[0] for box in array] == [0, 1, 2, 4, 5, 6, 7, 8, 9]
    assert deleted == [3]


def test_destroy_deletes_every_element():
    deleted = []
    array = _boxed_array(deleted)
    array.erase_if(3, lambda value, box: value == box[0])
    array.destroy()
    assert deleted == [3, 0, 1, 2, 4, 5, 6, 7, 8, 9]
    assert len(array) == 0
    assert array.capacity == 0


def test_reserve_never_shrinks():
    array = DynArray(8)
    array.reserve(2)
    assert array.capacity == 8
    array.reserve(20)
    assert array.capacity == 20


def test_reserve_negative_raises():
    with pytest.raises(ValueError):
        DynArray(-1)


def test_back_and_pop_back():
    deleted = []
    array = DynArray(deleter=deleted.append)
    array.push("x")
    array.push("y")
    assert array.back() == "y"
    array.pop_back()
    assert deleted == ["y"]
    assert list(array) == ["x"]


def test_pop_back_empty_raises():
    with pytest.raises(IndexError):
        DynArray().pop_back()


def test_back_empty_raises():
    with pytest.raises(IndexError):
        DynArray().back()


def test_erase_middle_keeps_order():
    deleted = []
    array = DynArray(deleter=deleted.append)
    for value in "abcde":
        array.push(value)
    array.erase(1)
    assert list(array) == ["a", "c", "d", "e"]
    assert deleted == ["b"]


def test_erase_last():
    array = _int_array()
    array.erase(9)
    assert list(array) == list(range(9))


def test_erase_out_of_range_raises():
    with pytest.raises(IndexError):
        _int_array().erase(10)


def test_get_out_of_range_raises():
    with pytest.raises(IndexError):
        _int_array()[10]


def test_setitem_replaces_without_deleting():
    deleted = []
    array = DynArray(deleter=deleted.append)
    array.push(1)
    array[0] = 2
    assert array[0] == 2
    assert deleted == []


def test_batch_push_extends_size():
    array = DynArray(5)
    array.batch_push([1, 2, 3], 0)
    assert list(array) == [1, 2, 3]
    array.batch_push([4, 5], 3)
    assert list(array) == [1, 2, 3, 4, 5]


def test_batch_push_overwrites_inside():
    array = DynArray(4)
    array.batch_push([1, 2, 3, 4], 0)
    array.batch_push([9], 1)
    assert list(array) == [1, 9, 3, 4]


def test_batch_push_beyond_capacity_raises():
    array = DynArray(2)
    with pytest.raises(IndexError):
        array.batch_push([1, 2, 3], 0)