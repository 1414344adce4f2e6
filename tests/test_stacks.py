import pytest

from pushswap.stacks import Element, Stacks


def test_initial_state():
    s = Stacks([3, 1, 2])
    assert s.a_values == [3, 1, 2]
    assert s.b_values == []
    assert s.moves == []
    assert all(not e.is_lis and e.bucket == 0 for e in s.a)


def test_accepts_existing_elements():
    e = Element(7, is_lis=True, bucket=2)
    s = Stacks([e, 4])
    assert s.a[0] is e
    assert s.a_values == [7, 4]


def test_pb_then_pa_round_trip():
    s = Stacks([1, 2, 3])
    s.pb()
    s.pb()
    assert s.a_values == [3]
    assert s.b_values == [2, 1]
    s.pa()
    s.pa()
    assert s.a_values == [1, 2, 3]
    assert s.b_values == []
    assert s.moves == ["pb", "pb", "pa", "pa"]


def test_push_from_empty_changes_nothing_but_is_recorded():
    s = Stacks([1])
    s.pa()
    assert s.a_values == [1]
    assert s.b_values == []
    assert s.moves == ["pa"]


def test_sa_swaps_top_two():
    s = Stacks([1, 2, 3])
    s.sa()
    assert s.a_values == [2, 1, 3]
    s.sa()
    assert s.a_values == [1, 2, 3]


def test_swap_with_single_element_is_noop():
    s = Stacks([5])
    s.sa()
    s.sb()
    assert s.a_values == [5]
    assert s.moves == ["sa", "sb"]


def test_ss_swaps_both():
    s = Stacks([1, 2, 3, 4])
    s.pb()
    s.pb()
    s.ss()
    assert s.a_values == [4, 3]
    assert s.b_values == [1, 2]


def test_ra_moves_top_to_bottom():
    s = Stacks([1, 2, 3])
    s.ra()
    assert s.a_values == [2, 3, 1]


def test_rra_moves_bottom_to_top():
    s = Stacks([1, 2, 3])
    s.rra()
    assert s.a_values == [3, 1, 2]


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [9, -3, 0], [42]])
def test_rotate_and_reverse_rotate_are_inverse(values):
    s = Stacks(values)
    s.ra()
    s.rra()
    assert s.a_values == values
    s.rra()
    s.ra()
    assert s.a_values == values


def test_full_rotation_restores_order():
    values = [4, 8, 15, 16]
    s = Stacks(values)
    for _ in values:
        s.ra()
    assert s.a_values == values


def test_rr_and_rrr_act_on_both():
    s = Stacks([1, 2, 3, 4, 5, 6])
    for _ in range(3):
        s.pb()
    assert s.b_values == [3, 2, 1]
    s.rr()
    assert s.a_values == [5, 6, 4]
    assert s.b_values == [2, 1, 3]
    s.rrr()
    assert s.a_values == [4, 5, 6]
    assert s.b_values == [3, 2, 1]


def test_rb_and_rrb():
    s = Stacks([1, 2, 3])
    s.pb()
    s.pb()
    s.rb()
    assert s.b_values == [1, 2]
    s.rrb()
    assert s.b_values == [2, 1]
    assert s.moves[-2:] == ["rb", "rrb"]


def test_moves_preserve_multiset_of_values():
    values = [7, 3, 9, 1, 5]
    s = Stacks(values)
    for move in (s.pb, s.ra, s.pb, s.ss, s.rrr, s.pa, s.rr, s.sb):
        move()
    assert sorted(s.a_values + s.b_values) == sorted(values)


def test_element_identity_travels_between_stacks():
    s = Stacks([10, 20])
    first = s.a[0]
    s.pb()
    assert s.b[0] is first
    s.pa()
    assert s.a[0] is first