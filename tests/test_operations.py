import pytest

from pushswap.operations import Operation, Stacks, parse_operation

NAMES = ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]
SAMPLE = [5, 3, 9, 1, 7]


def test_parse_every_operation_name():
    for name in NAMES:
        assert parse_operation(name).value == name
        assert str(parse_operation(name)) == name


@pytest.mark.parametrize("name", ["", "SA", "sa ", "rrrr", "p", "xx"])
def test_parse_unknown_operation_raises(name):
    with pytest.raises(ValueError):
        parse_operation(name)


def test_sa_swaps_top_two():
    stacks = Stacks(SAMPLE)
    stacks.sa()
    assert list(stacks.a) == [SAMPLE[1], SAMPLE[0]] + SAMPLE[2:]


def test_swap_twice_is_identity():
    stacks = Stacks(SAMPLE, SAMPLE)
    stacks.ss()
    stacks.ss()
    assert list(stacks.a) == SAMPLE
    assert list(stacks.b) == SAMPLE


def test_swap_on_short_stack_does_nothing():
    stacks = Stacks([4], [])
    stacks.sa()
    stacks.sb()
    assert list(stacks.a) == [4]
    assert list(stacks.b) == []


def test_pb_moves_top_to_b():
    stacks = Stacks(SAMPLE)
    stacks.pb()
    assert list(stacks.a) == SAMPLE[1:]
    assert list(stacks.b) == SAMPLE[:1]


def test_push_round_trip():
    stacks = Stacks(SAMPLE)
    for _ in SAMPLE:
        stacks.pb()
    assert list(stacks.a) == []
    assert list(stacks.b) == SAMPLE[::-1]
    for _ in SAMPLE:
        stacks.pa()
    assert list(stacks.a) == SAMPLE
    assert list(stacks.b) == []


def test_push_from_empty_does_nothing():
    stacks = Stacks(SAMPLE)
    stacks.pa()
    assert list(stacks.a) == SAMPLE
    assert list(stacks.b) == []


def test_ra_moves_top_to_bottom():
    stacks = Stacks(SAMPLE)
    stacks.ra()
    assert list(stacks.a) == SAMPLE[1:] + SAMPLE[:1]


def test_rra_moves_bottom_to_top():
    stacks = Stacks(SAMPLE)
    stacks.rra()
    assert list(stacks.a) == SAMPLE[-1:] + SAMPLE[:-1]


def test_rotation_inverses():
    stacks = Stacks(SAMPLE, SAMPLE[::-1])
    stacks.rr()
    stacks.rrr()
    assert list(stacks.a) == SAMPLE
    assert list(stacks.b) == SAMPLE[::-1]
    stacks.rb()
    stacks.rrb()
    assert list(stacks.b) == SAMPLE[::-1]


def test_full_rotation_is_identity():
    stacks = Stacks(SAMPLE)
    for _ in SAMPLE:
        stacks.ra()
    assert list(stacks.a) == SAMPLE


def test_apply_accepts_names_and_enum():
    by_name = Stacks(SAMPLE)
    by_enum = Stacks(SAMPLE)
    by_method = Stacks(SAMPLE)
    by_name.apply("rra")
    by_enum.apply(Operation.RRA)
    by_method.rra()
    assert list(by_name.a) == list(by_method.a)
    assert list(by_enum.a) == list(by_method.a)


def test_apply_unknown_raises():
    with pytest.raises(ValueError):
        Stacks(SAMPLE).apply("swap")


def test_history_recorded_only_when_asked():
    quiet = Stacks(SAMPLE)
    quiet.sa()
    assert quiet.history == []
    loud = Stacks(SAMPLE, record=True)
    for name in NAMES:
        loud.apply(name)
    assert [op.value for op in loud.history] == NAMES


def test_history_records_no_op_moves():
    stacks = Stacks([], record=True)
    stacks.pa()
    stacks.sa()
    assert stacks.history == [Operation.PA, Operation.SA]


def test_multiset_preserved_by_every_operation():
    stacks = Stacks(SAMPLE, [2, 8])
    before = sorted(list(stacks.a) + list(stacks.b))
    for name in NAMES * 3:
        stacks.apply(name)
        assert sorted(list(stacks.a) + list(stacks.b)) == before


def test_is_solved():
    assert Stacks(sorted(SAMPLE)).is_solved()
    assert Stacks([]).is_solved()
    assert Stacks([1, 1, 2]).is_solved()
    assert not Stacks(SAMPLE).is_solved()
    assert not Stacks(sorted(SAMPLE), [0]).is_solved()


def test_sorting_by_moves_reaches_solved():
    stacks = Stacks([2, 1, 3])
    assert not stacks.is_solved()
    stacks.sa()
    assert stacks.is_solved()