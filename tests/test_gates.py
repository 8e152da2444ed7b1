import itertools

import pytest

from logicchips.gates import and_, buffer, nand, nor, not_


@pytest.mark.parametrize(
    "a, b, expected", [(0, 0, 1), (0, 1, 1), (1, 0, 1), (1, 1, 0)]
)
def test_nand_two_inputs(a, b, expected):
    assert nand(a, b) == expected


@pytest.mark.parametrize(
    "a, b, expected", [(0, 0, 1), (0, 1, 0), (1, 0, 0), (1, 1, 0)]
)
def test_nor_two_inputs(a, b, expected):
    assert nor(a, b) == expected


@pytest.mark.parametrize(
    "a, b, expected", [(0, 0, 0), (0, 1, 0), (1, 0, 0), (1, 1, 1)]
)
def test_and_two_inputs(a, b, expected):
    assert and_(a, b) == expected


def test_not_and_buffer():
    assert not_(0) == 1
    assert not_(1) == 0
    assert buffer(0) == 0
    assert buffer(1) == 1


@pytest.mark.parametrize("combo", list(itertools.product((0, 1), repeat=3)))
def test_three_input_gates_are_complements(combo):
    assert nand(*combo) == not_(and_(*combo))
    assert and_(*combo) == (1 if all(combo) else 0)
    assert nor(*combo) == (0 if any(combo) else 1)


@pytest.mark.parametrize("value", [0, 1])
def test_double_inversion_is_buffer(value):
    assert not_(not_(value)) == buffer(value)


@pytest.mark.parametrize("value", [2, 3, 6, 7, -1])
def test_outputs_are_single_bits(value):
    for result in (nand(value, value), nor(value, 1), and_(value, 1), not_(value), buffer(value)):
        assert result in (0, 1)


def test_only_lowest_bit_matters():
    assert buffer(2) == buffer(0)
    assert buffer(3) == buffer(1)
    assert not_(2) == not_(0)


@pytest.mark.parametrize("gate", [nand, nor, and_])
def test_no_inputs_is_an_error(gate):
    with pytest.raises(TypeError):
        gate()