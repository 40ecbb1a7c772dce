import pytest

from burstkit.digits import DIGIT_CAPACITY, U64_MAX, to_digit_array


def test_known_id_decomposes_big_endian():
    """The reference account ID yields 18 significant digits and zero padding."""
    digits, length = to_digit_array(399812073269533888)
    assert digits == [3, 9, 9, 8, 1, 2, 0, 7, 3, 2, 6, 9, 5, 3, 3, 8, 8, 8, 0, 0]
    assert length == 18


def test_zero_is_a_single_digit():
    digits, length = to_digit_array(0)
    assert digits == [0] * DIGIT_CAPACITY
    assert length == 1


def test_u64_max_fills_the_buffer():
    digits, length = to_digit_array(U64_MAX)
    assert length == DIGIT_CAPACITY
    assert "".join(map(str, digits)) == "18446744073709551615"


@pytest.mark.parametrize("bad", [-1, U64_MAX + 1])
def test_out_of_range_rejected(bad):
    with pytest.raises(ValueError, match="numeric ID must be"):
        to_digit_array(bad)
