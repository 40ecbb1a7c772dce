import random

import pytest
import reedsolo

from burstkit.address import encode_id
from burstkit.rs_codec import (
    CODEWORD_LENGTH,
    DATA_LENGTH,
    PARITY_LENGTH,
    append_parity,
    encode_parity,
    is_codeword_valid,
    syndromes,
)


def test_zero_data_has_zero_parity():
    assert encode_parity([0] * DATA_LENGTH) == [0, 0, 0, 0]


def test_encoded_codewords_have_zero_syndromes():
    for value in (0, 1, 31, 32, 399812073269533888, 2**60, 2**64 - 1):
        codeword = encode_id(value)
        assert syndromes(codeword) == [0, 0, 0, 0]
        assert is_codeword_valid(codeword)


def test_top_data_symbol_takes_part_in_parity():
    """IDs >= 2**60 use data position 12; it must be covered by the parity."""
    codeword = [0] * CODEWORD_LENGTH
    codeword[12] = 5
    append_parity(codeword)
    assert codeword[DATA_LENGTH:] != [0, 0, 0, 0]
    assert is_codeword_valid(codeword)


@pytest.mark.parametrize("position", range(CODEWORD_LENGTH))
def test_any_single_symbol_error_is_detected(position):
    codeword = encode_id(399812073269533888)
    for delta in range(1, 32):
        corrupted = list(codeword)
        corrupted[position] ^= delta
        assert not is_codeword_valid(corrupted)


def test_wrong_length_rejected():
    with pytest.raises(ValueError, match="17 symbols"):
        syndromes([0] * 16)
    with pytest.raises(ValueError, match="13 data symbols"):
        encode_parity([0] * 12)


def _full_length_word(codeword):
    # Shortened code: exponents 13-26 are implicit zeros between data and parity.
    return list(codeword[:DATA_LENGTH]) + [0] * 14 + list(codeword[DATA_LENGTH:])


def test_parity_and_check_agree_with_reedsolo():
    """The parity is reedsolo's RS(31, 27) over GF(32) with fcr=27, generator 2, shortened to 17."""
    rng = random.Random(20240601)
    try:
        reedsolo.init_tables(prim=0x25, generator=2, c_exp=5)
        for _ in range(500):
            data = [rng.randrange(32) for _ in range(DATA_LENGTH)]
            expected = reedsolo.rs_encode_msg(data + [0] * 14, PARITY_LENGTH, fcr=27, generator=2)
            assert encode_parity(data) == list(expected[-PARITY_LENGTH:])

        word = _full_length_word(encode_id(399812073269533888))
        assert reedsolo.rs_check(word, PARITY_LENGTH, fcr=27, generator=2)
        word[3] ^= 1
        assert not reedsolo.rs_check(word, PARITY_LENGTH, fcr=27, generator=2)
        assert not is_codeword_valid(word[:DATA_LENGTH] + word[-PARITY_LENGTH:])
    finally:
        reedsolo.init_tables()
