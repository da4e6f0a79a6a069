import pytest

from rotorlab.cipher.alphabet import Alphabet, UPPER
from rotorlab.cipher.errors import (
    IndexOutOfRange,
    InvalidAlphabet,
    InvalidSymbol,
    MalformedPermutation,
)
from rotorlab.cipher.permutation import Permutation, cycles_from_wiring


ROTOR_I_VARIANT = "(ALTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)"


# ---------------------------------------------------------------------------
# Alphabet
# ---------------------------------------------------------------------------

def test_alphabet_indexing():
    a = Alphabet("ABCD")
    assert a.size() == 4
    assert len(a) == 4
    assert a.contains("C") and "C" in a
    assert not a.contains("E")
    for i in range(a.size()):
        assert a.to_index(a.to_char(i)) == i


def test_alphabet_domain_errors():
    a = Alphabet("ABCD")
    with pytest.raises(InvalidSymbol):
        a.to_index("Z")
    with pytest.raises(IndexOutOfRange):
        a.to_char(4)
    with pytest.raises(IndexOutOfRange):
        a.to_char(-1)
    assert a.wrap(-1) == 3
    assert a.wrap(9) == 1


@pytest.mark.parametrize("symbols", ["", "ABCA", "AB(D", "AB*D", "AB D"])
def test_alphabet_rejects_bad_symbol_sets(symbols):
    with pytest.raises(InvalidAlphabet):
        Alphabet(symbols)


def test_default_alphabet_is_upper_case():
    assert Alphabet() == Alphabet(UPPER)


# ---------------------------------------------------------------------------
# Permutation
# ---------------------------------------------------------------------------

def test_identity_permutation():
    p = Permutation("", Alphabet())
    for i in range(26):
        assert p.permute(i) == i
        assert p.invert(i) == i
    assert p.permute_char("Q") == "Q"
    assert not p.derangement()


def test_permute_and_invert():
    p = Permutation(ROTOR_I_VARIANT, Alphabet())
    assert p.permute(0) == 11
    assert p.permute(22) == 1
    assert p.invert(0) == 20
    assert p.invert(18) == 18
    assert p.permute_char("U") == "A"
    assert p.invert_char("A") == "U"


def test_two_symbol_cycle_inverse():
    p = Permutation("(BA)", Alphabet())
    assert p.invert(0) == 1
    assert p.invert(2) == 2


def test_single_symbol_alphabet():
    p = Permutation("(B)", Alphabet("B"))
    assert p.invert_char("B") == "B"
    assert p.permute(0) == 0
    assert p.invert(0) == 0


def test_indices_wrap_modulo_size():
    p = Permutation("(ABCDEFGHIJKLMNOPQRSTUVXYZ)", Alphabet())
    assert p.permute(27) == 2
    assert p.permute(29) == 4
    assert p.invert(29) == 2
    assert p.invert(31) == 4
    assert p.permute(-1) == 0


def test_permute_invert_are_inverses():
    p = Permutation(ROTOR_I_VARIANT, Alphabet())
    for i in range(p.size()):
        assert p.invert(p.permute(i)) == i
        assert p.permute(p.invert(i)) == i


def test_whitespace_and_empty_groups_ignored():
    a = Alphabet("ABCD")
    assert Permutation("(AB)(CD)", a) == Permutation("  ( A B ) ( C D ) ()", a)
    assert Permutation("()", a).cycles == ()


@pytest.mark.parametrize(
    "cycles",
    ["(AB) (BC)", "(ABA)", "(AX)", "AB", "(AB", "(AB))", "((AB))"],
)
def test_malformed_cycles(cycles):
    with pytest.raises(MalformedPermutation):
        Permutation(cycles, Alphabet("ABCD"))


def test_derangement():
    assert not Permutation("(BACD)", Alphabet("ABCDE")).derangement()
    assert not Permutation("(ABC)", Alphabet("ABCD")).derangement()
    assert Permutation("(AB)", Alphabet("AB")).derangement()
    assert Permutation("(AB) (CD)", Alphabet("ABCD")).derangement()


def test_singleton_cycle_is_not_a_derangement():
    # Full coverage of the alphabet, but C maps to itself.
    assert not Permutation("(AB) (C)", Alphabet("ABC")).derangement()


def test_cycles_from_wiring():
    assert cycles_from_wiring("EKMFLGDQVZNTOWYHXUSPAIBRCJ", Alphabet()) == (
        "(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ)"
    )
    p = Permutation.from_mapping("BADC", Alphabet("ABCD"))
    assert p.cycles == ("AB", "CD")
    assert p.wiring() == "BADC"
    assert p.is_involution()


@pytest.mark.parametrize("wiring", ["ABC", "AABC", "ABCE"])
def test_bad_wiring(wiring):
    with pytest.raises(MalformedPermutation):
        cycles_from_wiring(wiring, Alphabet("ABCD"))
