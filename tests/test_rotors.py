import pytest

from rotorlab.cipher.alphabet import Alphabet
from rotorlab.cipher.errors import InvalidSetting, InvalidSymbol, ReflectorConstraintViolated
from rotorlab.cipher.permutation import Permutation
from rotorlab.cipher.rotors import FixedRotor, MovingRotor, Reflector
from rotorlab.cipher.rotors_builtin import rotor_spec


UPPER = Alphabet()
ROTOR_I = Permutation(rotor_spec("I").cycles, UPPER)


def test_capabilities():
    refl = Reflector("B", Permutation(rotor_spec("B").cycles, UPPER))
    fixed = FixedRotor("Beta", Permutation(rotor_spec("Beta").cycles, UPPER))
    moving = MovingRotor("I", ROTOR_I, "Q")

    assert (refl.reflecting(), refl.rotates(), refl.notches(), refl.kind) == (True, False, "", "reflector")
    assert (fixed.reflecting(), fixed.rotates(), fixed.notches(), fixed.kind) == (False, False, "", "fixed")
    assert (moving.reflecting(), moving.rotates(), moving.notches(), moving.kind) == (False, True, "Q", "moving")


def test_forward_matches_wiring_at_setting_zero():
    rotor = MovingRotor("I", ROTOR_I, "Q")
    wiring = "EKMFLGDQVZNTOWYHXUSPAIBRCJ"
    for i, ch in enumerate(wiring):
        assert rotor.convert_forward(i) == UPPER.to_index(ch)


def test_forward_applies_contact_shift():
    rotor = MovingRotor("I", ROTOR_I, "Q")
    rotor.set("B")
    # A enters at contact B, which is wired to K; the offset turns K into J.
    assert rotor.convert_forward(UPPER.to_index("A")) == UPPER.to_index("J")


@pytest.mark.parametrize("setting", [0, 1, 7, 25])
def test_backward_inverts_forward(setting):
    rotor = MovingRotor("I", ROTOR_I, "Q")
    rotor.set(setting)
    for i in range(26):
        assert rotor.convert_backward(rotor.convert_forward(i)) == i
        assert rotor.convert_forward(rotor.convert_backward(i)) == i


def test_moving_rotor_advances_and_wraps():
    rotor = MovingRotor("I", ROTOR_I, "Q")
    rotor.set("Z")
    rotor.advance()
    assert rotor.setting == 0
    rotor.set("P")
    assert not rotor.at_notch()
    rotor.advance()
    assert rotor.at_notch()


def test_multiple_notches():
    rotor = MovingRotor("VI", Permutation(rotor_spec("VI").cycles, UPPER), "ZM")
    rotor.set("M")
    assert rotor.at_notch()
    rotor.set("Z")
    assert rotor.at_notch()
    rotor.set("A")
    assert not rotor.at_notch()


def test_fixed_rotor_never_advances():
    rotor = FixedRotor("Beta", Permutation(rotor_spec("Beta").cycles, UPPER))
    rotor.set("C")
    rotor.advance()
    assert rotor.setting == 2
    assert not rotor.at_notch()


def test_set_rejects_symbols_outside_alphabet():
    rotor = MovingRotor("I", ROTOR_I, "Q")
    with pytest.raises(InvalidSetting):
        rotor.set("a")
    rotor.set(27)
    assert rotor.setting == 1


def test_notches_must_be_in_alphabet():
    with pytest.raises(InvalidSymbol):
        MovingRotor("I", ROTOR_I, "q")


def test_reflector_requires_derangement():
    abcd = Alphabet("ABCD")
    with pytest.raises(ReflectorConstraintViolated):
        Reflector("R", Permutation("(AB)", abcd))
    with pytest.raises(ReflectorConstraintViolated):
        Reflector("R", Permutation("(AB) (C) (D)", abcd))


def test_reflector_has_one_position():
    refl = Reflector("R", Permutation("(AC) (BD)", Alphabet("ABCD")))
    refl.set("A")
    refl.set(0)
    with pytest.raises(ReflectorConstraintViolated):
        refl.set("B")
    assert refl.setting == 0
    with pytest.raises(InvalidSetting):
        refl.set("Z")
