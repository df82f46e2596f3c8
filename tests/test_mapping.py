import string

import pytest

from enigmamachine.core.catalog import (
    REFLECTORS,
    get_reflector_wiring,
    get_rotor,
    list_reflectors,
    list_rotors,
)
from enigmamachine.core.common import index_letter, letter_index
from enigmamachine.core.mapping import Mapping, Plugboard
from enigmamachine.machine.signal import Wiring, encipher_index, encipher_letter

ALPHABET = string.ascii_uppercase
IDENTITY = Mapping(ALPHABET)


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------

def test_mapping_forward_and_backward_tables():
    m = get_rotor(1).mapping()
    assert m.forward(letter_index("A")) == letter_index("E")
    assert m.backward(letter_index("E")) == letter_index("A")
    for i in range(26):
        assert m.backward(m.forward(i)) == i


def test_mapping_wiring_round_trips_through_tables():
    wiring = "EKMFLGDQVZNTOWYHXUSPAIBRCJ"
    m = Mapping(wiring)
    assert m.wiring == wiring
    assert m == Mapping(wiring.lower())
    assert "".join(index_letter(m.backward(i)) for i in range(26)) == "UWYGADFPVZBECKMTHXSLRINQOJ"


@pytest.mark.parametrize("wiring", ["ABC", ALPHABET[:-1] + "A", ALPHABET[:-1] + "!", "ı" + ALPHABET[1:]])
def test_mapping_rejects_non_permutations(wiring):
    with pytest.raises(ValueError):
        Mapping(wiring)


def test_mapping_lowercase_wiring_accepted():
    assert Mapping(ALPHABET.lower()) == IDENTITY


@pytest.mark.parametrize("name", ["A", "B", "C"])
def test_reflectors_are_fixed_point_free_involutions(name):
    m = Mapping(get_reflector_wiring(name))
    assert m.is_involution()
    assert m.fixed_points() == ""
    for i in range(26):
        assert m.forward(m.forward(i)) == i
        assert m.forward(i) != i


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

def test_catalog_contents():
    rotors = list_rotors()
    assert [r.index for r in rotors] == [1, 2, 3, 4, 5]
    assert [r.notch for r in rotors] == [17, 5, 22, 10, 26]
    assert [r.turnover for r in rotors] == ["Q", "E", "V", "J", "Z"]
    assert get_rotor(3).name == "III"
    assert [name for name, _ in list_reflectors()] == ["A", "B", "C"]
    for r in rotors:
        assert sorted(r.wiring) == list(ALPHABET)


@pytest.mark.parametrize("index", [0, 6, -1])
def test_catalog_lookup_out_of_range(index):
    with pytest.raises(KeyError):
        get_rotor(index)


# ---------------------------------------------------------------------------
# Plugboard
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("a,b", [("A", "B"), ("Q", "Z"), ("M", "E")])
def test_plugboard_symmetry(a, b):
    pb = Plugboard([(a, b)])
    ia, ib = letter_index(a), letter_index(b)
    assert pb.swap(ia) == ib
    assert pb.swap(ib) == ia
    for i in range(26):
        if i not in (ia, ib):
            assert pb.swap(i) == i


def test_plugboard_pairs_listing():
    pb = Plugboard([("A", "B"), ("C", "D")])
    assert pb.pairs == ["AB", "CD"]
    assert Plugboard().pairs == []


def test_plugboard_symmetry_through_signal_path():
    # with identity rotors and no movement only the plugboard and reflector act
    reflector = Mapping(REFLECTORS["B"])
    bare = Wiring(Plugboard(), IDENTITY, IDENTITY, IDENTITY, reflector)
    steckered = Wiring(Plugboard([("A", "Q")]), IDENTITY, IDENTITY, IDENTITY, reflector)

    assert encipher_letter("A", (0, 0, 0), bare) == "Y"
    # A is swapped to Q before the reflector, and the reflector's Q->E comes back unswapped
    assert encipher_letter("A", (0, 0, 0), steckered) == "E"
    # E reflects to Q, which the plugboard turns into A on the way out
    assert encipher_letter("E", (0, 0, 0), steckered) == "A"


def test_signal_path_is_reciprocal_for_any_position():
    w = Wiring(
        Plugboard([("A", "B"), ("X", "Y")]),
        get_rotor(2).mapping(),
        get_rotor(4).mapping(),
        get_rotor(5).mapping(),
        Mapping(REFLECTORS["C"]),
    )
    for movements in [(0, 0, 0), (3, 17, 25), (100, 57, 1000)]:
        for i in range(26):
            out = encipher_index(i, *movements, w)
            assert out != i
            assert encipher_index(out, *movements, w) == i
