import string

import pytest

from rotcrack.classical.rotation import ROTATIONS, decipher, encipher, validate_rotation
from rotcrack.core.ranking import rank
from rotcrack.errors import InvalidArgumentError, InvalidRotationError

SAMPLES = [
    "",
    "Hello, World!",
    "Drsc sc kx ohkwzvo drkd cryevn lo vyxq oxyeqr",
    string.printable,
    "MiXeD cAsE 1234 ~!@#",
]


def test_decipher_known_sentence():
    ct = "Drsc sc kx ohkwzvo drkd cryevn lo vyxq oxyeqr"
    assert decipher(ct, 10) == "This is an example that should be long enough"


def test_decipher_wraps_around_alphabet():
    assert decipher("abc", 3) == "xyz"
    assert decipher("XYZ", 25) == "YZA"


@pytest.mark.parametrize("s", SAMPLES)
def test_round_trip_all_rotations(s):
    for r in ROTATIONS:
        assert decipher(decipher(s, r), (26 - r) % 26) == s
        assert encipher(decipher(s, r), r) == s


@pytest.mark.parametrize("s", SAMPLES)
def test_non_letters_and_case_kept(s):
    for r in ROTATIONS:
        out = decipher(s, r)
        assert len(out) == len(s)
        for before, after in zip(s, out):
            if before in string.ascii_letters:
                assert after.isupper() == before.isupper()
            else:
                assert after == before


def test_empty_and_letterless_strings():
    assert decipher("", 7) == ""
    assert decipher("123 !?", 7) == "123 !?"


def test_non_ascii_letters_pass_through():
    assert decipher("café", 1) == "bzeé"


@pytest.mark.parametrize("bad", [0, 26, -1, 100, True, "3", 2.0, None])
def test_invalid_rotation_rejected(bad):
    with pytest.raises(InvalidRotationError):
        decipher("abc", bad)
    with pytest.raises(InvalidRotationError):
        encipher("abc", bad)


def test_invalid_rotation_is_value_error():
    with pytest.raises(ValueError):
        validate_rotation(26)
    assert issubclass(InvalidRotationError, InvalidArgumentError)


def test_validate_rotation_returns_value():
    assert validate_rotation(1) == 1
    assert validate_rotation(25) == 25


@pytest.mark.parametrize("s", ["ß", "ı", "ſ", "ﬁ", "straße", "ﬁx ıt"])
def test_non_ascii_letters_never_rotate(s):
    for r in ROTATIONS:
        out = decipher(s, r)
        for before, after in zip(s, out):
            if before not in string.ascii_letters:
                assert after == before
        assert encipher(out, r) == s


def test_non_ascii_letters_unchanged():
    assert decipher("ı", 1) == "ı"
    assert decipher("ß", 3) == "ß"
    assert decipher("ﬁx", 3) == "ﬁu"


def test_rank_accepts_non_ascii_letters():
    out = rank("Gur fgenßr", 3)
    assert len(out) == 3
    assert all("ß" in c.plaintext for c in out)
