import pytest

from typing_exam.core.errors import PasswordTooLong
from typing_exam.services.credentials import CredentialCodec


def test_shift_is_deterministic_and_verifies():
    codec = CredentialCodec("shift", shift=3)
    cred = codec.hash("pw1")
    assert cred == codec.hash("pw1")
    assert cred != "pw1"
    assert codec.verify("pw1", cred)
    assert not codec.verify("pw2", cred)


def test_shift_known_values():
    codec = CredentialCodec("shift", shift=3)
    assert codec.hash("abc") == "def"
    # wrap-around dans l'alphabet imprimable: '~' (126) -> '"' (34)
    assert codec.hash("~") == '"'


def test_shift_clamps_out_of_range_characters():
    codec = CredentialCodec("shift", shift=0)
    # tabulation (9) ramenée sur l'espace, 'é' (233) ramené sur '~'
    assert codec.hash("\t") == " "
    assert codec.hash("é") == "~"


def test_shift_has_no_salt():
    # propriété connue (et indésirable) du schéma legacy
    codec = CredentialCodec("shift")
    assert codec.hash("same-password") == codec.hash("same-password")


def test_bcrypt_is_salted_and_verifies():
    codec = CredentialCodec("bcrypt")
    a = codec.hash("secret")
    b = codec.hash("secret")
    assert a != b
    assert codec.verify("secret", a)
    assert codec.verify("secret", b)
    assert not codec.verify("nope", a)


def test_bcrypt_rejects_long_password():
    codec = CredentialCodec("bcrypt")
    with pytest.raises(PasswordTooLong):
        codec.hash("x" * 73)
    assert not codec.verify("x" * 73, codec.hash("x" * 72))


def test_bcrypt_verify_on_legacy_credential_is_false():
    assert not CredentialCodec("bcrypt").verify("pw1", CredentialCodec("shift").hash("pw1"))


def test_unknown_scheme():
    with pytest.raises(ValueError):
        CredentialCodec("md5")
