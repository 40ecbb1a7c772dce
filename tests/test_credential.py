import pytest
from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey

from burstkit.credential import KEY_SIZE, Passphrase, PrivateKey, PublicKey


def test_passphrase_value_and_clear():
    phrase = Passphrase("correct horse battery staple")
    assert phrase.value() == "correct horse battery staple"
    view = phrase.view()
    phrase.clear()
    assert phrase.cleared
    assert set(bytes(view)) == {0}
    with pytest.raises(ValueError, match="already cleared"):
        phrase.value()


def test_passphrase_cleared_on_scope_exit():
    with Passphrase("hunter2") as phrase:
        assert phrase.matches(b"hunter2")
    assert phrase.cleared


def test_passphrase_comparison_is_by_content():
    with Passphrase("a") as a, Passphrase("a") as b, Passphrase("b") as c:
        assert a == b
        assert a != c
        assert not a.matches(c)


def test_passphrase_repr_hides_content():
    with Passphrase("hunter2") as phrase:
        assert "hunter2" not in repr(phrase)
        assert str(phrase) == "<Passphrase ***>"


def test_passphrase_validation():
    with pytest.raises(ValueError, match="cannot be empty"):
        Passphrase("")
    with pytest.raises(TypeError, match="must be str"):
        Passphrase(b"bytes")


def test_private_key_round_trips_through_cryptography():
    key = X25519PrivateKey.generate()
    with PrivateKey.from_x25519(key) as wrapped:
        assert len(wrapped) == KEY_SIZE
        assert wrapped.value() == key.private_bytes_raw()
        rebuilt = wrapped.to_x25519()
        assert rebuilt.public_key().public_bytes_raw() == key.public_key().public_bytes_raw()


def test_public_key_round_trips_through_cryptography():
    public = X25519PrivateKey.generate().public_key()
    with PublicKey.from_x25519(public) as wrapped:
        assert wrapped.to_x25519().public_bytes_raw() == public.public_bytes_raw()
        assert PublicKey.from_hex(wrapped.hex()) == wrapped


def test_key_length_checked():
    with pytest.raises(ValueError, match="private key must be 32 bytes"):
        PrivateKey(b"\x01" * 31)
    with pytest.raises(TypeError, match="public key must be bytes"):
        PublicKey("00" * 32)


def test_keys_of_different_kinds_are_not_equal():
    raw = bytes(range(32))
    with PrivateKey(raw) as priv, PublicKey(raw) as pub:
        assert priv != pub
        assert priv.matches(pub)
