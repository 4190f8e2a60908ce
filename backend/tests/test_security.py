import pytest
from passlib.context import CryptContext
from accounts.core.config import Settings
from accounts.core.security import get_password_hash, password_codec, verify_password


def test_hash_does_not_contain_plaintext():
    hashed = get_password_hash("JohnDoe897")
    assert hashed != "JohnDoe897"
    assert "JohnDoe897" not in hashed
    assert hashed.startswith("$2")


def test_same_password_gets_different_salts():
    assert get_password_hash("JohnDoe897") != get_password_hash("JohnDoe897")


def test_verify_round_trip():
    hashed = get_password_hash("JohnDoe897")
    assert verify_password("JohnDoe897", hashed)
    assert not verify_password("JohnDoe898", hashed)


@pytest.mark.parametrize("bad_hash", ["", "plaintext", "$2b$12$tooshort", None])
def test_verify_fails_closed_on_malformed_hash(bad_hash):
    assert verify_password("JohnDoe897", bad_hash) is False


def test_codec_argument_order():
    hashed = password_codec.hash("Secret1234")
    assert password_codec.verify(hashed, "Secret1234")
    assert not password_codec.verify(hashed, "Secret12345")


def test_default_cost_factor_is_12_rounds():
    default_rounds = Settings.model_fields["BCRYPT_ROUNDS"].default
    assert default_rounds == 12

    context = CryptContext(schemes=["bcrypt"], bcrypt__rounds=default_rounds)
    assert context.hash("JohnDoe897").startswith("$2b$12$")


def test_hash_uses_configured_rounds():
    # conftest lowers BCRYPT_ROUNDS to 4
    assert get_password_hash("JohnDoe897").startswith("$2b$04$")
