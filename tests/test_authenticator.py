import logging

import pytest

from gauth.app.core.exceptions import InvalidCodeLengthError, InvalidSecretLengthError
from gauth.app.security.authenticator import GoogleAuthenticator


def test_defaults_to_six_digits(rfc_secret: str) -> None:
    auth = GoogleAuthenticator()

    assert auth.code_length == 6
    assert auth.get_code(rfc_secret, 1) == "287082"


def test_set_code_length_returns_new_instance(rfc_secret: str) -> None:
    auth = GoogleAuthenticator()

    eight = auth.set_code_length(8)

    assert eight is not auth
    assert auth.code_length == 6
    assert eight.code_length == 8
    assert eight.get_code(rfc_secret, 1) == "94287082"


def test_set_code_length_chains(rfc_secret: str) -> None:
    auth = GoogleAuthenticator().set_code_length(8).set_code_length(7)

    assert auth.get_code(rfc_secret, 1) == "4287082"
    assert repr(auth) == "GoogleAuthenticator(code_length=7)"


@pytest.mark.parametrize("length", [0, -6, 11])
def test_set_code_length_rejects_out_of_range(length: int) -> None:
    with pytest.raises(InvalidCodeLengthError):
        GoogleAuthenticator().set_code_length(length)


def test_short_code_length_logs_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="gauth.app.security.authenticator"):
        GoogleAuthenticator().set_code_length(4)

    assert "below the recommended" in caplog.text


def test_verify_code_uses_instance_length(rfc_secret: str) -> None:
    auth = GoogleAuthenticator().set_code_length(8)

    assert auth.verify_code(rfc_secret, "94287082", discrepancy=0, time_slice=1)
    assert not auth.verify_code(rfc_secret, "287082", discrepancy=0, time_slice=1)


def test_verify_code_drift_window(rfc_secret: str) -> None:
    auth = GoogleAuthenticator()
    time_slice = 37037037
    previous = auth.get_code(rfc_secret, time_slice - 1)

    assert auth.verify_code(rfc_secret, previous, time_slice=time_slice)
    assert auth.verify_code(rfc_secret, previous, discrepancy=1, time_slice=time_slice)


def test_verify_empty_secret_is_false() -> None:
    auth = GoogleAuthenticator()
    wrong = str((int(auth.get_code("", 5)) + 1) % 10 ** 6).zfill(6)

    assert auth.verify_code("", wrong, discrepancy=0, time_slice=5) is False


def test_set_code_length_accepts_numeric_string(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="gauth.app.security.authenticator"):
        auth = GoogleAuthenticator().set_code_length("4")

    assert auth.code_length == 4
    assert "below the recommended" in caplog.text


def test_create_secret_round_trip() -> None:
    auth = GoogleAuthenticator()
    secret = auth.create_secret(20)
    code = auth.get_code(secret, 100)

    assert len(secret) == 20
    assert auth.verify_code(secret, code, discrepancy=0, time_slice=100)


def test_create_secret_rejects_bad_length() -> None:
    with pytest.raises(InvalidSecretLengthError):
        GoogleAuthenticator().create_secret(10)


def test_qr_code_google_url_uses_configured_base() -> None:
    auth = GoogleAuthenticator(qr_base_url="https://qr.example.test/")

    url = auth.get_qr_code_google_url("bob", "JBSWY3DPEHPK3PXP", "Blog", width=100)

    assert url.startswith("https://qr.example.test/?data=otpauth%3A%2F%2Ftotp%2Fbob")
    assert url.endswith("&size=100x200&ecc=M")
