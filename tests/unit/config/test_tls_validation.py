from __future__ import annotations

import pytest

from yarr.core.config import ResolvedConfig, TLSMaterial, validate_config, validate_tls_pairing
from yarr.core.exceptions import TLSPairingError


def _config(cert: str, key: str) -> ResolvedConfig:
    return ResolvedConfig(address="127.0.0.1:7070", cert_file=cert, key_file=key)


@pytest.mark.parametrize("cert, key", [("cert.pem", ""), ("", "key.pem")])
def test_single_sided_pair_is_fatal(cert: str, key: str) -> None:
    with pytest.raises(TLSPairingError) as exc:
        validate_tls_pairing(_config(cert, key))
    message = str(exc.value)
    assert "cert-file" in message and "key-file" in message


def test_both_set_enables_tls() -> None:
    material = validate_config(_config("cert.pem", "key.pem"))
    assert material == TLSMaterial(cert_file="cert.pem", key_file="key.pem")
    assert material.enabled


def test_neither_set_disables_tls() -> None:
    material = validate_config(_config("", ""))
    assert not material.enabled
