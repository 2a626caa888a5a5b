"""Cross-field checks on a resolved configuration."""

from __future__ import annotations

from yarr.core.exceptions import TLSPairingError

from .models import ResolvedConfig, TLSMaterial
from .options import get_option


def validate_tls_pairing(config: ResolvedConfig) -> TLSMaterial:
    """Return the TLS material, requiring the cert and key files together.

    Both empty disables TLS; both set enables it. Exactly one set is fatal.
    """
    material = TLSMaterial(cert_file=config.cert_file, key_file=config.key_file)
    if bool(material.cert_file) != bool(material.key_file):
        cert_key = get_option("cert_file").file_key
        key_key = get_option("key_file").file_key
        raise TLSPairingError(
            "Both cert & key files are required "
            f"({cert_key}={material.cert_file!r}, {key_key}={material.key_file!r})",
            context={"cert_file": material.cert_file, "key_file": material.key_file},
        )
    return material


def validate_config(config: ResolvedConfig) -> TLSMaterial:
    """Run every cross-field check on ``config``.

    Returns:
        The validated TLS material (disabled when neither file is set).
    """
    return validate_tls_pairing(config)


__all__ = ["validate_config", "validate_tls_pairing"]
