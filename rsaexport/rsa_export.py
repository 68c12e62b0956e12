from typing import Optional

import rsaexport.asn1 as asn1
import rsaexport.keystore as keystore
import rsaexport.pem as pem


class RsaExport:
    """
    Turns RSA keys into DER and PEM text that OpenSSL, other languages and
    other platforms can read.

    Export pipeline is raw key bytes -> DER -> PEM. The raw bytes come from
    the key store; when the key store has nothing to give, the exporters
    return None instead of raising.
    """

    @staticmethod
    def public_key_to_der(raw_key_bytes) -> bytes:
        return asn1.to_der(raw_key_bytes)

    @staticmethod
    def public_key_to_pem(raw_key_bytes) -> str:
        return pem.to_pem(asn1.to_der(raw_key_bytes), pem.PUBLIC_KEY_PREFIX, pem.PUBLIC_KEY_SUFFIX)

    @staticmethod
    def export_public_key_to_pem(key) -> Optional[str]:
        raw_key_bytes = keystore.export_raw_key(key, public_only=True)
        if raw_key_bytes is None:
            return None
        return RsaExport.public_key_to_pem(raw_key_bytes)

    # Private keys go through the same BIT STRING wrapper as public keys,
    # only the envelope differs. The result is not PKCS#8.
    @staticmethod
    def export_private_key_to_pem(key) -> Optional[str]:
        raw_key_bytes = keystore.export_raw_key(key)
        if raw_key_bytes is None:
            return None
        der_key = asn1.to_der(raw_key_bytes)
        return pem.to_pem(der_key, pem.PRIVATE_KEY_PREFIX, pem.PRIVATE_KEY_SUFFIX)

    @staticmethod
    def export_public_key_to_der(key) -> Optional[bytes]:
        raw_key_bytes = keystore.export_raw_key(key, public_only=True)
        if raw_key_bytes is None:
            return None
        return asn1.to_der(raw_key_bytes)
