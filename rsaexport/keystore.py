from typing import Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

# Raw key representation is the bare PKCS#1 structure a platform key store
# hands back: RSAPublicKey (modulus, exponent) or RSAPrivateKey, without any
# algorithm identifier around it.


def export_raw_key(key, public_only=False) -> Optional[bytes]:
    if key is None:
        return None
    if public_only and isinstance(key, rsa.RSAPrivateKey):
        key = key.public_key()
    if isinstance(key, (bytes, bytearray)):
        return bytes(key) if len(key) > 0 else None
    if isinstance(key, rsa.RSAPublicKey):
        return key.public_bytes(encoding=serialization.Encoding.DER,
                                format=serialization.PublicFormat.PKCS1)
    if isinstance(key, rsa.RSAPrivateKey):
        return key.private_bytes(encoding=serialization.Encoding.DER,
                                 format=serialization.PrivateFormat.TraditionalOpenSSL,
                                 encryption_algorithm=serialization.NoEncryption())
    # Only RSA keys can be exported
    return None

def load_key(data, private=False, password=None):
    """
    Load an RSA key handle from a PEM or DER blob.

    Returns None when the blob is not a key cryptography can read or the
    key is not RSA.
    """
    try:
        if isinstance(data, str):
            data = data.encode('ascii')
        if isinstance(password, str):
            password = password.encode('utf-8')
        is_pem = data.lstrip().startswith(b'-----BEGIN')
        if private:
            if is_pem:
                key = serialization.load_pem_private_key(data, password=password)
            else:
                key = serialization.load_der_private_key(data, password=password)
        else:
            if is_pem:
                key = serialization.load_pem_public_key(data)
            else:
                key = serialization.load_der_public_key(data)
    except (ValueError, TypeError, UnsupportedAlgorithm):
        return None
    if not isinstance(key, (rsa.RSAPublicKey, rsa.RSAPrivateKey)):
        return None
    return key
