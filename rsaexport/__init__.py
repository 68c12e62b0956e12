from rsaexport.asn1 import to_der, encode_length, RSA_OID_HEADER
from rsaexport.pem import to_pem, PUBLIC_KEY_PREFIX, PUBLIC_KEY_SUFFIX, PRIVATE_KEY_PREFIX, PRIVATE_KEY_SUFFIX
from rsaexport.rsa_export import RsaExport
from rsaexport.tools import bytes_needed
