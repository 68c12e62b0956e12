import base64
import unittest

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from rsaexport.asn1 import to_der
from rsaexport.keystore import export_raw_key, load_key
from rsaexport.pem import PRIVATE_KEY_PREFIX, PRIVATE_KEY_SUFFIX
from rsaexport.rsa_export import RsaExport


class TestRsaExport(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
        cls.public_key = cls.private_key.public_key()

    def test_export_public_key_to_pem(self):
        pem_text = RsaExport.export_public_key_to_pem(self.public_key)
        self.assertTrue(pem_text.startswith("-----BEGIN PUBLIC KEY-----\r\n"))
        self.assertTrue(pem_text.endswith("-----END PUBLIC KEY-----"))
        loaded = serialization.load_pem_public_key(pem_text.encode('ascii'))
        self.assertEqual(self.public_key.public_numbers(), loaded.public_numbers())

    def test_export_public_key_from_private_key(self):
        self.assertEqual(RsaExport.export_public_key_to_pem(self.public_key),
                         RsaExport.export_public_key_to_pem(self.private_key))

    def test_export_public_key_to_der(self):
        expected = self.public_key.public_bytes(encoding=serialization.Encoding.DER,
                                                format=serialization.PublicFormat.SubjectPublicKeyInfo)
        self.assertEqual(expected, RsaExport.export_public_key_to_der(self.public_key))

    def test_export_private_key_to_pem(self):
        pem_text = RsaExport.export_private_key_to_pem(self.private_key)
        self.assertTrue(pem_text.startswith(PRIVATE_KEY_PREFIX))
        self.assertTrue(pem_text.endswith(PRIVATE_KEY_SUFFIX))
        body = pem_text[len(PRIVATE_KEY_PREFIX):len(pem_text) - len(PRIVATE_KEY_SUFFIX)]
        self.assertEqual(to_der(export_raw_key(self.private_key)), base64.b64decode(body.replace("\r\n", "")))

    def test_raw_bytes_pass_through(self):
        raw_key_bytes = export_raw_key(self.public_key)
        self.assertEqual(RsaExport.public_key_to_pem(raw_key_bytes),
                         RsaExport.export_public_key_to_pem(raw_key_bytes))
        self.assertEqual(RsaExport.public_key_to_der(raw_key_bytes),
                         RsaExport.export_public_key_to_der(self.public_key))

    def test_missing_key_data(self):
        self.assertIsNone(RsaExport.export_public_key_to_pem(None))
        self.assertIsNone(RsaExport.export_private_key_to_pem(None))
        self.assertIsNone(RsaExport.export_public_key_to_der(b''))
        self.assertIsNone(RsaExport.export_public_key_to_pem(b''))

    def test_non_rsa_key(self):
        ec_key = ec.generate_private_key(ec.SECP256R1())
        self.assertIsNone(RsaExport.export_public_key_to_pem(ec_key.public_key()))
        self.assertIsNone(RsaExport.export_private_key_to_pem(ec_key))


class TestLoadKey(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
        cls.public_key = cls.private_key.public_key()

    def test_load_public_pem_and_der(self):
        for encoding in (serialization.Encoding.PEM, serialization.Encoding.DER):
            data = self.public_key.public_bytes(encoding=encoding,
                                                format=serialization.PublicFormat.SubjectPublicKeyInfo)
            key = load_key(data)
            self.assertEqual(self.public_key.public_numbers(), key.public_numbers())

    def test_load_private_pem(self):
        data = self.private_key.private_bytes(encoding=serialization.Encoding.PEM,
                                              format=serialization.PrivateFormat.PKCS8,
                                              encryption_algorithm=serialization.BestAvailableEncryption(b'secret'))
        key = load_key(data.decode('ascii'), private=True, password="secret")
        self.assertEqual(self.private_key.private_numbers(), key.private_numbers())

    def test_load_garbage(self):
        self.assertIsNone(load_key(b'not a key'))
        self.assertIsNone(load_key(b'not a key', private=True))

    def test_load_non_rsa(self):
        ec_key = ec.generate_private_key(ec.SECP256R1())
        data = ec_key.public_key().public_bytes(encoding=serialization.Encoding.PEM,
                                                format=serialization.PublicFormat.SubjectPublicKeyInfo)
        self.assertIsNone(load_key(data))

    def test_load_unknown_algorithm(self):
        # SubjectPublicKeyInfo with algorithm OID 1.2.3.4
        data = bytes([0x30, 0x0e, 0x30, 0x05, 0x06, 0x03, 0x2a, 0x03, 0x04,
                      0x03, 0x05, 0x00, 0x01, 0x02, 0x03, 0x04])
        self.assertIsNone(load_key(data))

    def test_load_non_ascii_text(self):
        self.assertIsNone(load_key("ключ"))
        self.assertIsNone(load_key("ключ", private=True))
