import rsaexport.tools as tools

# DER layout produced by to_der:
# SEQUENCE tag 1 byte
# SEQUENCE length 1-9 bytes
# RSA OID header 15 bytes
# BIT STRING tag 1 byte
# BIT STRING length 1-9 bytes
# unused bits 1 byte (always 0)
# raw key bytes

RSA_OID_HEADER = bytes([0x30, 0x0d, 0x06, 0x09, 0x2a, 0x86, 0x48, 0x86,
                        0xf7, 0x0d, 0x01, 0x01, 0x01, 0x05, 0x00])
RSA_OID_HEADER_LEN = 15

ASN1_SEQUENCE_MARK = 0x30
ASN1_INTEGER_MARK = 0x02
ASN1_BITSTRING_MARK = 0x03
ASN1_NULL_MARK = 0x05
ASN1_OBJECT_MARK = 0x06
ASN1_EXTENDED_LENGTH_MARK = 0x80

# tag + long form marker + up to 8 length bytes + unused bits byte fits easily
ASN1_HEADER_LEN = 15

BITSTRING_UNUSED_BITS = 0x00


def new_header():
    return bytearray(ASN1_HEADER_LEN)

def encoded_length_size(length):
    """Number of bytes encode_length will write for length."""
    if length < ASN1_EXTENDED_LENGTH_MARK:
        return 1
    return 1 + tools.bytes_needed(length)

def encode_length(length, buffer, offset=0):
    """
    Write the ASN.1 definite length of length into buffer at offset.

    Short form (< 128) is a single byte. Long form is 0x80 | n followed by
    n big-endian bytes. The buffer is never grown, an IndexError is raised if
    the encoding does not fit. Returns the number of bytes written.
    """
    if length < 0:
        raise ValueError("ASN.1 length cannot be negative: " + str(length))
    size = encoded_length_size(length)
    if offset < 0 or offset + size > len(buffer):
        raise IndexError("ASN.1 length of " + str(size) + " bytes does not fit at offset "
                         + str(offset) + " of a " + str(len(buffer)) + " byte buffer")
    if size == 1:
        buffer[offset] = length
        return 1
    extra_bytes = size - 1
    buffer[offset] = ASN1_EXTENDED_LENGTH_MARK | extra_bytes
    length_bytes = tools.int_to_bytes(length, extra_bytes)
    for i in range(extra_bytes):
        buffer[offset + 1 + i] = length_bytes[i]
    return size

def encode_bitstring_header(content_len):
    """Tag, length and unused bits byte of a BIT STRING holding content_len bytes."""
    header = new_header()
    header[0] = ASN1_BITSTRING_MARK
    written = encode_length(content_len + 1, header, 1)
    header[written + 1] = BITSTRING_UNUSED_BITS
    return bytes(header[0:written + 2])

def encode_sequence_header(content_len):
    header = new_header()
    header[0] = ASN1_SEQUENCE_MARK
    written = encode_length(content_len, header, 1)
    return bytes(header[0:written + 1])

def to_der(raw_key_bytes):
    """
    Wrap raw RSA key bytes (PKCS#1 modulus and exponent) in the
    SEQUENCE { rsaEncryption OID, BIT STRING } structure understood by
    OpenSSL and friends. The raw bytes are copied verbatim, no validation
    is done on them.
    """
    raw_key_bytes = bytes(raw_key_bytes)
    bitstring_header = encode_bitstring_header(len(raw_key_bytes))
    content_len = RSA_OID_HEADER_LEN + len(bitstring_header) + len(raw_key_bytes)
    sequence_header = encode_sequence_header(content_len)

    der_key = bytearray(b'')
    der_key.extend(sequence_header)
    der_key.extend(RSA_OID_HEADER)
    der_key.extend(bitstring_header)
    der_key.extend(raw_key_bytes)
    return bytes(der_key)
