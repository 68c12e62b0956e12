MAX_INT_BYTES = 8


# Smallest number of big-endian bytes that can hold n, 0 for n <= 0
def bytes_needed(n):
    if n <= 0:
        return 0
    if n >= 1 << (MAX_INT_BYTES * 8):
        raise ValueError("Integer needs more than " + str(MAX_INT_BYTES) + " bytes: " + str(n))
    i = 1
    while i < MAX_INT_BYTES and n >= (1 << (i * 8)):
        i += 1
    return i

def int_to_bytes(int_val, num_bytes):
    return int_val.to_bytes(num_bytes, byteorder='big')

def bytes_to_int(bytes_val):
    return int.from_bytes(bytes_val, byteorder='big')
