from sc4py.config import V, SidechainError
from struct import Struct
import hashlib

struct_uint8 = Struct('<B')
struct_uint16 = Struct('<H')
struct_uint32 = Struct('<I')
struct_uint64 = Struct('<Q')


def sha256d_hash(b) -> bytes:
    """double sha256, fingerprint of serialized objects"""
    return hashlib.sha256(hashlib.sha256(b).digest()).digest()


def compact_size2bin(size):
    """ Convert length to bitcoin style compact size """
    if size < 0:
        raise SidechainError('negative compact size {}'.format(size))
    elif size < 0xfd:
        return struct_uint8.pack(size)
    elif size <= 0xffff:
        return b'\xfd' + struct_uint16.pack(size)
    elif size <= 0xffffffff:
        return b'\xfe' + struct_uint32.pack(size)
    else:
        return b'\xff' + struct_uint64.pack(size)


def bin2compact_size(b, pos):
    """ Read compact size, return (size, next position) """
    if len(b) <= pos:
        raise SidechainError('compact size out of range pos={} len={}'.format(pos, len(b)))
    prefix = b[pos]
    if prefix < 0xfd:
        return prefix, pos + 1
    elif prefix == 0xfd:
        fmt = struct_uint16
    elif prefix == 0xfe:
        fmt = struct_uint32
    else:
        fmt = struct_uint64
    if len(b) < pos + 1 + fmt.size:
        raise SidechainError('compact size is truncated pos={}'.format(pos))
    return fmt.unpack_from(b, pos + 1)[0], pos + 1 + fmt.size


def var_bytes2bin(data: bytes):
    return compact_size2bin(len(data)) + data


def bin2var_bytes(b, pos):
    """ Read length prefixed bytes, return (data, next position) """
    size, pos = bin2compact_size(b, pos)
    if len(b) < pos + size:
        raise SidechainError('Do not match len [{}<{}]'.format(len(b), pos + size))
    return bytes(b[pos:pos + size]), pos + size


def var_str2bin(string: str):
    return var_bytes2bin(string.encode())


def bin2var_str(b, pos):
    data, pos = bin2var_bytes(b, pos)
    try:
        return data.decode(), pos
    except UnicodeDecodeError:
        raise SidechainError('string is not utf8 at pos={}'.format(pos))


def format_money(amount: int) -> str:
    """
    Format coin amount like bitcoin's FormatMoney
    keep at least two decimal places, strip other trailing zeros
    """
    digit = V.COIN_DIGIT
    n_abs = abs(amount)
    quotient, remainder = divmod(n_abs, pow(10, digit))
    if digit > 0:
        fraction = str(remainder).zfill(digit).rstrip('0')
        fraction = fraction.ljust(min(2, digit), '0')
        string = "{}.{}".format(quotient, fraction)
    else:
        string = str(quotient)
    if amount < 0:
        string = '-' + string
    return string


__all__ = [
    "sha256d_hash",
    "compact_size2bin",
    "bin2compact_size",
    "var_bytes2bin",
    "bin2var_bytes",
    "var_str2bin",
    "bin2var_str",
    "format_money",
]
