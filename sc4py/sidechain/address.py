from sc4py.config import C, V
from typing import Optional, Tuple
from logging import getLogger
import hashlib

log = getLogger('sc4py')


def address_checksum(prefix: str) -> str:
    """full sha256 hex digest, the address carries first CHECKSUM_SIZE chars"""
    return hashlib.sha256(prefix.encode()).hexdigest()


def parse_sidechain_number(string: str) -> Optional[int]:
    """decimal sidechain number, None if not digits"""
    if len(string) == 0 or not (string.isascii() and string.isdigit()):
        return None
    return int(string)


def generate_deposit_address(destination: str, sidechain: int = None) -> str:
    """
    Deposit address format `s<sidechain>_<destination>_<checksum>`
    checksum is sha256 of all chars before it
    """
    if sidechain is None:
        sidechain = V.THIS_SIDECHAIN
    address = "s{}_{}_".format(sidechain, destination)
    return address + address_checksum(address)[:C.CHECKSUM_SIZE]


def parse_deposit_address(address: str) -> Optional[Tuple[str, int]]:
    """
    Get destination and sidechain number from deposit address
    destination may include `_`, split by first and last one
    :return: (destination, sidechain) or None
    """
    if len(address) == 0 or address[0] != 's':
        return None

    delim1 = address.find('_')
    delim2 = address.rfind('_')
    if delim1 == -1 or delim1 == delim2:
        log.debug("deposit address lacks delimiter {}".format(address))
        return None

    sidechain = parse_sidechain_number(address[1:delim1])
    if sidechain is None:
        log.debug("deposit address has wrong sidechain number {}".format(address))
        return None
    if sidechain > C.MAX_SIDECHAIN_NUMBER:
        log.debug("deposit address sidechain number out of range {}".format(sidechain))
        return None

    destination = address[delim1 + 1:delim2]
    if len(destination) == 0:
        return None

    checksum = address_checksum(address[:delim2 + 1])
    if len(checksum) != 64:
        return None

    address_check = address[delim2 + 1:]
    if len(address_check) != C.CHECKSUM_SIZE:
        return None
    if address_check != checksum[:C.CHECKSUM_SIZE]:
        log.debug("deposit address checksum mismatch {}".format(address))
        return None

    return destination, sidechain


__all__ = [
    "address_checksum",
    "parse_sidechain_number",
    "generate_deposit_address",
    "parse_deposit_address",
]
