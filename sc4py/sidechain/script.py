from sc4py.config import C
from sc4py.sidechain.objects import *
from typing import Optional
from logging import getLogger

log = getLogger('sc4py')

op2class = {
    C.SIDECHAIN_WT_OP: SidechainWT,
    C.SIDECHAIN_WTPRIME_OP: SidechainWTPrime,
    C.SIDECHAIN_DEPOSIT_OP: SidechainDeposit,
}


def parse_sidechain_obj(b) -> Optional[SidechainObj]:
    """
    Parse serialized sidechain object, first byte is sidechainop.
    Script header must be removed before, see `parse_sidechain_script`.
    :param b: serialized object
    :return: new object or None if empty or unknown type
    """
    if len(b) == 0:
        return None
    cls = op2class.get(b[0])
    if cls is None:
        log.debug("unknown sidechainop {}".format(b[0]))
        return None
    return cls.from_binary(b)


def is_sidechain_script(script) -> bool:
    """check the script starts with [OP_RETURN]-[magic]"""
    return script[:len(C.SIDECHAIN_SCRIPT_HEADER)] == C.SIDECHAIN_SCRIPT_HEADER


def parse_sidechain_script(script) -> Optional[SidechainObj]:
    """inverse of `SidechainObj.get_script`"""
    if not is_sidechain_script(script):
        log.debug("not sidechain script {}".format(bytes(script[:5]).hex()))
        return None
    return parse_sidechain_obj(script[len(C.SIDECHAIN_SCRIPT_HEADER):])


def get_script(obj: SidechainObj) -> bytes:
    return obj.get_script()


__all__ = [
    "parse_sidechain_obj",
    "is_sidechain_script",
    "parse_sidechain_script",
    "get_script",
]
