from sc4py.config import C, V, SidechainError
from logging import getLogger

log = getLogger('sc4py')


def set_sidechain_params(params):
    """setup this sidechain's params from dict"""
    sidechain = params.get('sidechain', V.THIS_SIDECHAIN)
    if not 0 <= sidechain <= C.MAX_SIDECHAIN_NUMBER:
        raise SidechainError('sidechain number is out of range {}'.format(sidechain))
    V.THIS_SIDECHAIN = sidechain
    V.COIN_DIGIT = params.get('digit_number', V.COIN_DIGIT)
    V.COIN = pow(10, V.COIN_DIGIT)
    log.info("setup sidechain params sidechain={} digit={}".format(V.THIS_SIDECHAIN, V.COIN_DIGIT))


__all__ = [
    "set_sidechain_params",
]
