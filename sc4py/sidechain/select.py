from sc4py.config import C
from sc4py.sidechain.objects import SidechainWT, SidechainWTPrime
from typing import List


def sort_wt_by_fee(vwt: List[SidechainWT]):
    """highest mainchain fee first, sort in place"""
    vwt.sort(key=lambda wt: wt.mainchain_fee, reverse=True)


def sort_wtprime_by_height(vwtprime: List[SidechainWTPrime]):
    """newest WT^ first, sort in place"""
    vwtprime.sort(key=lambda wtprime: wtprime.height, reverse=True)


def select_unspent_wt(vwt: List[SidechainWT]):
    """remove WTs already in a WT^ or spent, keep order"""
    vwt[:] = [wt for wt in vwt if wt.status == C.WT_UNSPENT]


__all__ = [
    "sort_wt_by_fee",
    "sort_wtprime_by_height",
    "select_unspent_wt",
]
