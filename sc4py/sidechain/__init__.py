from sc4py.sidechain.objects import *
from sc4py.sidechain.script import *
from sc4py.sidechain.address import *
from sc4py.sidechain.select import *

__all__ = [
    "SidechainObj",
    "SidechainWT",
    "SidechainWTPrime",
    "SidechainDeposit",
    "parse_sidechain_obj",
    "is_sidechain_script",
    "parse_sidechain_script",
    "get_script",
    "address_checksum",
    "parse_sidechain_number",
    "generate_deposit_address",
    "parse_deposit_address",
    "sort_wt_by_fee",
    "sort_wtprime_by_height",
    "select_unspent_wt",
]
