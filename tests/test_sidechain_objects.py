from sc4py.config import C, SidechainError
from sc4py.chain.utils import sha256d_hash
from sc4py.sidechain import *
from conftest import BLIND_HASH, BLOCK_HASH, PREV_HASH
import pytest


class UnknownObj(SidechainObj):
    __slots__ = ()
    sidechainop = ord('Z')

    def serialize(self):
        return b'Z'


def test_sidechainop_is_fixed(wt, wtprime, deposit):
    """first byte of serialization is the object type"""
    assert wt.serialize()[0] == C.SIDECHAIN_WT_OP
    assert wtprime.serialize()[0] == C.SIDECHAIN_WTPRIME_OP
    assert deposit.serialize()[0] == C.SIDECHAIN_DEPOSIT_OP
    with pytest.raises(AttributeError):
        wt.sidechainop = C.SIDECHAIN_DEPOSIT_OP


def test_wt_decode(wt):
    decoded = SidechainWT.from_binary(wt.serialize())
    assert decoded == wt
    assert decoded.sidechain == 3
    assert decoded.destination == wt.destination
    assert decoded.amount == 150000000
    assert decoded.mainchain_fee == 25000
    assert decoded.status == C.WT_UNSPENT
    assert decoded.hash_blind_wtx == BLIND_HASH


def test_wtprime_decode(wtprime):
    decoded = SidechainWTPrime.from_binary(wtprime.serialize())
    assert decoded == wtprime
    assert decoded.sidechain == 3
    assert decoded.wtprime == wtprime.wtprime
    assert decoded.wtprime.inputs == wtprime.wtprime.inputs
    assert decoded.height == 1200
    assert decoded.status == C.WTPRIME_CREATED


def test_deposit_decode(deposit):
    decoded = SidechainDeposit.from_binary(deposit.serialize())
    assert decoded == deposit
    assert decoded.destination == 'sidechain_user_key'
    assert decoded.amount == 99990000
    assert decoded.dtx == deposit.dtx
    assert decoded.burn_index == 1
    assert decoded.tx_index == 7
    assert decoded.hash_mainchain_block == BLOCK_HASH


def test_wrong_class_binary(wt):
    with pytest.raises(SidechainError):
        SidechainDeposit.from_binary(wt.serialize())


def test_truncated_and_trailing(wt, wtprime, deposit):
    """broken payload with a known type raises"""
    for obj in (wt, wtprime, deposit):
        b = obj.serialize()
        with pytest.raises(SidechainError):
            obj.__class__.from_binary(b[:-1])
        with pytest.raises(SidechainError):
            obj.__class__.from_binary(b + b'\x00')
        with pytest.raises(SidechainError):
            obj.__class__.from_binary(b[:3])


def test_get_hash(wt, wtprime, deposit):
    """fingerprint is sha256d of serialization without script header"""
    for obj in (wt, wtprime, deposit):
        assert obj.get_hash() == sha256d_hash(obj.serialize())
        assert len(obj.get_hash()) == 32
    assert wt.get_hash() != wtprime.get_hash()
    assert UnknownObj().get_hash() is None


def test_equality(wt):
    other = SidechainWT.from_binary(wt.serialize())
    assert other == wt
    assert hash(other) == hash(wt)
    other.mainchain_fee += 1
    assert other != wt
    assert (wt == 'wt') is False


def test_wt_status_str(wt):
    assert wt.get_status_str() == 'Unspent'
    wt.status = C.WT_IN_WTPRIME
    assert wt.get_status_str() == 'Pending - in WT^'
    wt.status = C.WT_SPENT
    assert wt.get_status_str() == 'Spent'
    wt.status = ord('x')
    assert wt.get_status_str() == 'Unknown'


def test_wtprime_status_str(wtprime):
    assert wtprime.get_status_str() == 'Created'
    wtprime.status = C.WTPRIME_FAILED
    assert wtprime.get_status_str() == 'Failed'
    wtprime.status = C.WTPRIME_SPENT
    assert wtprime.get_status_str() == 'Spent'
    wtprime.status = 0
    assert wtprime.get_status_str() == 'Unknown'


def test_wt_update_status(wt):
    """Unspent -> Pending -> Spent, never back"""
    wt.update_status(C.WT_IN_WTPRIME)
    assert wt.status == C.WT_IN_WTPRIME
    wt.update_status(C.WT_IN_WTPRIME)
    with pytest.raises(SidechainError):
        wt.update_status(C.WT_UNSPENT)
    wt.update_status(C.WT_SPENT)
    assert wt.status == C.WT_SPENT
    with pytest.raises(SidechainError):
        wt.update_status(C.WT_IN_WTPRIME)
    with pytest.raises(SidechainError):
        wt.update_status(ord('x'))


def test_wtprime_update_status(wtprime, tx):
    """Created -> Failed or Spent, both final"""
    wtprime.update_status(C.WTPRIME_FAILED)
    assert wtprime.status == C.WTPRIME_FAILED
    with pytest.raises(SidechainError):
        wtprime.update_status(C.WTPRIME_SPENT)
    with pytest.raises(SidechainError):
        wtprime.update_status(C.WTPRIME_CREATED)
    other = SidechainWTPrime(sidechain=1, wtprime=tx, height=5)
    other.update_status(C.WTPRIME_SPENT)
    assert other.status == C.WTPRIME_SPENT
    with pytest.raises(SidechainError):
        other.update_status(C.WTPRIME_FAILED)


def test_wt_to_string(wt):
    assert wt.to_string() == (
        "sidechainop=W\n"
        "nSidechain=3\n"
        "destination=1BoatSLRHtKNngkdXEeobR76b53LETtpyT\n"
        "amount=1.50\n"
        "mainchainFee=0.00025\n"
        "status=Unspent\n"
        "hashBlindWTX={}\n".format(BLIND_HASH.hex()))


def test_wtprime_to_string(wtprime):
    s = wtprime.to_string()
    assert s.startswith("sidechainop=P\nnSidechain=3\nwtprime=MainchainTx(")
    assert s.endswith("status=Created\n")


def test_deposit_to_string(deposit):
    lines = deposit.to_string().split("\n")
    assert lines[:9] == [
        "sidechainop=D",
        "nSidechain=3",
        "strDest=sidechain_user_key",
        "payout=0.9999",
        "mainchaintxid={}".format(deposit.dtx.hash.hex()),
        "nBurnIndex=1",
        "nTx=7",
        "hashMainchainBlock={}".format(BLOCK_HASH.hex()),
        "inputs:",
    ]
    assert lines[9:] == ["{}:0".format(PREV_HASH.hex()), "{}:1".format(PREV_HASH.hex()), ""]


def test_getinfo(wt, wtprime, deposit):
    assert wt.getinfo()['type'] == 'WT'
    assert wt.getinfo()['status'] == 'Unspent'
    assert wtprime.getinfo()['wtprime']['hash'] == wtprime.wtprime.hash.hex()
    assert deposit.getinfo()['hash'] == deposit.get_hash().hex()
    assert deposit.getinfo()['hash_mainchain_block'] == BLOCK_HASH.hex()
