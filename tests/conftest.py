from sc4py.config import C
from sc4py.chain.tx import MainchainTx
from sc4py.sidechain import SidechainWT, SidechainWTPrime, SidechainDeposit
import pytest

PREV_HASH = bytes(range(32))
BLOCK_HASH = bytes(reversed(range(32)))
BLIND_HASH = b'\xab' * 32


def make_tx(n_inputs=2, n_outputs=2):
    return MainchainTx.from_dict({
        'version': 2,
        'inputs': [(PREV_HASH, i, b'\x51' * i) for i in range(n_inputs)],
        'outputs': [(1000 * (i + 1), b'\x76\xa9\x14' + bytes(20) + b'\x88\xac') for i in range(n_outputs)],
        'lock_time': 0,
    })


@pytest.fixture
def tx():
    return make_tx()


@pytest.fixture
def wt():
    return SidechainWT(sidechain=3, destination='1BoatSLRHtKNngkdXEeobR76b53LETtpyT',
                       amount=150000000, mainchain_fee=25000, status=C.WT_UNSPENT,
                       hash_blind_wtx=BLIND_HASH)


@pytest.fixture
def wtprime(tx):
    return SidechainWTPrime(sidechain=3, wtprime=tx, height=1200, status=C.WTPRIME_CREATED)


@pytest.fixture
def deposit(tx):
    return SidechainDeposit(sidechain=3, destination='sidechain_user_key', amount=99990000,
                            dtx=tx, burn_index=1, tx_index=7, hash_mainchain_block=BLOCK_HASH)
