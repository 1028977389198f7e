from sc4py.config import SidechainError
from sc4py.chain.tx import MainchainTx
from sc4py.sidechain import msgpack as sc_msgpack
from io import BytesIO
import msgpack
import pytest


def test_dumps_and_loads(wt, wtprime, deposit, tx):
    data = [wt, wtprime, deposit, tx, {'height': 10, 'raw': b'\x00'}]
    decoded = sc_msgpack.loads(sc_msgpack.dumps(data))
    assert decoded[:4] == [wt, wtprime, deposit, tx]
    assert type(decoded[1]) is type(wtprime)
    assert isinstance(decoded[3], MainchainTx)
    assert decoded[4] == {'height': 10, 'raw': b'\x00'}


def test_dump_and_stream(wt, deposit):
    fp = BytesIO()
    sc_msgpack.dump(wt, fp)
    sc_msgpack.dump(deposit, fp)
    fp.seek(0)
    assert list(sc_msgpack.stream_unpacker(fp)) == [wt, deposit]
    fp = BytesIO()
    sc_msgpack.dump({'wt': wt}, fp)
    fp.seek(0)
    assert sc_msgpack.load(fp) == {'wt': wt}


def test_unknown_class():
    b = msgpack.packb({'_sc4py_class_': 'Block', 'binary': b''}, use_bin_type=True)
    with pytest.raises(SidechainError):
        sc_msgpack.loads(b)


def test_class_mismatch(wt):
    b = msgpack.packb({'_sc4py_class_': 'SidechainDeposit', 'binary': wt.serialize()}, use_bin_type=True)
    with pytest.raises(SidechainError):
        sc_msgpack.loads(b)
