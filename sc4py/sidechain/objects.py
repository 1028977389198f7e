from sc4py.config import C, SidechainError
from sc4py.chain.tx import MainchainTx
from sc4py.chain.utils import *
from typing import Optional
from logging import getLogger
from struct import Struct, error as struct_error

log = getLogger('sc4py')
struct_obj_header = Struct('<BB')  # [sidechainop B]-[sidechain B]
struct_wt_body = Struct('<qqB32s')  # [amount q]-[mainchain_fee q]-[status B]-[hash_blind_wtx 32s]
struct_wtprime_body = Struct('<iB')  # [height i]-[status B]
struct_deposit_amount = Struct('<q')
struct_deposit_body = Struct('<II32s')  # [burn_index I]-[tx_index I]-[hash_mainchain_block 32s]

# status order, a status only moves to a higher rank
WT_STATUS_RANK = {
    C.WT_UNSPENT: 0,
    C.WT_IN_WTPRIME: 1,
    C.WT_SPENT: 2,
}
WTPRIME_TRANSITIONS = {
    C.WTPRIME_CREATED: (C.WTPRIME_FAILED, C.WTPRIME_SPENT),
    C.WTPRIME_FAILED: (),
    C.WTPRIME_SPENT: (),
}


class SidechainObj(object):
    """
    Common base of objects stored in mainchain scripts.
    `sidechainop` is fixed per class and is the first byte of serialization.
    """
    __slots__ = ()
    sidechainop = None

    def __eq__(self, other):
        if isinstance(other, SidechainObj):
            return self.sidechainop == other.sidechainop and self.serialize() == other.serialize()
        log.warning("compare with {} by {}".format(self, other))
        return False

    def __hash__(self):
        return hash(self.get_hash())

    def serialize(self) -> bytes:
        raise NotImplementedError

    def get_hash(self) -> Optional[bytes]:
        """sha256d of serialization, None for an unknown object type"""
        if self.sidechainop not in C.sidechainop2name:
            return None
        return sha256d_hash(self.serialize())

    def get_script(self) -> bytes:
        """OP_RETURN script: [OP_RETURN]-[magic 4bytes]-[serialization]"""
        return C.SIDECHAIN_SCRIPT_HEADER + self.serialize()

    def to_string(self) -> str:
        return "sidechainop={}\n".format(self.sidechainop)

    def _check_op(self, b):
        if len(b) == 0 or b[0] != self.sidechainop:
            raise SidechainError('sidechainop mismatch, expect {} but {}'.format(
                self.sidechainop, b[0] if len(b) else None))

    @staticmethod
    def _check_len(b, pos):
        if len(b) != pos:
            raise SidechainError('Do not match len [{}!={}'.format(len(b), pos))


class SidechainWT(SidechainObj):
    """withdrawal request from sidechain to mainchain"""
    __slots__ = ("sidechain", "destination", "amount", "mainchain_fee", "status", "hash_blind_wtx")
    sidechainop = C.SIDECHAIN_WT_OP

    def __repr__(self):
        return "<SidechainWT {} {} fee={} {}>".format(
            self.sidechain, self.destination, self.mainchain_fee, self.get_status_str())

    def __init__(self, sidechain=0, destination='', amount=0, mainchain_fee=0,
                 status=C.WT_UNSPENT, hash_blind_wtx=b'\x00' * 32):
        self.sidechain: int = sidechain
        self.destination: str = destination
        self.amount: int = amount
        self.mainchain_fee: int = mainchain_fee
        self.status: int = status
        self.hash_blind_wtx: bytes = hash_blind_wtx

    @classmethod
    def from_binary(cls, binary):
        self = cls()
        self._check_op(binary)
        try:
            _, self.sidechain = struct_obj_header.unpack_from(binary, 0)
            self.destination, pos = bin2var_str(binary, struct_obj_header.size)
            self.amount, self.mainchain_fee, self.status, self.hash_blind_wtx = \
                struct_wt_body.unpack_from(binary, pos)
        except struct_error as e:
            raise SidechainError('WT is truncated: {}'.format(e))
        self._check_len(binary, pos + struct_wt_body.size)
        return self

    def serialize(self):
        return struct_obj_header.pack(self.sidechainop, self.sidechain) \
            + var_str2bin(self.destination) \
            + struct_wt_body.pack(self.amount, self.mainchain_fee, self.status, self.hash_blind_wtx)

    def get_status_str(self):
        return C.wtstatus2name.get(self.status, 'Unknown')

    def update_status(self, status):
        """move to next lifecycle status, never go back to Unspent"""
        if status not in WT_STATUS_RANK:
            raise SidechainError('unknown WT status {}'.format(status))
        if status == self.status:
            return
        if self.status in WT_STATUS_RANK and WT_STATUS_RANK[status] < WT_STATUS_RANK[self.status]:
            raise SidechainError('WT status cannot go back "{}" to "{}"'.format(
                self.get_status_str(), C.wtstatus2name[status]))
        self.status = status

    def to_string(self):
        s = "sidechainop={}\n".format(chr(self.sidechainop))
        s += "nSidechain={}\n".format(self.sidechain)
        s += "destination={}\n".format(self.destination)
        s += "amount={}\n".format(format_money(self.amount))
        s += "mainchainFee={}\n".format(format_money(self.mainchain_fee))
        s += "status={}\n".format(self.get_status_str())
        s += "hashBlindWTX={}\n".format(self.hash_blind_wtx.hex())
        return s

    def getinfo(self):
        r = dict()
        r['hash'] = self.get_hash().hex()
        r['type'] = C.sidechainop2name[self.sidechainop]
        r['sidechain'] = self.sidechain
        r['destination'] = self.destination
        r['amount'] = self.amount
        r['mainchain_fee'] = self.mainchain_fee
        r['status'] = self.get_status_str()
        r['hash_blind_wtx'] = self.hash_blind_wtx.hex()
        return r


class SidechainWTPrime(SidechainObj):
    """WT^, bundle of withdrawals paid out by one mainchain tx"""
    __slots__ = ("sidechain", "wtprime", "height", "status")
    sidechainop = C.SIDECHAIN_WTPRIME_OP

    def __repr__(self):
        return "<SidechainWTPrime {} height={} {}>".format(
            self.sidechain, self.height, self.get_status_str())

    def __init__(self, sidechain=0, wtprime: MainchainTx = None, height=0, status=C.WTPRIME_CREATED):
        self.sidechain: int = sidechain
        self.wtprime: Optional[MainchainTx] = wtprime
        self.height: int = height
        self.status: int = status

    @classmethod
    def from_binary(cls, binary):
        self = cls()
        self._check_op(binary)
        try:
            _, self.sidechain = struct_obj_header.unpack_from(binary, 0)
            self.wtprime = MainchainTx.from_binary(binary, struct_obj_header.size, f_raise=False)
            pos = struct_obj_header.size + self.wtprime.size
            self.height, self.status = struct_wtprime_body.unpack_from(binary, pos)
        except struct_error as e:
            raise SidechainError('WT^ is truncated: {}'.format(e))
        self._check_len(binary, pos + struct_wtprime_body.size)
        return self

    def serialize(self):
        return struct_obj_header.pack(self.sidechainop, self.sidechain) \
            + self.wtprime.b \
            + struct_wtprime_body.pack(self.height, self.status)

    def get_status_str(self):
        return C.wtprimestatus2name.get(self.status, 'Unknown')

    def update_status(self, status):
        """Created -> Failed or Spent, both are final"""
        if status not in WTPRIME_TRANSITIONS:
            raise SidechainError('unknown WT^ status {}'.format(status))
        if status == self.status:
            return
        if status not in WTPRIME_TRANSITIONS.get(self.status, ()):
            raise SidechainError('WT^ status cannot move "{}" to "{}"'.format(
                self.get_status_str(), C.wtprimestatus2name[status]))
        self.status = status

    def to_string(self):
        s = "sidechainop={}\n".format(chr(self.sidechainop))
        s += "nSidechain={}\n".format(self.sidechain)
        s += "wtprime={}\n".format(self.wtprime.to_string())
        s += "status={}\n".format(self.get_status_str())
        return s

    def getinfo(self):
        r = dict()
        r['hash'] = self.get_hash().hex()
        r['type'] = C.sidechainop2name[self.sidechainop]
        r['sidechain'] = self.sidechain
        r['wtprime'] = self.wtprime.getinfo()
        r['height'] = self.height
        r['status'] = self.get_status_str()
        return r


class SidechainDeposit(SidechainObj):
    """deposit moved from mainchain into sidechain"""
    __slots__ = ("sidechain", "destination", "amount", "dtx", "burn_index", "tx_index",
                 "hash_mainchain_block")
    sidechainop = C.SIDECHAIN_DEPOSIT_OP

    def __repr__(self):
        return "<SidechainDeposit {} {} payout={}>".format(
            self.sidechain, self.destination, self.amount)

    def __init__(self, sidechain=0, destination='', amount=0, dtx: MainchainTx = None,
                 burn_index=0, tx_index=0, hash_mainchain_block=b'\x00' * 32):
        self.sidechain: int = sidechain
        self.destination: str = destination
        self.amount: int = amount  # user payout
        self.dtx: Optional[MainchainTx] = dtx
        self.burn_index: int = burn_index
        self.tx_index: int = tx_index
        self.hash_mainchain_block: bytes = hash_mainchain_block

    @classmethod
    def from_binary(cls, binary):
        self = cls()
        self._check_op(binary)
        try:
            _, self.sidechain = struct_obj_header.unpack_from(binary, 0)
            self.destination, pos = bin2var_str(binary, struct_obj_header.size)
            self.amount, = struct_deposit_amount.unpack_from(binary, pos)
            pos += struct_deposit_amount.size
            self.dtx = MainchainTx.from_binary(binary, pos, f_raise=False)
            pos += self.dtx.size
            self.burn_index, self.tx_index, self.hash_mainchain_block = \
                struct_deposit_body.unpack_from(binary, pos)
        except struct_error as e:
            raise SidechainError('deposit is truncated: {}'.format(e))
        self._check_len(binary, pos + struct_deposit_body.size)
        return self

    def serialize(self):
        return struct_obj_header.pack(self.sidechainop, self.sidechain) \
            + var_str2bin(self.destination) \
            + struct_deposit_amount.pack(self.amount) \
            + self.dtx.b \
            + struct_deposit_body.pack(self.burn_index, self.tx_index, self.hash_mainchain_block)

    def to_string(self):
        s = "sidechainop={}\n".format(chr(self.sidechainop))
        s += "nSidechain={}\n".format(self.sidechain)
        s += "strDest={}\n".format(self.destination)
        s += "payout={}\n".format(format_money(self.amount))
        s += "mainchaintxid={}\n".format(self.dtx.hash.hex())
        s += "nBurnIndex={}\n".format(self.burn_index)
        s += "nTx={}\n".format(self.tx_index)
        s += "hashMainchainBlock={}\n".format(self.hash_mainchain_block.hex())
        s += "inputs:\n"
        for txhash, txindex in self.dtx.prevouts:
            s += "{}:{}\n".format(txhash.hex(), txindex)
        return s

    def getinfo(self):
        r = dict()
        r['hash'] = self.get_hash().hex()
        r['type'] = C.sidechainop2name[self.sidechainop]
        r['sidechain'] = self.sidechain
        r['destination'] = self.destination
        r['amount'] = self.amount
        r['dtx'] = self.dtx.getinfo()
        r['burn_index'] = self.burn_index
        r['tx_index'] = self.tx_index
        r['hash_mainchain_block'] = self.hash_mainchain_block.hex()
        return r


__all__ = [
    "SidechainObj",
    "SidechainWT",
    "SidechainWTPrime",
    "SidechainDeposit",
]
