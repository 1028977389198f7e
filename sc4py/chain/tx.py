from sc4py.config import SidechainError
from sc4py.chain.utils import *
from typing import Optional, List, Tuple
from logging import getLogger
from struct import Struct, error as struct_error

log = getLogger('sc4py')
struct_tx_version = Struct('<i')
struct_outpoint = Struct('<32sI')
struct_sequence = Struct('<I')
struct_output_amount = Struct('<q')
struct_lock_time = Struct('<I')

SEQUENCE_FINAL = 0xffffffff


class MainchainTx(object):
    """
    Mainchain transaction in bitcoin legacy layout
    WT^ and deposits carry it, sidechain code only reads it
    """
    __slots__ = (
        # transaction data
        "b",
        "hash",
        # transaction body
        "version",  # 4bytes int
        "inputs",  # [(txhash: 32bytes bin, txindex: 4bytes int, script_sig: bin, sequence: 4bytes int),..]
        "outputs",  # [(amount: 8bytes int, script_pubkey: bin),..]
        "lock_time",  # 4bytes int
        "__weakref__",
    )

    def __eq__(self, other):
        if isinstance(other, MainchainTx):
            return self.hash == other.hash
        log.warning("compare with {} by {}".format(self, other))
        return False

    def __hash__(self):
        return hash(self.hash)

    def __repr__(self):
        return "<MainchainTx {} in={} out={}>".format(
            self.hash.hex(), len(self.inputs), len(self.outputs))

    def __init__(self):
        # data
        self.b = None
        self.hash = None
        # body
        self.version: Optional[int] = None
        self.inputs: Optional[List[Tuple[bytes, int, bytes, int]]] = None
        self.outputs: Optional[List[Tuple[int, bytes]]] = None
        self.lock_time: Optional[int] = None

    @classmethod
    def from_binary(cls, binary, first_pos=0, f_raise=True):
        self = cls()
        self.b = binary
        self.deserialize(first_pos=first_pos, f_raise=f_raise)
        return self

    @classmethod
    def from_dict(cls, tx):
        self = cls()
        self.version = tx.get('version', 2)
        self.inputs = list()
        for txin in tx.get('inputs', list()):
            txhash, txindex = txin[0], txin[1]
            script_sig = txin[2] if len(txin) > 2 else b''
            sequence = txin[3] if len(txin) > 3 else SEQUENCE_FINAL
            self.inputs.append((txhash, txindex, script_sig, sequence))
        self.outputs = [(amount, script_pubkey) for amount, script_pubkey in tx.get('outputs', list())]
        self.lock_time = tx.get('lock_time', 0)
        self.serialize()
        return self

    def serialize(self):
        # [version i]-[input_len]-[inputs]-[output_len]-[outputs]-[lock_time I]
        b = struct_tx_version.pack(self.version)
        # inputs
        b += compact_size2bin(len(self.inputs))
        for txhash, txindex, script_sig, sequence in self.inputs:
            b += struct_outpoint.pack(txhash, txindex)
            b += var_bytes2bin(script_sig)
            b += struct_sequence.pack(sequence)
        # outputs
        b += compact_size2bin(len(self.outputs))
        for amount, script_pubkey in self.outputs:
            b += struct_output_amount.pack(amount)
            b += var_bytes2bin(script_pubkey)
        b += struct_lock_time.pack(self.lock_time)
        self.b = b
        self.hash = sha256d_hash(self.b)

    def deserialize(self, first_pos=0, f_raise=True):
        """
        read tx from self.b[first_pos:]
        f_raise=False trims self.b when the tx is embedded in other data
        """
        try:
            self.version, = struct_tx_version.unpack_from(self.b, first_pos)
            pos = first_pos + struct_tx_version.size
            # inputs
            input_len, pos = bin2compact_size(self.b, pos)
            self.inputs = list()
            for i in range(input_len):
                txhash, txindex = struct_outpoint.unpack_from(self.b, pos)
                script_sig, pos = bin2var_bytes(self.b, pos + struct_outpoint.size)
                sequence, = struct_sequence.unpack_from(self.b, pos)
                pos += struct_sequence.size
                self.inputs.append((txhash, txindex, script_sig, sequence))
            # outputs
            output_len, pos = bin2compact_size(self.b, pos)
            self.outputs = list()
            for i in range(output_len):
                amount, = struct_output_amount.unpack_from(self.b, pos)
                script_pubkey, pos = bin2var_bytes(self.b, pos + struct_output_amount.size)
                self.outputs.append((amount, script_pubkey))
            self.lock_time, = struct_lock_time.unpack_from(self.b, pos)
            pos += struct_lock_time.size
        except struct_error as e:
            raise SidechainError('tx is truncated: {}'.format(e))
        if len(self.b) != pos - first_pos:
            if f_raise:
                raise SidechainError('Do not match len [{}!={}'.format(len(self.b), pos - first_pos))
            else:
                self.b = bytes(self.b[first_pos:pos])
        self.hash = sha256d_hash(self.b)

    def getinfo(self):
        r = dict()
        r['hash'] = self.hash.hex()
        r['version'] = self.version
        r['inputs'] = [(txhash.hex(), txindex, script_sig.hex(), sequence)
                       for txhash, txindex, script_sig, sequence in self.inputs]
        r['outputs'] = [(amount, script_pubkey.hex()) for amount, script_pubkey in self.outputs]
        r['lock_time'] = self.lock_time
        r['size'] = self.size
        return r

    def to_string(self):
        lines = ["MainchainTx(hash={}, ver={}, inputs={}, outputs={}, lock_time={})".format(
            self.hash.hex()[:10], self.version, len(self.inputs), len(self.outputs), self.lock_time)]
        for txhash, txindex, script_sig, sequence in self.inputs:
            lines.append("    input({}:{}, script_sig={}, sequence={})".format(
                txhash.hex(), txindex, script_sig.hex()[:24], sequence))
        for amount, script_pubkey in self.outputs:
            lines.append("    output(amount={}, script_pubkey={})".format(
                format_money(amount), script_pubkey.hex()[:30]))
        return "\n".join(lines)

    @property
    def prevouts(self):
        """previous output locators of inputs"""
        return [(txhash, txindex) for txhash, txindex, _, _ in self.inputs]

    @property
    def size(self):
        return len(self.b)


__all__ = [
    "SEQUENCE_FINAL",
    "MainchainTx",
]
