from sc4py.config import SidechainError
from sc4py.chain.tx import MainchainTx
from sc4py.sidechain.objects import SidechainObj
from sc4py.sidechain.script import parse_sidechain_obj
import msgpack


def default_hook(obj):
    if isinstance(obj, SidechainObj):
        return {
            '_sc4py_class_': obj.__class__.__name__,
            'binary': obj.serialize(),
        }
    if isinstance(obj, MainchainTx):
        return {
            '_sc4py_class_': 'MainchainTx',
            'binary': obj.b,
        }
    return obj


def object_hook(dct):
    if isinstance(dct, dict) and '_sc4py_class_' in dct:
        if dct['_sc4py_class_'] in ('SidechainWT', 'SidechainWTPrime', 'SidechainDeposit'):
            obj = parse_sidechain_obj(dct['binary'])
            if obj is None or obj.__class__.__name__ != dct['_sc4py_class_']:
                raise SidechainError('binary is not "{}"'.format(dct['_sc4py_class_']))
            return obj
        elif dct['_sc4py_class_'] == 'MainchainTx':
            return MainchainTx.from_binary(binary=dct['binary'])
        else:
            raise SidechainError('Not found class name "{}"'.format(dct['_sc4py_class_']))
    else:
        return dct


def dump(obj, fp, **kwargs):
    msgpack.pack(obj, fp, use_bin_type=True, default=default_hook, **kwargs)


def dumps(obj, **kwargs):
    return msgpack.packb(obj, use_bin_type=True, default=default_hook, **kwargs)


def load(fp):
    return msgpack.unpack(fp, object_hook=object_hook, raw=False)


def loads(b):
    return msgpack.unpackb(b, object_hook=object_hook, raw=False)


def stream_unpacker(fp):
    return msgpack.Unpacker(fp, object_hook=object_hook, raw=False)


__all__ = [
    "default_hook",
    "object_hook",
    "dump",
    "dumps",
    "load",
    "loads",
    "stream_unpacker",
]
