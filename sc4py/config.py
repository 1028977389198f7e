class C:  # Constant
    # sidechain object type, first byte of serialization
    SIDECHAIN_WT_OP = ord('W')  # withdrawal request
    SIDECHAIN_WTPRIME_OP = ord('P')  # withdrawal bundle (WT^)
    SIDECHAIN_DEPOSIT_OP = ord('D')  # deposit record
    sidechainop2name = {
        SIDECHAIN_WT_OP: 'WT',
        SIDECHAIN_WTPRIME_OP: 'WTPRIME',
        SIDECHAIN_DEPOSIT_OP: 'DEPOSIT',
    }

    # WT status
    WT_UNSPENT = ord('u')
    WT_IN_WTPRIME = ord('p')
    WT_SPENT = ord('s')
    wtstatus2name = {
        WT_UNSPENT: 'Unspent',
        WT_IN_WTPRIME: 'Pending - in WT^',
        WT_SPENT: 'Spent',
    }

    # WT^ status
    WTPRIME_CREATED = ord('c')
    WTPRIME_FAILED = ord('f')
    WTPRIME_SPENT = ord('o')
    wtprimestatus2name = {
        WTPRIME_CREATED: 'Created',
        WTPRIME_FAILED: 'Failed',
        WTPRIME_SPENT: 'Spent',
    }

    # script header [OP_RETURN]-[magic 4bytes]
    OP_RETURN = 0x6a
    SIDECHAIN_MAGIC = b'\xac\xdc\xf6\x6f'
    SIDECHAIN_SCRIPT_HEADER = bytes([OP_RETURN]) + SIDECHAIN_MAGIC

    # limits
    MAX_SIDECHAIN_NUMBER = 255
    CHECKSUM_SIZE = 6  # hex chars of deposit address checksum


class V:
    # this sidechain's slot on the mainchain
    THIS_SIDECHAIN = 0

    # money
    COIN_DIGIT = 8
    COIN = pow(10, COIN_DIGIT)


class SidechainError(Exception):
    pass


__all__ = [
    'C',
    'V',
    'SidechainError',
]
