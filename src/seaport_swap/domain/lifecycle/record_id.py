"""Order record identifiers."""

import zlib


def derive_record_id(signature: str) -> str:
    """Derive the record id from an order signature.

    The id is the CRC-32 checksum of the UTF-8 encoded signature,
    read as a signed 32-bit integer and rendered in decimal, so it may
    carry a leading minus sign.

    Parameters
    ----------
    signature : str
        Signature string of the signed order

    Returns
    -------
    str
        Decimal id, identical for identical signatures

    Notes
    -----
    Two orders with the same signature would collide. Signatures carry
    far more entropy than the 32-bit id, so collisions are accepted
    rather than guarded against.

    Examples
    --------
    >>> derive_record_id("123456789")
    '-873187034'
    """
    checksum = zlib.crc32(signature.encode("utf-8")) & 0xFFFFFFFF
    if checksum >= 0x80000000:
        checksum -= 0x100000000
    return str(checksum)
