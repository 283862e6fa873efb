#!/usr/bin/env -S python3 -u

import string

from errors import ParseError, ParseErrorKind

MAX_INT64 = 2**63 - 1

HEX_DIGITS = frozenset(string.hexdigits)


def parse_hex_height(hex_str:str) -> int:
    '''
    @purpose - convert a node supplied hex quantity (eth_blockNumber result) into a block height
    @param hex_str - hex string, optionally prefixed with 0x or 0X
    @return - the height as an int that fits a signed 64-bit integer
    '''
    digits = hex_str
    if digits[:2] in ("0x", "0X"):
        digits = digits[2:]

    # int(x, 16) also takes signs, whitespace and underscores, a node should never send those
    if not digits or not HEX_DIGITS.issuperset(digits):
        raise ParseError(ParseErrorKind.MALFORMED_HEX, hex_str)

    height = int(digits, 16)
    if height > MAX_INT64:
        raise ParseError(ParseErrorKind.OVERFLOW, hex_str)

    return height
