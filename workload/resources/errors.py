#!/usr/bin/env -S python3 -u

import enum


class ProbeError(Exception):
    '''
    @purpose - base for every failure that ends a single block height check
    '''


class TransportError(ProbeError):
    '''
    @purpose - the RPC call could not be completed (connection refused, timeout, dns...)
    '''


class DecodeError(ProbeError):
    '''
    @purpose - the node answered but the body is not the JSON-RPC shape we expect
    '''


class ParseErrorKind(enum.Enum):
    MALFORMED_HEX = "malformed_hex"
    OVERFLOW = "overflow"


class ParseError(ProbeError):
    '''
    @purpose - a hex block height could not be converted to a signed 64-bit int
    @param kind - ParseErrorKind.MALFORMED_HEX | ParseErrorKind.OVERFLOW
    @param value - the offending string, as received from the node
    '''

    def __init__(self, kind:ParseErrorKind, value:str):
        self.kind = kind
        self.value = value
        if kind is ParseErrorKind.OVERFLOW:
            message = f"hex value too large for int64: {value}"
        else:
            message = f"failed to parse hex string: {value}"
        super().__init__(message)
