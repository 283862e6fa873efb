#!/usr/bin/env -S python3 -u

import os

from detector import DEFAULT_CRITICAL_COUNT
from request import DEFAULT_TIMEOUT

PLUGIN_NAME = "vatz-plugin-ethereum-block-height"

DEFAULT_RPC_URL = "http://localhost:8545"
DEFAULT_ADDR = "127.0.0.1"
DEFAULT_PORT = 10001


def _int_env(name:str, default:int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {value!r}") from e


def _float_env(name:str, default:float) -> float:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {value!r}") from e


def get_rpc_url() -> str:
    '''
    @purpose - endpoint of the node whose block height is watched
    @return - BLOCK_HEIGHT_RPC_URL, or the local geth default
    '''
    return os.getenv("BLOCK_HEIGHT_RPC_URL", DEFAULT_RPC_URL)


def get_rpc_timeout() -> float:
    timeout = _float_env("BLOCK_HEIGHT_RPC_TIMEOUT", DEFAULT_TIMEOUT)
    if timeout <= 0:
        raise ValueError(f"BLOCK_HEIGHT_RPC_TIMEOUT must be > 0, got {timeout}")
    return timeout


def get_critical_count() -> int:
    count = _int_env("BLOCK_HEIGHT_CRITICAL_COUNT", DEFAULT_CRITICAL_COUNT)
    if count < 0:
        raise ValueError(f"BLOCK_HEIGHT_CRITICAL_COUNT must be >= 0, got {count}")
    return count


def get_listen_addr_and_port():
    '''
    @purpose - where the plugin serves check requests from the monitoring host
    @return - (address, port)
    '''
    addr = os.getenv("BLOCK_HEIGHT_PLUGIN_ADDR", DEFAULT_ADDR)
    port = _int_env("BLOCK_HEIGHT_PLUGIN_PORT", DEFAULT_PORT)
    return addr, port
