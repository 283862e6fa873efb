#!/usr/bin/env -S python3 -u

from request import request, DEFAULT_TIMEOUT
from errors import DecodeError


def rpc_call(rpc_url:str, method:str, params:list=None, timeout:float=DEFAULT_TIMEOUT, max_retries:int=1) -> dict:
    '''
    @purpose - send a JSON-RPC 2.0 call and return the decoded response body
    @param rpc_url - endpoint address for node
    @param method - JSON-RPC method name
    @param params - positional params, [] when omitted
    @return - response body as a dict with at least a 'result' member
    '''
    payload = {
        "jsonrpc": "2.0",
        "id": 1,
        "method": method,
        "params": params if params is not None else [],
    }
    response = request(rpc_url, 'post', payload, timeout=timeout, max_retries=max_retries)
    if response.status_code != 200:
        print(f"Workload [rpc.py]: bad response status code {response.status_code} for {method}")
        raise DecodeError(f"unexpected status code {response.status_code} for {method}")

    try:
        response_body = response.json()
    except ValueError as e:
        print(f"Workload [rpc.py]: response for {method} is not valid json")
        raise DecodeError(f"invalid json in response for {method}: {e}") from e

    if not isinstance(response_body, dict):
        raise DecodeError(f"response for {method} is not a json object: {response_body!r}")

    if response_body.get('error') is not None:
        print(f"Workload [rpc.py]: node returned an error for {method}: {response_body['error']}")
        raise DecodeError(f"rpc error for {method}: {response_body['error']}")

    if 'result' not in response_body:
        raise DecodeError(f"response for {method} has no result: {response_body!r}")

    print(f"Workload [rpc.py]: good response status code for {method}")
    return response_body


def get_block_number(rpc_url:str, timeout:float=DEFAULT_TIMEOUT, max_retries:int=1) -> str:
    '''
    @purpose - get the latest block number of an ethereum style node
    @param rpc_url - endpoint address for node
    @return - block number as the hex string the node sent, e.g. '0x10d4f'
    '''
    method = 'eth_blockNumber'
    response_body = rpc_call(rpc_url, method, timeout=timeout, max_retries=max_retries)
    result = response_body['result']
    if not isinstance(result, str):
        raise DecodeError(f"result for {method} is not a hex string: {result!r}")
    return result
