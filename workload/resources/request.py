#!/usr/bin/env -S python3 -u

import requests
import time

from antithesis.assertions import (
    reachable,
    unreachable,
)

from errors import TransportError

DEFAULT_TIMEOUT = 10


def request(rpc_url:str, method:str, payload:dict, timeout:float=DEFAULT_TIMEOUT, max_retries:int=1, wait_seconds:float=1) -> requests.Response:
    '''
    @purpose - making raw api requests against a node
    @param rpc_url - node http address
    @param method - get | post
    @param payload - request payload, sent as json for post and as query params for get
    @param timeout - seconds before the http call is abandoned
    @param max_retries - attempts before giving up, 1 means the call is never retried
    @param wait_seconds - pause between attempts
    @return - the requests response, None if the http method is not supported
    '''

    print(f"Workload [request.py]: executing a {method} request on {rpc_url}")

    headers = {
        "Content-Type": "application/json",
    }

    if method in ['get', 'post']:

        # payloads are mapped differently in the request call
        payload_mapping = {
            'get': 'params',
            'post': 'json',
        }

        kwargs = {}

        if bool(payload):
            kwargs.update({payload_mapping[method]: payload})

        func = getattr(requests, method)

        max_retries = max(max_retries, 1)
        for attempt in range(max_retries):
            try:
                response = func(rpc_url, headers=headers, timeout=timeout, **kwargs)
                break
            except requests.exceptions.RequestException as e:
                print(f"Workload [request.py]: Attempt {attempt + 1} failed: {e}")
                if attempt < max_retries - 1:
                    time.sleep(wait_seconds)
                else:
                    raise TransportError(str(e)) from e

        reachable("A RPC request was send and a response was received", {"rpc_url":rpc_url})

        return response

    print(f"Workload [request.py]: No request was sent because method was {method}")
    unreachable("Invalid HTTP method in a RPC request", {"invalid http method":method})
    return None
