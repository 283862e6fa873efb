#!/usr/bin/env -S python3 -u

from antithesis.assertions import (
    always,
    reachable,
)

from detector import EvaluationResult, Severity, State, StalenessDetector
from errors import DecodeError, ParseError, TransportError
from hex_height import parse_hex_height
from request import DEFAULT_TIMEOUT
import rpc


def _failure(result:EvaluationResult, message:str) -> EvaluationResult:
    print(f"Workload [check.py]: {message}")
    result.message = message
    result.severity = Severity.CRITICAL
    result.state = State.FAILURE
    return result


def make_block_height_check(detector:StalenessDetector, rpc_url:str, timeout:float=DEFAULT_TIMEOUT):
    '''
    @purpose - build the function the plugin host calls once per tick
    @param detector - detector holding the state for this node, shared across ticks
    @param rpc_url - endpoint address for node
    @param timeout - http timeout for the eth_blockNumber call
    @return - callable (info, option) -> EvaluationResult
    '''

    def block_height_check(info:dict=None, option:dict=None) -> EvaluationResult:
        info = info or {}
        result = EvaluationResult(
            message="Unable to fetch block height",
            severity=Severity.UNKNOWN,
            state=State.NONE,
            func_name=str(info.get("execute_method", "")),
        )

        # failed ticks return before the detector sees anything
        try:
            hex_height = rpc.get_block_number(rpc_url, timeout=timeout)
        except TransportError as e:
            return _failure(result, f"Failed to get response: {e}")
        except DecodeError as e:
            return _failure(result, f"Failed to parse response: {e}")

        try:
            latest_height = parse_hex_height(hex_height)
        except ParseError as e:
            return _failure(result, f"Failed to convert hex to int64: {e}")

        reachable("A block height was read from the node", {"rpc_url":rpc_url,"height":latest_height})

        evaluation = detector.evaluate(latest_height)
        always(evaluation.state is State.SUCCESS, "A parsed block height always produces a successful evaluation", {"message":evaluation.message})

        result.message = evaluation.message
        result.severity = evaluation.severity
        result.state = evaluation.state
        return result

    return block_height_check
