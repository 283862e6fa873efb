#!/usr/bin/env -S python3 -u

import dataclasses
import enum
import threading

from antithesis.assertions import (
    always,
    sometimes,
)

DEFAULT_CRITICAL_COUNT = 3


class Severity(enum.Enum):
    UNKNOWN = "UNKNOWN"
    INFO = "INFO"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"


class State(enum.Enum):
    NONE = "NONE"
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


@dataclasses.dataclass
class EvaluationResult:
    message: str
    severity: Severity = Severity.UNKNOWN
    state: State = State.NONE
    func_name: str = ""

    @property
    def success(self) -> bool:
        return self.state is State.SUCCESS

    def to_dict(self) -> dict:
        return {
            "func_name": self.func_name,
            "message": self.message,
            "severity": self.severity.value,
            "state": self.state.value,
            "success": self.success,
        }


@dataclasses.dataclass
class DetectorState:
    previous_height: int = 0
    stall_count: int = 0
    critical_threshold: int = DEFAULT_CRITICAL_COUNT


class StalenessDetector():
    '''
    @purpose - turn successive block height observations into INFO | WARNING | CRITICAL
    @param state - starting state, a fresh DetectorState when omitted
    '''

    def __init__(self, state:DetectorState=None):
        self.state = state if state is not None else DetectorState()
        self._lock = threading.Lock()

    def evaluate(self, observed:int) -> EvaluationResult:
        '''
        @purpose - classify one observed height and move the state forward
        @param observed - block height reported by the node on this tick
        @return - EvaluationResult with state SUCCESS
        '''
        with self._lock:
            state = self.state
            print(f"Workload [detector.py]: Previous block height: {state.previous_height}, Latest block height: {observed}")

            # a first observation of 0 is counted as a stall, 0 also means "never observed"
            if observed > state.previous_height:
                state.stall_count = 0
                result = EvaluationResult(
                    message=f"Block height increasing. Current height: {observed}",
                    severity=Severity.INFO,
                )
            else:
                state.stall_count += 1
                if state.stall_count > state.critical_threshold:
                    message = f"Block height stuck more than {state.critical_threshold} times. Current height: {observed}"
                    severity = Severity.CRITICAL
                else:
                    message = f"Block height stuck {state.stall_count} times. Current height: {observed}"
                    severity = Severity.WARNING
                result = EvaluationResult(message=message, severity=severity)

            state.previous_height = observed
            result.state = State.SUCCESS

            always(state.stall_count >= 0, "Block height stall count is never negative", {"stall_count":state.stall_count})
            sometimes(result.severity is Severity.INFO, "Block height increases between checks", {"height":observed})

        print(f"Workload [detector.py]: {result.message}")
        return result

    def snapshot(self) -> DetectorState:
        '''
        @purpose - copy of the current state, safe to read while other ticks run
        '''
        with self._lock:
            return dataclasses.replace(self.state)
