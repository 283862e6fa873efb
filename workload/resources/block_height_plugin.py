#!/usr/bin/env -S python3 -u

import argparse
import json
import sys

import nodes
from check import make_block_height_check
from detector import DetectorState, Severity, StalenessDetector
from plugin import Plugin

# nagios style exit codes for --once
EXIT_CODES = {
    Severity.INFO: 0,
    Severity.WARNING: 1,
    Severity.CRITICAL: 2,
    Severity.UNKNOWN: 3,
}


def non_negative_int(value:str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def positive_float(value:str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Alert when a node's block height stops increasing")
    # env values become the defaults, argparse does not re-check non-string defaults
    try:
        addr, port = nodes.get_listen_addr_and_port()
        critical = nodes.get_critical_count()
        timeout = nodes.get_rpc_timeout()
    except ValueError as e:
        parser.error(str(e))
    parser.add_argument("--addr", type=str, help="Listening address", default=addr)
    parser.add_argument("--port", type=int, help="Listening port", default=port)
    parser.add_argument("--critical", type=non_negative_int, help="Block height stuck count to raise critical level of alert", default=critical)
    parser.add_argument("--rpc-url", type=str, help="JSON-RPC endpoint of the node", default=nodes.get_rpc_url())
    parser.add_argument("--timeout", type=positive_float, help="Seconds to wait for the node", default=timeout)
    parser.add_argument("--once", action="store_true", help="Run a single check, print it and exit instead of serving")
    return parser


def build_plugin(args) -> Plugin:
    detector = StalenessDetector(DetectorState(critical_threshold=args.critical))
    plugin = Plugin(nodes.PLUGIN_NAME)
    plugin.register(make_block_height_check(detector, args.rpc_url, timeout=args.timeout))
    return plugin


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    print(f"Workload [block_height_plugin.py]: args: {vars(args)}")

    plugin = build_plugin(args)

    if args.once:
        result = plugin.execute({"execute_method": "block_height_check"}, {})
        print(json.dumps(result.to_dict()))
        return EXIT_CODES[result.severity]

    plugin.start(args.addr, args.port)
    print("Workload [block_height_plugin.py]: exit")
    return 0


if __name__ == "__main__":
    sys.exit(main())
