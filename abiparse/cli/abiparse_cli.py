#!/usr/bin/env python3
import argparse
import json
import sys
import warnings
from pathlib import Path
from typing import Iterable, List, Optional, Union

import abiparse
from abiparse.abi_types import ABIType
from abiparse.abi_utils import canonical_type_string, json_abi_param, json_abi_type
from abiparse.exceptions import JSONError
from abiparse.params import (
    EventParam,
    JSONObject,
    TupleParam,
    decode_json,
    parse_event_param,
    parse_tuple_param,
)
from abiparse.reader import read_type
from abiparse.settings import ABIPARSE_TRACEBACK_LIMIT, Settings, anchor_settings
from abiparse.warnings import warnings_filter

format_options_help = """Format to print, one of:
repr (default) - Python representation of the parsed type or parameter
selector       - Canonical name used for function and event selectors
canonical      - Type name in the canonical string syntax, e.g. [address,bool][]
json           - JSON ABI type object
"""

OUTPUT_FORMATS = ("repr", "selector", "canonical", "json")


def _parse_cli_args():
    return _parse_args(sys.argv[1:])


def _format_type(typ: ABIType, output_format: str) -> str:
    if output_format == "selector":
        return typ.selector_name()
    if output_format == "canonical":
        return canonical_type_string(typ)
    if output_format == "json":
        return json.dumps(json_abi_type(typ))
    return repr(typ)


def _format_param(param: Union[EventParam, TupleParam], output_format: str) -> str:
    if output_format == "json":
        return json.dumps(json_abi_param(param))
    if output_format == "repr":
        return repr(param)

    ret = _format_type(param.kind, output_format)
    if isinstance(param, EventParam) and param.indexed:
        ret += " indexed"
    if param.name:
        ret += f" {param.name}"
    return ret


def _read_json_input(json_path: str) -> str:
    if json_path == "-":
        return sys.stdin.read()
    return Path(json_path).read_text()


def parse_inputs(
    type_strings: Iterable[str],
    json_text: Optional[str] = None,
    as_event: bool = True,
    output_format: str = "repr",
) -> List[str]:
    """
    Parse type strings and (optionally) a JSON parameter object or array,
    returning one formatted line per result.
    """
    ret = [_format_type(read_type(s), output_format) for s in type_strings]

    if json_text is not None:
        data = decode_json(json_text)
        objs = [data] if isinstance(data, JSONObject) else data
        if not isinstance(objs, list):
            raise JSONError("JSON input must be a parameter object or a list of them")

        parse_param = parse_event_param if as_event else parse_tuple_param
        ret.extend(_format_param(parse_param(obj), output_format) for obj in objs)

    return ret


def _parse_args(argv):
    warnings.simplefilter("always")

    parser = argparse.ArgumentParser(
        description="Parse Ethereum ABI type names and JSON ABI parameters",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("type_strings", help="ABI type names to parse", nargs="*")
    parser.add_argument("--version", action="version", version=abiparse.__version__)
    parser.add_argument(
        "--json",
        help="Read a JSON ABI parameter (or a list of them) from a file, `-` for stdin",
        dest="json_path",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--event",
        help="Parse JSON input as event parameters (default)",
        action="store_const",
        const=True,
        dest="as_event",
        default=True,
    )
    group.add_argument(
        "--tuple",
        help="Parse JSON input as tuple parameters",
        action="store_const",
        const=False,
        dest="as_event",
    )
    parser.add_argument(
        "-f", "--format", help=format_options_help, default="repr", choices=OUTPUT_FORMATS
    )
    parser.add_argument(
        "--strict-components",
        help="Reject `components` on parameters whose type is not a tuple",
        action="store_true",
    )
    parser.add_argument(
        "--max-depth", help="Maximum nesting depth of a type", type=int, dest="max_depth"
    )
    parser.add_argument(
        "--warnings", help="Turn warnings into errors, or silence them", choices=["error", "none"]
    )
    parser.add_argument(
        "--traceback-limit",
        help="Set the traceback limit for error messages reported by abiparse",
        type=int,
    )

    args = parser.parse_args(argv)

    if not args.type_strings and args.json_path is None:
        parser.error("nothing to parse: give type names or --json")
    if args.max_depth is not None and args.max_depth < 1:
        parser.error("--max-depth must be at least 1")

    if args.traceback_limit is not None:
        sys.tracebacklimit = args.traceback_limit
    elif ABIPARSE_TRACEBACK_LIMIT is not None:
        sys.tracebacklimit = ABIPARSE_TRACEBACK_LIMIT
    else:
        # only print the error message, not where inside abiparse it came from
        sys.tracebacklimit = 0

    settings = Settings(max_nesting_depth=args.max_depth)
    if args.strict_components:
        settings.strict_components = True

    json_text = None
    if args.json_path is not None:
        json_text = _read_json_input(args.json_path)

    with warnings_filter(args.warnings), anchor_settings(settings):
        output = parse_inputs(args.type_strings, json_text, args.as_event, args.format)

    for line in output:
        print(line)


if __name__ == "__main__":
    _parse_cli_args()
