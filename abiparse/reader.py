"""
Reader for canonical ABI type names.

Turns strings such as ``uint256[3][]``, ``bytes32`` or ``[address,bool]``
into `ABIType` objects. Tuples may be written with square brackets (the
canonical spelling) or with braces (``{address,bool}``); both spellings
produce the same `ABI_Tuple`. The bare keyword ``tuple`` reads as an empty
tuple whose elements are supplied separately, from the ``components`` of a
JSON ABI parameter.
"""
import re
from typing import List, Optional

from abiparse.abi_types import (
    ABI_Address,
    ABI_Bool,
    ABI_Bytes,
    ABI_BytesM,
    ABI_DynamicArray,
    ABI_IntM,
    ABI_StaticArray,
    ABI_String,
    ABI_Tuple,
    ABI_UIntM,
    ABIType,
)
from abiparse.exceptions import InvalidName, InvalidNumber, NestingTooDeep
from abiparse.settings import get_active_settings

_OPENERS = {"]": "[", "}": "{"}

_KEYWORD_TYPES = {
    "address": ABI_Address(),
    "bool": ABI_Bool(),
    "string": ABI_String(),
    "bytes": ABI_Bytes(),
    "int": ABI_IntM(256),
    "uint": ABI_UIntM(256),
    "tuple": ABI_Tuple(()),
}

_SIZED_TYPES = (("uint", ABI_UIntM), ("int", ABI_IntM), ("bytes", ABI_BytesM))

_DECIMAL_RE = re.compile(r"[0-9]+")


def read_type(name: str) -> ABIType:
    """
    Return the ABI type described by a canonical type name.

    Arguments
    ---------
    name : str
        Type name, e.g. ``uint256``, ``bool[3][]`` or ``[address,uint48]``.

    Returns
    -------
    ABIType
        The parsed type. Trailing array brackets always bind before keyword
        matching, so ``bytes32[2]`` is a static array of ``bytes32``.

    Raises
    ------
    InvalidName
        The string matches no production of the type grammar.
    InvalidNumber
        A width or array length is present but is not an unsigned integer.
    NestingTooDeep
        The configured `max_nesting_depth` was exceeded.
    """
    if not isinstance(name, str):
        raise InvalidName(name, hint="ABI type names must be strings")

    return read_type_at_depth(name, 0)


def read_type_at_depth(name: str, depth: int) -> ABIType:
    """
    Like `read_type`, for a type name which is itself nested `depth` levels
    deep (e.g. inside the `components` of a JSON ABI parameter), so that the
    nesting ceiling covers the whole parameter.
    """
    max_depth = get_active_settings().get_max_nesting_depth()
    try:
        return _read(name, depth, max_depth)
    except RecursionError as e:
        # only tuple bodies recurse, array suffixes are read in a loop
        raise NestingTooDeep(max_depth) from e


def _read(name: str, depth: int, max_depth: Optional[int]) -> ABIType:
    _check_depth(depth, max_depth)

    # peel array suffixes off from the outermost one inwards
    lengths: List[Optional[int]] = []
    start = None
    while name.endswith(("]", "}")):
        start = _find_matching_open(name)
        if start == 0:
            break

        if name[-1] != "]":
            # braces only ever delimit tuples, never an array suffix
            raise InvalidName(name)

        length_str = name[start + 1 : -1]
        lengths.append(None if length_str == "" else _parse_decimal(length_str, name))
        name = name[:start]
        depth += 1
        _check_depth(depth, max_depth)
        start = None

    if start == 0:
        # the whole string is one bracketed group, so it is a tuple
        subtyps = [_read(s, depth + 1, max_depth) for s in _split_tuple_body(name)]
        typ: ABIType = ABI_Tuple(tuple(subtyps))
    else:
        typ = _read_scalar(name)

    for length in reversed(lengths):
        if length is None:
            typ = ABI_DynamicArray(typ)
        else:
            typ = ABI_StaticArray(typ, length)
    return typ


def _check_depth(depth: int, max_depth: Optional[int]) -> None:
    if max_depth is not None and depth > max_depth:
        raise NestingTooDeep(max_depth)


def _find_matching_open(name: str) -> int:
    """
    Return the index of the bracket which opens the group closed by the
    last character of `name`.
    """
    nesting = 0
    for pos in range(len(name) - 1, -1, -1):
        c = name[pos]
        if c in _OPENERS:
            nesting += 1
        elif c in ("[", "{"):
            nesting -= 1
            if nesting == 0:
                if c != _OPENERS[name[-1]]:
                    raise InvalidName(name, hint="mismatched brackets")
                return pos

    raise InvalidName(name, hint="unbalanced brackets")


def _split_tuple_body(name: str) -> List[str]:
    """
    Split the body of a bracketed tuple on the commas that are not nested
    inside another bracket pair.
    """
    body = name[1:-1]
    items = []
    nesting = 0
    last = 0
    for pos, c in enumerate(body):
        if c in ("[", "{"):
            nesting += 1
        elif c in ("]", "}"):
            nesting -= 1
            if nesting < 0:
                raise InvalidName(name, hint="unbalanced brackets")
        elif c == "," and nesting == 0:
            items.append(body[last:pos])
            last = pos + 1
    items.append(body[last:])

    if any(item == "" for item in items):
        raise InvalidName(name, hint="tuple elements cannot be empty")
    return items


def _read_scalar(name: str) -> ABIType:
    if name in _KEYWORD_TYPES:
        return _KEYWORD_TYPES[name]

    for prefix, ctor in _SIZED_TYPES:
        if not name.startswith(prefix):
            continue

        suffix = name[len(prefix) :]
        if not suffix[0].isdigit() and suffix[0] not in "+-":
            # e.g. `integer`, which is a name and not a malformed number
            raise InvalidName(name)

        size = _parse_decimal(suffix, name)
        if size == 0:
            raise InvalidName(name, hint=f"{prefix} widths must be positive")
        return ctor(size)

    raise InvalidName(name)


def _parse_decimal(value: str, type_name: str) -> int:
    # int() alone would also accept "+1", " 1", "1_0" and non-ascii digits
    if _DECIMAL_RE.fullmatch(value) is None:
        raise InvalidNumber(value, type_name)
    return int(value)
