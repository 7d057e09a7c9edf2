"""
Parsers for JSON ABI parameter objects.

An event input looks like::

    {"name": "order", "type": "tuple", "indexed": false,
     "components": [{"name": "maker", "type": "address"},
                    {"name": "expiry", "type": "uint48"}]}

The `type` string of a tuple carries no element types (it is just
``tuple``); they come from the sibling `components` list instead, so the
parsers below resolve `type` and `components` together.
"""
import functools
import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from abiparse.abi_types import ABI_DynamicArray, ABI_StaticArray, ABI_Tuple, ABIType
from abiparse.exceptions import (
    DuplicateField,
    InvalidFieldValue,
    JSONError,
    MissingField,
    MissingTypeField,
    NestingTooDeep,
    UnexpectedField,
)
from abiparse.reader import read_type_at_depth
from abiparse.settings import get_active_settings
from abiparse.warnings import IgnoredComponents, abi_warn

_EVENT_PARAM_FIELDS = ("name", "type", "indexed", "components")
_TUPLE_PARAM_FIELDS = ("name", "type", "components")


class JSONObject(list):
    """
    A JSON object decoded as the list of its ``(key, value)`` pairs.

    Pairs keep source order and repeated keys are preserved, so that the
    parsers can reject an object which names the same field twice (a plain
    ``dict`` would silently keep the last value).
    """


@dataclass(frozen=True)
class EventParam:
    name: str
    kind: ABIType
    # if True, the param is stored in a log topic instead of the log data
    indexed: bool = False


@dataclass(frozen=True)
class TupleParam:
    name: Optional[str]
    kind: ABIType


def _iter_pairs(obj) -> Iterable[Tuple[Any, Any]]:
    if isinstance(obj, JSONObject):
        return obj
    if isinstance(obj, Mapping):
        return obj.items()
    raise JSONError(f"expected a JSON object, got {type(obj).__name__}: {obj!r}")


def _collect_fields(obj, known_fields) -> Dict[str, Any]:
    """
    Gather the known fields of a parameter object into one slot each.

    Unknown keys (`internalType`, `anonymous`, ...) are skipped, a known
    key that occurs twice is an error.
    """
    fields: Dict[str, Any] = {}
    for key, value in _iter_pairs(obj):
        if key not in known_fields:
            continue
        if key in fields:
            raise DuplicateField(key)
        fields[key] = value
    return fields


def _expect_str(fields: Dict[str, Any], key: str) -> str:
    value = fields[key]
    if not isinstance(value, str):
        raise InvalidFieldValue(key, f"expected a string, got {value!r}")
    return value


def _array_dims(typ: ABIType) -> List[Union[ABI_DynamicArray, ABI_StaticArray]]:
    # the array wrappers around the element type, outermost first
    dims = []
    while isinstance(typ, (ABI_DynamicArray, ABI_StaticArray)):
        dims.append(typ)
        typ = typ.subtyp
    return dims


def _innermost_element(typ: ABIType) -> ABIType:
    dims = _array_dims(typ)
    return dims[-1].subtyp if dims else typ


def _replace_innermost_element(typ: ABIType, new_element: ABIType) -> ABIType:
    ret = new_element
    for dim in reversed(_array_dims(typ)):
        if isinstance(dim, ABI_DynamicArray):
            ret = ABI_DynamicArray(ret)
        else:
            ret = ABI_StaticArray(ret, dim.m_elems)
    return ret


def _resolve_kind(fields: Dict[str, Any], depth: int) -> ABIType:
    # the type string continues the nesting of the object it belongs to
    kind = read_type_at_depth(_expect_str(fields, "type"), depth)
    has_components = "components" in fields

    if isinstance(kind, ABI_Tuple):
        if not has_components:
            raise MissingField("components")
        return ABI_Tuple(_parse_components(fields["components"], depth + 1))

    if isinstance(_innermost_element(kind), ABI_Tuple):
        # `tuple[]`, `tuple[2][]`: the components describe the innermost tuple
        if not has_components:
            return kind
        element_depth = depth + len(_array_dims(kind)) + 1
        element = ABI_Tuple(_parse_components(fields["components"], element_depth))
        return _replace_innermost_element(kind, element)

    if has_components:
        if get_active_settings().get_strict_components():
            raise UnexpectedField("components", hint=f"`{fields['type']}` is not a tuple type")
        abi_warn(IgnoredComponents(f"ignoring `components` of non-tuple type `{fields['type']}`"))

    return kind


def _parse_components(components, depth: int) -> Tuple[ABIType, ...]:
    max_depth = get_active_settings().get_max_nesting_depth()
    if max_depth is not None and depth > max_depth:
        raise NestingTooDeep(max_depth)

    if isinstance(components, JSONObject) or not isinstance(components, (list, tuple)):
        raise InvalidFieldValue("components", f"expected a list, got {components!r}")

    ret = []
    for component in components:
        if not isinstance(component, (JSONObject, Mapping)):
            raise MissingTypeField(f"Invalid tuple param type: {component!r} is not an object")
        fields = _collect_fields(component, _TUPLE_PARAM_FIELDS)
        if "type" not in fields:
            raise MissingTypeField()
        ret.append(_resolve_kind(fields, depth))

    return tuple(ret)


def _nesting_guard(fn):
    # `components` nest through mutual recursion
    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except RecursionError as e:
            raise NestingTooDeep(get_active_settings().get_max_nesting_depth()) from e

    return wrapper


@_nesting_guard
def parse_tuple_params(components) -> Tuple[ABIType, ...]:
    """
    Reduce a `components` list to the element types of its tuple.

    Arguments
    ---------
    components : list
        Component descriptors, each an object with at least a `type`.
        A component whose own type is a tuple must carry nested
        `components`.

    Returns
    -------
    tuple
        One `ABIType` per component, in input order. Component names are
        not kept.
    """
    return _parse_components(components, 0)


@_nesting_guard
def parse_tuple_param(obj) -> TupleParam:
    """
    Parse one member of a tuple's `components` list.

    `name` is optional (and may be ``null``); `type` is required.
    """
    fields = _collect_fields(obj, _TUPLE_PARAM_FIELDS)

    name = None
    if fields.get("name") is not None:
        name = _expect_str(fields, "name")

    if "type" not in fields:
        raise MissingField("type")
    kind = _resolve_kind(fields, 0)

    return TupleParam(name=name, kind=kind)


def parse_tuple_param_list(objs) -> List[TupleParam]:
    if isinstance(objs, JSONObject) or not isinstance(objs, (list, tuple)):
        raise JSONError(f"expected a JSON array of tuple params, got {objs!r}")
    return [parse_tuple_param(obj) for obj in objs]


@_nesting_guard
def parse_event_param(obj) -> EventParam:
    """
    Parse one entry of an event's `inputs` list.

    Arguments
    ---------
    obj : Mapping | JSONObject
        The parameter object. `name` and `type` are required, `indexed`
        defaults to False, `components` is required when the type is
        ``tuple``.

    Returns
    -------
    EventParam
    """
    fields = _collect_fields(obj, _EVENT_PARAM_FIELDS)

    if "name" not in fields:
        raise MissingField("name")
    name = _expect_str(fields, "name")

    if "type" not in fields:
        raise MissingField("type")
    kind = _resolve_kind(fields, 0)

    indexed = fields.get("indexed", False)
    if not isinstance(indexed, bool):
        raise InvalidFieldValue("indexed", f"expected a boolean, got {indexed!r}")

    return EventParam(name=name, kind=kind, indexed=indexed)


def decode_json(text: str | bytes):
    """
    Decode JSON text, keeping objects as `JSONObject` pairs so that repeated
    keys survive decoding.
    """
    try:
        return json.loads(text, object_pairs_hook=JSONObject)
    except json.JSONDecodeError as e:
        raise JSONError(f"invalid JSON: {e.msg}", e.lineno, e.colno) from e
    except UnicodeDecodeError as e:
        # bytes input which is not UTF-8, -16 or -32
        raise JSONError(f"invalid JSON: {e}") from e
    except RecursionError as e:
        raise JSONError("invalid JSON: nesting too deep to decode") from e


def loads_event_param(text: str | bytes) -> EventParam:
    return parse_event_param(decode_json(text))


def loads_tuple_param(text: str | bytes) -> TupleParam:
    return parse_tuple_param(decode_json(text))


def loads_tuple_param_list(text: str | bytes) -> List[TupleParam]:
    return parse_tuple_param_list(decode_json(text))


def loads_tuple_params(text: str | bytes) -> Tuple[ABIType, ...]:
    return parse_tuple_params(decode_json(text))
