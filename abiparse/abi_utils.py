from typing import Optional, Union

from abiparse.abi_types import ABI_DynamicArray, ABI_StaticArray, ABI_Tuple, ABIType
from abiparse.params import EventParam, TupleParam


def canonical_type_string(type_: ABIType) -> str:
    """
    Render a type in the spelling accepted by `read_type`.

    Unlike `selector_name()`, tuples are written with square brackets, and
    the empty tuple is written as ``tuple``.
    """
    if isinstance(type_, ABI_Tuple):
        if not type_.subtyps:
            return "tuple"
        return "[" + ",".join(canonical_type_string(t) for t in type_.subtyps) + "]"

    if isinstance(type_, ABI_DynamicArray):
        return f"{canonical_type_string(type_.subtyp)}[]"

    if isinstance(type_, ABI_StaticArray):
        return f"{canonical_type_string(type_.subtyp)}[{type_.m_elems}]"

    return type_.selector_name()


def json_abi_type(type_: ABIType, name: Optional[str] = None) -> dict:
    """
    Generate the JSON ABI type for a given type.
    cf. https://docs.soliditylang.org/en/latest/abi-spec.html#json
    """

    def finalize(return_value):
        if name is not None:
            return {"name": name, **return_value}
        return return_value

    """
    > The canonical type is determined until a tuple type is reached and
      the string description up to that point is stored in type prefix
      with the word tuple,
    """
    if isinstance(type_, ABI_Tuple):
        components = [json_abi_type(t) for t in type_.subtyps]
        return finalize({"type": "tuple", "components": components})

    """
    > i.e. it will be tuple followed by a sequence of [] and [k] with
      integers k.
    """
    if isinstance(type_, (ABI_StaticArray, ABI_DynamicArray)):
        ret = json_abi_type(type_.subtyp)
        if isinstance(type_, ABI_DynamicArray):
            suffix = "[]"
        else:
            suffix = f"[{type_.m_elems}]"

        # modify in place
        ret["type"] += suffix
        return finalize(ret)

    return finalize({"type": type_.selector_name()})


def json_abi_param(param: Union[EventParam, TupleParam]) -> dict:
    ret = json_abi_type(param.kind, name=param.name)
    if isinstance(param, EventParam):
        ret["indexed"] = param.indexed
    return ret
