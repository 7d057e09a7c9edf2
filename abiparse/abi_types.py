from dataclasses import dataclass
from typing import Tuple

from abiparse.exceptions import InvalidABIType


def _is_int(value) -> bool:
    # bool is an int subclass, but `True` is never a valid width
    return isinstance(value, int) and not isinstance(value, bool)


# https://docs.soliditylang.org/en/latest/abi-spec.html#types
@dataclass(frozen=True)
class ABIType:
    # aka has tail
    def is_dynamic(self) -> bool:
        raise NotImplementedError("ABIType.is_dynamic")

    # The canonical name of the type for calculating the function selector
    def selector_name(self) -> str:
        raise NotImplementedError("ABIType.selector_name")

    # Whether the type is a tuple at the ABI level.
    # (This is important because if it does, it needs an offset.
    #   Compare the difference in encoding between `bytes` and `(bytes,)`.)
    def is_complex_type(self) -> bool:
        raise NotImplementedError("ABIType.is_complex_type")


# address: equivalent to uint160, except for the assumed interpretation
#   and language typing. For computing the function selector, address is used.
@dataclass(frozen=True)
class ABI_Address(ABIType):
    def is_dynamic(self):
        return False

    def selector_name(self):
        return "address"

    def is_complex_type(self):
        return False


# bool: equivalent to uint8 restricted to the values 0 and 1.
#  For computing the function selector, bool is used.
@dataclass(frozen=True)
class ABI_Bool(ABIType):
    def is_dynamic(self):
        return False

    def selector_name(self):
        return "bool"

    def is_complex_type(self):
        return False


# int<M>: two's complement signed integer type of M bits.
# The ABI restricts M to 0 < M <= 256, M % 8 == 0, but only M > 0 is
# enforced here; range checks belong to the encoder.
@dataclass(frozen=True)
class ABI_IntM(ABIType):
    m_bits: int

    def __post_init__(self):
        if not (_is_int(self.m_bits) and self.m_bits > 0):
            raise InvalidABIType(f"Invalid M provided for IntM: {self.m_bits!r}")

    def is_dynamic(self):
        return False

    def selector_name(self):
        return f"int{self.m_bits}"

    def is_complex_type(self):
        return False


# uint<M>: unsigned integer type of M bits. e.g. uint32, uint8, uint256.
@dataclass(frozen=True)
class ABI_UIntM(ABIType):
    m_bits: int

    def __post_init__(self):
        if not (_is_int(self.m_bits) and self.m_bits > 0):
            raise InvalidABIType(f"Invalid M provided for UIntM: {self.m_bits!r}")

    def is_dynamic(self):
        return False

    def selector_name(self):
        return f"uint{self.m_bits}"

    def is_complex_type(self):
        return False


# bytes<M>: binary type of M bytes (0 < M <= 32 per the ABI, only M > 0
# is enforced here).
@dataclass(frozen=True)
class ABI_BytesM(ABIType):
    m_bytes: int

    def __post_init__(self):
        if not (_is_int(self.m_bytes) and self.m_bytes > 0):
            raise InvalidABIType(f"Invalid M for BytesM: {self.m_bytes!r}")

    def is_dynamic(self):
        return False

    def selector_name(self):
        return f"bytes{self.m_bytes}"

    def is_complex_type(self):
        return False


# bytes: dynamic sized byte sequence.
@dataclass(frozen=True)
class ABI_Bytes(ABIType):
    def is_dynamic(self):
        return True

    def selector_name(self):
        return "bytes"

    def is_complex_type(self):
        return False


# string: dynamic sized unicode string assumed to be UTF-8 encoded.
@dataclass(frozen=True)
class ABI_String(ABIType):
    def is_dynamic(self):
        return True

    def selector_name(self):
        return "string"

    def is_complex_type(self):
        return False


def _check_subtyp(subtyp, ctor_name):
    if not isinstance(subtyp, ABIType):
        raise InvalidABIType(f"{ctor_name} element must be an ABIType, got {subtyp!r}")


# <type>[M]: a fixed-length array of M elements, M >= 0, of the given type.
@dataclass(frozen=True)
class ABI_StaticArray(ABIType):
    subtyp: ABIType
    m_elems: int

    def __post_init__(self):
        _check_subtyp(self.subtyp, "StaticArray")
        if not (_is_int(self.m_elems) and self.m_elems >= 0):
            raise InvalidABIType(f"Invalid M for StaticArray: {self.m_elems!r}")

    def is_dynamic(self):
        return self.subtyp.is_dynamic()

    def selector_name(self):
        return f"{self.subtyp.selector_name()}[{self.m_elems}]"

    def is_complex_type(self):
        return True


# <type>[]: a variable-length array of elements of the given type.
@dataclass(frozen=True)
class ABI_DynamicArray(ABIType):
    subtyp: ABIType

    def __post_init__(self):
        _check_subtyp(self.subtyp, "DynamicArray")

    def is_dynamic(self):
        return True

    def selector_name(self):
        return f"{self.subtyp.selector_name()}[]"

    def is_complex_type(self):
        return True


# (T1,T2,...,Tn): tuple consisting of the types T1, ..., Tn, n >= 0
@dataclass(frozen=True)
class ABI_Tuple(ABIType):
    subtyps: Tuple[ABIType, ...] = ()

    def __post_init__(self):
        if not isinstance(self.subtyps, (tuple, list)):
            raise InvalidABIType(f"Tuple elements must be a sequence, got {self.subtyps!r}")
        for t in self.subtyps:
            _check_subtyp(t, "Tuple")
        # frozen, so bypass __setattr__ to normalize lists into tuples
        object.__setattr__(self, "subtyps", tuple(self.subtyps))

    def is_dynamic(self):
        return any(t.is_dynamic() for t in self.subtyps)

    def selector_name(self):
        return "(" + ",".join(t.selector_name() for t in self.subtyps) + ")"

    def is_complex_type(self):
        return True


ALL_ABI_TYPES = (
    ABI_Address,
    ABI_Bool,
    ABI_String,
    ABI_Bytes,
    ABI_BytesM,
    ABI_IntM,
    ABI_UIntM,
    ABI_DynamicArray,
    ABI_StaticArray,
    ABI_Tuple,
)
