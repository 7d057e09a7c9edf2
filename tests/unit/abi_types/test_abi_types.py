import pytest

from abiparse.abi_types import (
    ALL_ABI_TYPES,
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
)

SELECTOR_NAMES = [
    (ABI_Address(), "address"),
    (ABI_Bool(), "bool"),
    (ABI_String(), "string"),
    (ABI_Bytes(), "bytes"),
    (ABI_BytesM(32), "bytes32"),
    (ABI_IntM(8), "int8"),
    (ABI_UIntM(256), "uint256"),
    (ABI_DynamicArray(ABI_Bool()), "bool[]"),
    (ABI_StaticArray(ABI_Address(), 2), "address[2]"),
    (ABI_DynamicArray(ABI_StaticArray(ABI_Bool(), 3)), "bool[3][]"),
    (ABI_Tuple((ABI_Address(), ABI_UIntM(48))), "(address,uint48)"),
    (ABI_StaticArray(ABI_Tuple((ABI_Bool(), ABI_String())), 2), "(bool,string)[2]"),
    (ABI_Tuple(()), "()"),
]


@pytest.mark.parametrize("typ,expected", SELECTOR_NAMES)
def test_selector_name(typ, expected):
    assert typ.selector_name() == expected


def test_structural_equality():
    assert ABI_UIntM(256) == ABI_UIntM(256)
    assert ABI_UIntM(256) != ABI_UIntM(128)
    assert ABI_UIntM(256) != ABI_IntM(256)
    assert ABI_Bytes() != ABI_String()
    assert ABI_Address() != ABI_UIntM(160)

    nested = ABI_DynamicArray(ABI_Tuple((ABI_StaticArray(ABI_Bool(), 3), ABI_UIntM(256))))
    same = ABI_DynamicArray(ABI_Tuple((ABI_StaticArray(ABI_Bool(), 3), ABI_UIntM(256))))
    other = ABI_DynamicArray(ABI_Tuple((ABI_StaticArray(ABI_Bool(), 4), ABI_UIntM(256))))
    assert nested == same
    assert hash(nested) == hash(same)
    assert nested != other


def test_tuple_elements_are_normalized():
    from_list = ABI_Tuple([ABI_Address(), ABI_Bool()])
    assert from_list.subtyps == (ABI_Address(), ABI_Bool())
    assert from_list == ABI_Tuple((ABI_Address(), ABI_Bool()))
    # usable as a dict key
    assert {from_list: 1}[ABI_Tuple((ABI_Address(), ABI_Bool()))] == 1


def test_types_are_immutable():
    typ = ABI_UIntM(256)
    with pytest.raises(AttributeError):
        typ.m_bits = 8


@pytest.mark.parametrize(
    "typ,is_dynamic",
    [
        (ABI_UIntM(256), False),
        (ABI_BytesM(4), False),
        (ABI_Bytes(), True),
        (ABI_String(), True),
        (ABI_DynamicArray(ABI_Bool()), True),
        (ABI_StaticArray(ABI_Bool(), 3), False),
        (ABI_StaticArray(ABI_String(), 3), True),
        (ABI_Tuple((ABI_Address(), ABI_Bool())), False),
        (ABI_Tuple((ABI_Address(), ABI_Bytes())), True),
    ],
)
def test_is_dynamic(typ, is_dynamic):
    assert typ.is_dynamic() is is_dynamic


def test_is_complex_type():
    assert ABI_Tuple(()).is_complex_type()
    assert ABI_DynamicArray(ABI_Bool()).is_complex_type()
    assert ABI_StaticArray(ABI_Bool(), 1).is_complex_type()
    assert not ABI_Bytes().is_complex_type()
    assert not ABI_UIntM(8).is_complex_type()


def test_variant_set():
    assert len(ALL_ABI_TYPES) == 10
    for typ, _ in SELECTOR_NAMES:
        assert isinstance(typ, ALL_ABI_TYPES)
