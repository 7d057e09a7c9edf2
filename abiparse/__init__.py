from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _version

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
from abiparse.params import (
    EventParam,
    TupleParam,
    loads_event_param,
    loads_tuple_param,
    loads_tuple_param_list,
    loads_tuple_params,
    parse_event_param,
    parse_tuple_param,
    parse_tuple_param_list,
    parse_tuple_params,
)
from abiparse.reader import read_type

__version__: str
try:
    __version__ = _version(__name__)
except PackageNotFoundError:
    __version__ = "unknown"
