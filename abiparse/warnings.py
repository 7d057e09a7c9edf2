import contextlib
import warnings
from typing import Optional

from abiparse.exceptions import _BaseABIException


class ABIWarning(_BaseABIException, Warning):
    pass


# print a warning
def abi_warn(warning: ABIWarning | str):
    if isinstance(warning, str):
        warning = ABIWarning(warning)
    warnings.warn(warning, stacklevel=2)


@contextlib.contextmanager
def warnings_filter(warnings_control: Optional[str]):
    # note: using warnings.catch_warnings() since it saves and restores
    # the warnings filter
    with warnings.catch_warnings():
        set_warnings_filter(warnings_control)
        yield


def set_warnings_filter(warnings_control: Optional[str]):
    if warnings_control == "error":
        warnings_filter = "error"
    elif warnings_control == "none":
        warnings_filter = "ignore"
    else:
        assert warnings_control is None  # sanity
        warnings_filter = "default"

    if warnings_control is not None:
        # warnings.simplefilter only adds to the warnings filters,
        # so we should clear warnings filter between calls to simplefilter()
        warnings.resetwarnings()

    warnings.simplefilter(warnings_filter, category=ABIWarning)  # type: ignore[arg-type]


class IgnoredComponents(ABIWarning):
    """
    Warn when a `components` field is given for a parameter whose type
    is not a tuple (the field has no effect)
    """

    pass
