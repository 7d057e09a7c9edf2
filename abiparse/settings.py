import contextlib
import dataclasses
import os
from dataclasses import dataclass
from typing import Generator, Optional


def _optional_int_env(name: str) -> Optional[int]:
    value = os.environ.get(name)
    if value is None or value == "":
        return None
    return int(value)


ABIPARSE_MAX_NESTING_DEPTH: Optional[int] = _optional_int_env("ABIPARSE_MAX_NESTING_DEPTH")
ABIPARSE_STRICT_COMPONENTS = os.environ.get("ABIPARSE_STRICT_COMPONENTS", "0") == "1"
ABIPARSE_TRACEBACK_LIMIT: Optional[int] = _optional_int_env("ABIPARSE_TRACEBACK_LIMIT")


@dataclass
class Settings:
    # None means "use the environment default"
    max_nesting_depth: Optional[int] = None
    strict_components: Optional[bool] = None

    def __post_init__(self):
        # sanity check inputs
        if self.max_nesting_depth is not None:
            assert isinstance(self.max_nesting_depth, int)
            assert not isinstance(self.max_nesting_depth, bool)
            assert self.max_nesting_depth >= 1
        if self.strict_components is not None:
            assert isinstance(self.strict_components, bool)

    def get_max_nesting_depth(self) -> Optional[int]:
        if self.max_nesting_depth is None:
            return ABIPARSE_MAX_NESTING_DEPTH
        return self.max_nesting_depth

    def get_strict_components(self) -> bool:
        if self.strict_components is None:
            return ABIPARSE_STRICT_COMPONENTS
        return self.strict_components

    def as_dict(self):
        ret = dataclasses.asdict(self)
        return {k: v for (k, v) in ret.items() if v is not None}

    @classmethod
    def from_dict(cls, data):
        return cls(**data)


_settings: Optional[Settings] = None


def get_global_settings() -> Optional[Settings]:
    return _settings


def set_global_settings(new_settings: Optional[Settings]) -> None:
    assert isinstance(new_settings, Settings) or new_settings is None

    global _settings
    _settings = new_settings


def get_active_settings() -> Settings:
    """
    Return the anchored settings, or a default `Settings` (which resolves
    every option from the environment) when nothing is anchored.
    """
    return _settings if _settings is not None else Settings()


@contextlib.contextmanager
def anchor_settings(new_settings: Settings) -> Generator:
    """
    Set the globally available settings for the duration of this context manager
    """
    assert new_settings is not None
    global _settings
    tmp = get_global_settings()
    try:
        set_global_settings(new_settings)
        yield
    finally:
        set_global_settings(tmp)
