import hypothesis
import pytest

from abiparse.settings import set_global_settings

############
# PATCHING #
############


# disable hypothesis deadline globally
hypothesis.settings.register_profile("ci", deadline=None)
hypothesis.settings.load_profile("ci")


@pytest.fixture(autouse=True)
def reset_global_settings():
    # settings anchored by a test must not leak into the next one
    set_global_settings(None)
    yield
    set_global_settings(None)


@pytest.fixture
def assert_parse_failed():
    def assert_parse_failed(function_to_test, exception=Exception):
        with pytest.raises(exception):
            function_to_test()

    return assert_parse_failed
