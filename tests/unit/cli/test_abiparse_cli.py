import io
import json
import sys
import warnings

import pytest

from abiparse.abi_types import ABI_Address, ABI_Bool, ABI_StaticArray, ABI_UIntM
from abiparse.cli.abiparse_cli import _parse_args, parse_inputs
from abiparse.exceptions import InvalidName, JSONError, NestingTooDeep, UnexpectedField
from abiparse.params import EventParam, TupleParam
from abiparse.settings import get_global_settings
from abiparse.warnings import IgnoredComponents

EVENT_INPUTS = """[
    {"name": "from", "type": "address", "indexed": true},
    {"name": "amounts", "type": "uint256[2]", "indexed": false}
]"""


@pytest.fixture
def run_cli(monkeypatch, capsys):
    # _parse_args changes the traceback limit and the warnings filters
    monkeypatch.setattr(sys, "tracebacklimit", 1000, raising=False)

    def run_cli(*argv):
        with warnings.catch_warnings():
            _parse_args(list(argv))
        return capsys.readouterr().out.splitlines()

    return run_cli


@pytest.mark.parametrize(
    "output_format,expected",
    [
        ("selector", ["uint256[2]", "(bool,address)[]"]),
        ("canonical", ["uint256[2]", "[bool,address][]"]),
        (
            "json",
            [
                '{"type": "uint256[2]"}',
                '{"type": "tuple[]", "components": [{"type": "bool"}, {"type": "address"}]}',
            ],
        ),
    ],
)
def test_parse_inputs_formats(output_format, expected):
    type_strings = ["uint256[2]", "{bool,address}[]"]

    assert parse_inputs(type_strings, output_format=output_format) == expected


def test_parse_inputs_repr():
    assert parse_inputs(["uint256[2]"]) == [repr(ABI_StaticArray(ABI_UIntM(256), 2))]


def test_parse_inputs_event_params():
    assert parse_inputs([], EVENT_INPUTS, output_format="selector") == [
        "address indexed from",
        "uint256[2] amounts",
    ]
    assert parse_inputs([], EVENT_INPUTS, output_format="json") == [
        '{"name": "from", "type": "address", "indexed": true}',
        '{"name": "amounts", "type": "uint256[2]", "indexed": false}',
    ]


def test_parse_inputs_single_object():
    out = parse_inputs([], '{"name": "to", "type": "address"}')

    assert out == [repr(EventParam("to", ABI_Address()))]


def test_parse_inputs_tuple_params():
    json_text = '[{"type": "bool"}, {"name": "pair", "type": "tuple", "components": []}]'

    out = parse_inputs([], json_text, as_event=False, output_format="canonical")
    assert out == ["bool", "tuple pair"]

    out = parse_inputs([], '{"type": "bool", "name": "ok"}', as_event=False)
    assert out == [repr(TupleParam("ok", ABI_Bool()))]


@pytest.mark.parametrize("json_text", ['"address"', "42", "null"])
def test_parse_inputs_bad_json_shape(json_text):
    with pytest.raises(JSONError):
        parse_inputs([], json_text)


def test_cli_type_strings(run_cli):
    assert run_cli("-f", "selector", "uint", "[address,bytes32][2]") == [
        "uint256",
        "(address,bytes32)[2]",
    ]


def test_cli_json_file(run_cli, tmp_path):
    path = tmp_path / "inputs.json"
    path.write_text(EVENT_INPUTS)

    assert run_cli("--json", str(path), "-f", "canonical") == [
        "address indexed from",
        "uint256[2] amounts",
    ]


def test_cli_json_stdin(run_cli, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO('[{"name": "x", "type": "int8"}]'))

    out = run_cli("--json", "-", "--tuple", "-f", "json")
    assert [json.loads(line) for line in out] == [{"name": "x", "type": "int8"}]


def test_cli_sets_traceback_limit(run_cli):
    run_cli("bool")
    assert sys.tracebacklimit == 0

    run_cli("--traceback-limit", "5", "bool")
    assert sys.tracebacklimit == 5


def test_cli_errors_propagate(run_cli):
    with pytest.raises(InvalidName):
        run_cli("foo")


def test_cli_max_depth(run_cli):
    assert run_cli("--max-depth", "1", "-f", "selector", "bool[]") == ["bool[]"]

    with pytest.raises(NestingTooDeep):
        run_cli("--max-depth", "1", "bool[][]")

    assert get_global_settings() is None


def test_cli_strict_components(run_cli, tmp_path):
    path = tmp_path / "inputs.json"
    path.write_text('{"name": "a", "type": "address", "components": []}')

    with pytest.warns(IgnoredComponents):
        assert run_cli("--json", str(path), "-f", "selector") == ["address a"]

    with pytest.raises(UnexpectedField):
        run_cli("--json", str(path), "--strict-components")

    with pytest.raises(IgnoredComponents):
        run_cli("--json", str(path), "--warnings", "error")


def test_cli_silences_warnings(run_cli, tmp_path):
    path = tmp_path / "inputs.json"
    path.write_text('{"name": "a", "type": "address", "components": []}')

    with warnings.catch_warnings(record=True) as w:
        assert run_cli("--json", str(path), "--warnings", "none", "-f", "selector") == [
            "address a"
        ]

    assert not [x for x in w if issubclass(x.category, IgnoredComponents)]


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["--max-depth", "0", "bool"],
        ["-f", "yaml", "bool"],
        ["--event", "--tuple", "--json", "-"],
        ["--warnings", "loud", "bool"],
    ],
)
def test_cli_usage_errors(run_cli, argv):
    with pytest.raises(SystemExit) as e:
        run_cli(*argv)

    assert e.value.code == 2


def test_cli_version(run_cli):
    with pytest.raises(SystemExit) as e:
        run_cli("--version")

    assert e.value.code == 0
