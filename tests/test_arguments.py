"""Unit tests for CommandLineArguments and ParsedArguments lookups."""

import copy
import dataclasses
import pickle
import sys
from unittest.mock import MagicMock, patch

import pytest

from shellarg import (
    ArgumentLookupError,
    CommandLineArguments,
    InsufficientParametersError,
    MissingOptionValueError,
    OptionKind,
    ParsedArguments,
    ParserStateError,
    SchemaError,
    UnknownOptionError,
    UnknownParameterError,
)


@pytest.fixture
def copy_args() -> CommandLineArguments:
    args = CommandLineArguments()
    args.add_parameters(["source", "destination"])
    args.add_options({"r": OptionKind.SWITCH, "z": OptionKind.INPUT})
    return args


class TestCommandLineArguments:
    """Test suite for the argument set facade."""

    def test_copy_command(self, copy_args):
        """Test the documented copy command end to end."""
        copy_args.parse(["copy.php", "-r", "-z", "out.zip", "./src", "./dst"])

        assert copy_args.get_parameter("source") == "./src"
        assert copy_args.get_parameter("destination") == "./dst"
        assert copy_args.get_option("r") is True
        assert copy_args.get_option("z") == "out.zip"
        assert copy_args.has_option("r")

    def test_unset_option_is_absent(self, copy_args):
        """Test that an omitted option returns None instead of raising."""
        copy_args.parse(["copy.py", "./src", "./dst"])

        assert copy_args.get_option("r") is None
        assert copy_args.get_option("z") is None
        assert not copy_args.has_option("z")

    def test_parse_defaults_to_sys_argv(self, copy_args):
        """Test that the process argument vector is used when none is given."""
        with patch.object(sys, "argv", ["copy.py", "-zbackup.zip", "a", "b"]):
            parsed = copy_args.parse()

        assert parsed.get_option("z") == "backup.zip"
        assert copy_args.get_parameter("destination") == "b"

    def test_parse_returns_result(self, copy_args):
        """Test that parse() returns and stores the ParsedArguments."""
        parsed = copy_args.parse(["copy.py", "./src", "./dst"])

        assert isinstance(parsed, ParsedArguments)
        assert copy_args.parsed is parsed

    def test_parse_only_once(self, copy_args):
        """Test that a second parse is refused."""
        copy_args.parse(["copy.py", "./src", "./dst"])

        with pytest.raises(ParserStateError, match="already parsed"):
            copy_args.parse(["copy.py", "./other", "./dst"])

        assert copy_args.get_parameter("source") == "./src"

    def test_schema_frozen_after_parse(self, copy_args):
        """Test that registering after parsing fails."""
        copy_args.parse(["copy.py", "./src", "./dst"])

        with pytest.raises(SchemaError):
            copy_args.add_option("v", OptionKind.SWITCH)
        with pytest.raises(SchemaError):
            copy_args.add_parameter("mode")

    def test_unknown_names_before_parse(self, copy_args):
        """Test that undeclared names fail even before parsing."""
        with pytest.raises(UnknownParameterError, match='parameter "nonexistent" does not exist'):
            copy_args.get_parameter("nonexistent")
        with pytest.raises(UnknownOptionError, match='option "q" does not exist'):
            copy_args.get_option("q")

    def test_unknown_names_after_failed_parse(self, copy_args):
        """Test that undeclared names fail the same way after a failed parse."""
        with pytest.raises(InsufficientParametersError):
            copy_args.parse(["copy.py"])

        with pytest.raises(UnknownParameterError):
            copy_args.get_parameter("nonexistent")
        with pytest.raises(UnknownOptionError):
            copy_args.has_option("q")

    def test_unknown_names_after_parse(self, copy_args):
        """Test that undeclared names fail after a successful parse."""
        copy_args.parse(["copy.py", "./src", "./dst"])

        with pytest.raises(ArgumentLookupError):
            copy_args.get_parameter("nonexistent")
        with pytest.raises(LookupError):
            copy_args.get_option("q")

    def test_known_names_require_parse(self, copy_args):
        """Test that lookups of declared names need a successful parse."""
        with pytest.raises(ParserStateError, match="Call parse"):
            copy_args.get_parameter("source")

        with pytest.raises(MissingOptionValueError):
            copy_args.parse(["copy.py", "-z", "./src", "./dst"])

        assert copy_args.parsed is None
        with pytest.raises(ParserStateError):
            copy_args.get_option("r")

    def test_custom_parser(self, copy_args):
        """Test that any ArgumentParser implementation can be supplied."""
        parsed = ParsedArguments(
            declared_parameters=("source", "destination"),
            declared_options={"r": OptionKind.SWITCH, "z": OptionKind.INPUT},
            parameter_values={"source": "x", "destination": "y"},
        )
        parser = MagicMock()
        parser.parse.return_value = parsed

        args = CommandLineArguments(schema=copy_args.schema, parser=parser)
        args.parse(["prog"])

        parser.parse.assert_called_once_with(copy_args.schema, ["prog"])
        assert args.get_parameter("source") == "x"


class TestParsedArguments:
    """Tests for the result store."""

    @pytest.fixture
    def parsed(self) -> ParsedArguments:
        return ParsedArguments(
            declared_parameters=["source", "destination"],
            declared_options={"r": OptionKind.SWITCH, "z": OptionKind.INPUT},
            parameter_values={"source": "./src", "destination": "./dst"},
            option_values={"r": True},
        )

    def test_lookups(self, parsed):
        """Test parameter and option lookups."""
        assert parsed.get_parameter("source") == "./src"
        assert parsed.get_option("r") is True
        assert parsed.get_option("z") is None
        assert parsed.has_option("r")
        assert not parsed.has_option("z")

    def test_unknown_lookups(self, parsed):
        """Test that undeclared names raise lookup errors."""
        with pytest.raises(UnknownParameterError) as exc_info:
            parsed.get_parameter("nonexistent")
        assert exc_info.value.name == "nonexistent"

        with pytest.raises(UnknownOptionError) as exc_info:
            parsed.get_option("q")
        assert exc_info.value.flag == "q"

    def test_as_dict(self, parsed):
        """Test serialisation lists every declared name."""
        assert parsed.as_dict() == {
            "parameters": {"source": "./src", "destination": "./dst"},
            "options": {"r": True, "z": None},
        }

    def test_immutable(self, parsed):
        """Test that the result cannot be modified after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            parsed.option_values = {}  # type: ignore[misc]
        with pytest.raises(TypeError):
            parsed.option_values["z"] = "late.zip"  # type: ignore[index]
        with pytest.raises(TypeError):
            parsed.parameter_values["source"] = "other"  # type: ignore[index]

    def test_declared_parameters_normalised_to_tuple(self, parsed):
        """Test that the declared parameter list is stored as a tuple."""
        assert parsed.declared_parameters == ("source", "destination")

    def test_missing_parameter_value_rejected(self):
        """Test that every declared parameter needs a value."""
        with pytest.raises(ValueError, match="missing \\['source'\\]"):
            ParsedArguments(
                declared_parameters=("source",),
                declared_options={},
                parameter_values={},
            )

    def test_undeclared_parameter_value_rejected(self):
        """Test that values for undeclared parameters are refused."""
        with pytest.raises(ValueError, match="undeclared \\['extra'\\]"):
            ParsedArguments(
                declared_parameters=("source",),
                declared_options={},
                parameter_values={"source": "./src", "extra": "x"},
            )

    def test_undeclared_option_value_rejected(self):
        """Test that only declared flags may carry a value."""
        with pytest.raises(ValueError, match="undeclared flags \\['q'\\]"):
            ParsedArguments((), {}, parameter_values={}, option_values={"q": True})

    def test_hashable(self, parsed):
        """Test that equal results hash equally."""
        same = ParsedArguments(
            declared_parameters=("source", "destination"),
            declared_options={"r": OptionKind.SWITCH, "z": OptionKind.INPUT},
            parameter_values={"source": "./src", "destination": "./dst"},
            option_values={"r": True},
        )

        assert same == parsed
        assert hash(same) == hash(parsed)
        assert len({parsed, same}) == 1

    def test_copyable(self, parsed):
        """Test deepcopy, pickling and dataclasses.asdict on a result."""
        assert copy.deepcopy(parsed) == parsed
        assert pickle.loads(pickle.dumps(parsed)) == parsed

        fields = dataclasses.asdict(parsed)
        assert dict(fields["parameter_values"]) == {"source": "./src", "destination": "./dst"}
        assert dict(fields["option_values"]) == {"r": True}
