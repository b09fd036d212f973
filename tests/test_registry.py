"""Tests for option registration"""
import logging

import pytest

from smart_cmdline.core.exceptions import DuplicateOptionError, InvalidValueError
from smart_cmdline.options.models import Option, OptionKind, normalize_switches
from smart_cmdline.options.registry import OptionRegistry


class TestOptionKind:
    """Test resolving declared Python types to option kinds"""

    @pytest.mark.parametrize("value_type, kind", [
        (int, OptionKind.INTEGER),
        (float, OptionKind.FLOAT),
        (bool, OptionKind.BOOLEAN),
        (str, OptionKind.STRING),
    ])
    def test_builtin_types(self, value_type, kind):
        assert OptionKind.from_type(value_type) is kind

    def test_enum_type(self, color_enum):
        assert OptionKind.from_type(color_enum) is OptionKind.ENUM

    def test_unsupported_type_rejected(self):
        with pytest.raises(InvalidValueError, match="not supported"):
            OptionKind.from_type(list)

    def test_enum_instance_is_not_a_type(self, color_enum):
        with pytest.raises(InvalidValueError):
            OptionKind.from_type(color_enum.Red)


class TestNormalizeSwitches:
    """Test switch normalization"""

    def test_single_string_becomes_tuple(self):
        assert normalize_switches("-v") == ("-v",)

    def test_iterable_keeps_order(self):
        assert normalize_switches(["-i", "--input"]) == ("-i", "--input")

    def test_none_and_empty_mean_positional(self):
        assert normalize_switches(None) is None
        assert normalize_switches([]) is None


class TestRegistration:
    """Test add_required / add_optional / add_repeatable"""

    def test_add_required(self):
        registry = OptionRegistry()
        opt = registry.add_required("input", str, ["-i", "--input"], "File")
        assert opt.required is True
        assert opt.repeatable is False
        assert opt.default is None
        assert opt.switches == ("-i", "--input")
        assert opt.help == "File"

    def test_add_optional_keeps_default(self):
        registry = OptionRegistry()
        opt = registry.add_optional("level", int, 3, "-l")
        assert opt.required is False
        assert opt.default == 3
        assert opt.switches == ("-l",)

    def test_add_repeatable_is_never_required(self):
        registry = OptionRegistry()
        opt = registry.add_repeatable("tag", int, "-t")
        assert opt.repeatable is True
        assert opt.required is False
        assert list(opt.default) == []

    def test_registration_order_preserved(self):
        registry = OptionRegistry()
        registry.add_optional("b", str, "", "-b")
        registry.add_required("a", str)
        registry.add_repeatable("c", int, "-c")
        assert [opt.name for opt in registry] == ["b", "a", "c"]
        assert len(registry) == 3
        assert registry[1].name == "a"

    def test_contains_and_find(self):
        registry = OptionRegistry()
        registry.add_optional("name", str, "x", "-n")
        assert "name" in registry
        assert "other" not in registry
        assert registry.find("name").switches == ("-n",)
        assert registry.find("other") is None

    def test_options_property_is_a_copy(self):
        registry = OptionRegistry()
        registry.add_optional("name", str, "x", "-n")
        registry.options.clear()
        assert len(registry) == 1

    def test_registration_logs_at_debug(self, caplog):
        registry = OptionRegistry()
        with caplog.at_level(logging.DEBUG, logger="smart_cmdline"):
            registry.add_optional("name", str, "x", ["-n", "--name"])
        assert "Registered option 'name'" in caplog.text
        assert "-n, --name" in caplog.text


class TestDuplicateNames:
    """Registering a name twice always fails"""

    def test_same_kind(self):
        registry = OptionRegistry()
        registry.add_required("input", str, "-i")
        with pytest.raises(DuplicateOptionError, match="Option 'input' already added."):
            registry.add_required("input", str, "-i")

    def test_different_type_and_switches(self):
        registry = OptionRegistry()
        registry.add_optional("value", int, 1, "-a")
        with pytest.raises(DuplicateOptionError) as exc_info:
            registry.add_repeatable("value", str, ["-b", "--bee"])
        assert exc_info.value.option_name == "value"

    def test_duplicate_leaves_registry_unchanged(self):
        registry = OptionRegistry()
        registry.add_optional("value", int, 1, "-a")
        with pytest.raises(DuplicateOptionError):
            registry.add_optional("value", int, 2, "-b")
        assert len(registry) == 1
        assert registry.find("value").default == 1


class TestBooleanDefinitions:
    """Boolean options are switch flags"""

    def test_boolean_requires_switch(self):
        registry = OptionRegistry()
        with pytest.raises(InvalidValueError, match="needs at least one switch"):
            registry.add_optional("flag", bool, False)

    def test_boolean_default_must_be_bool(self):
        registry = OptionRegistry()
        with pytest.raises(InvalidValueError, match="must be True or False"):
            registry.add_optional("flag", bool, "yes", "-f")

    def test_unsupported_type_not_registered(self):
        registry = OptionRegistry()
        with pytest.raises(InvalidValueError):
            registry.add_optional("items", dict, {}, "-x")
        assert "items" not in registry


class TestOptionModel:
    """Test Option helpers"""

    def test_label_for_switches(self):
        opt = Option(name="input", value_type=str, kind=OptionKind.STRING, switches=("-i", "--input"))
        assert opt.label() == "-i, --input"
        assert opt.label(" | ") == "-i | --input"
        assert opt.is_positional is False

    def test_label_for_positional(self):
        opt = Option(name="source", value_type=str, kind=OptionKind.STRING)
        assert opt.label() == "<source>"
        assert opt.is_positional is True

    def test_matches_exact_switch_only(self):
        opt = Option(name="input", value_type=str, kind=OptionKind.STRING, switches=("-i", "--input"))
        assert opt.matches("--input")
        assert not opt.matches("--in")
        assert not opt.matches("input")


class TestOptionalDefaults:
    """Defaults of optional options follow the option's kind"""

    def test_int_default_widened_for_float_option(self):
        registry = OptionRegistry()
        opt = registry.add_optional("ratio", float, 1, "-r")
        assert opt.default == 1.0
        assert isinstance(opt.default, float)

    @pytest.mark.parametrize("value_type, default", [
        (int, "seven"),
        (int, 1.5),
        (int, True),
        (float, "0.5"),
        (float, False),
        (str, 3),
    ])
    def test_mismatched_default_rejected(self, value_type, default):
        registry = OptionRegistry()
        with pytest.raises(InvalidValueError, match="Default of option 'opt' must be") as exc_info:
            registry.add_optional("opt", value_type, default, "-o")
        assert exc_info.value.value == default
        assert "opt" not in registry

    def test_enum_default_must_be_a_member(self, color_enum):
        registry = OptionRegistry()
        with pytest.raises(InvalidValueError):
            registry.add_optional("color", color_enum, "Red", "--color")
        assert registry.add_optional("hue", color_enum, color_enum.Blue, "--hue").default is color_enum.Blue

    def test_none_default_allowed(self):
        registry = OptionRegistry()
        assert registry.add_optional("name", str, None, "-n").default is None
        assert registry.add_optional("count", int, None, "-c").default is None

    def test_required_and_repeatable_skip_the_check(self):
        registry = OptionRegistry()
        assert registry.add_required("input", int, "-i").default is None
        assert tuple(registry.add_repeatable("tag", float, "-t").default) == ()
