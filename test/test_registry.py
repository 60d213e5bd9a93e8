import logging

import pytest

import optscan
import optscan.registry
import optscan.scan


class TestRegisterValid:
    @pytest.mark.parametrize(
        ("long", "short", "is_bool", "required"),
        [
            ("valid", "v", True, False),
            ("", "v", True, False),
            ("valid", "", True, False),
            ("valid", "v", False, False),
            ("", "v", False, False),
            ("valid", "", False, False),
            ("valid", "v", False, True),
            ("", "v", False, True),
            ("valid", "", False, True),
        ],
    )
    def test_register(self, registry, long, short, is_bool, required):
        option = registry.register(
            "valid", long, short, is_bool=is_bool, required=required, usage="usage"
        )
        assert option.key == "valid"
        assert option.long == long
        assert option.short == short
        assert registry.get("valid") is option
        assert len(registry) == 1
        assert (registry.required_keys == ["valid"]) is required

    @pytest.mark.parametrize(
        ("long", "short", "expected_long", "expected_short"),
        [
            ("--valid", "-v", "valid", "v"),
            ("-valid", "--v", "valid", "v"),
            ("valid", "v", "valid", "v"),
        ],
    )
    def test_dashes_are_stripped(
        self, registry, long, short, expected_long, expected_short
    ):
        option = registry.register("valid", long, short)
        assert option.long == expected_long
        assert option.short == expected_short
        assert registry.by_long(expected_long) is option
        assert registry.by_short(expected_short) is option

    def test_none_forms(self, registry):
        option = registry.register("valid", None, "v")
        assert option.long == ""
        assert registry.by_short("v") is option

    def test_logs_registration(self, registry, caplog):
        caplog.set_level(logging.DEBUG, logger="optscan.registry")
        registry.register("valid", "valid", "v")
        assert any(
            name == "optscan.registry" and "valid" in message
            for name, _, message in caplog.record_tuples
        )


class TestRegisterInvalid:
    @pytest.mark.parametrize(
        ("long", "short", "is_bool", "required", "error", "match"),
        [
            (
                "invalid",
                "i",
                True,
                True,
                optscan.registry.BooleanRequiredConflict,
                r"both boolean and required: invalid$",
            ),
            (
                "",
                "",
                True,
                False,
                optscan.registry.NoKeyProvided,
                r"either a long or short key",
            ),
            (
                "",
                "toolong",
                True,
                False,
                optscan.registry.ShortFormTooLong,
                r"no longer than one character: toolong$",
            ),
            (
                "l",
                "",
                True,
                False,
                optscan.registry.LongFormTooShort,
                r"longer than one character: l$",
            ),
            (
                "--",
                "",
                False,
                False,
                optscan.registry.LongFormTooShort,
                r"longer than one character: -$",
            ),
        ],
    )
    def test_invalid(self, registry, long, short, is_bool, required, error, match):
        with pytest.raises(error, match=match):
            registry.register(
                "invalid", long, short, is_bool=is_bool, required=required
            )
        assert len(registry) == 0

    def test_bool_required_checked_first(self, registry):
        # Both forms are missing, but the conflict is reported.
        with pytest.raises(optscan.registry.BooleanRequiredConflict):
            registry.register("invalid", "", "", is_bool=True, required=True)

    def test_errors_are_value_errors(self, registry):
        with pytest.raises(ValueError):
            registry.register("invalid", "", "")

    @pytest.mark.parametrize("key", ["", None, 10])
    def test_invalid_key(self, registry, key):
        with pytest.raises(TypeError):
            registry.register(key, "valid", "v")

    @pytest.mark.parametrize(
        ("key", "long", "short", "error"),
        [
            ("sovalid", "meha", "m", optscan.registry.DuplicateKey),
            ("newsovalid", "soval", "x", optscan.registry.DuplicateLongForm),
            ("newestsovalid", "wow", "s", optscan.registry.DuplicateShortForm),
        ],
    )
    def test_duplicates(self, registry, key, long, short, error):
        first = registry.register("sovalid", "soval", "s", is_bool=True)

        with pytest.raises(error) as e:
            registry.register(key, long, short, is_bool=True)

        assert e.value.arg in (key, long, short)
        assert list(registry) == [first]
        assert registry.get("sovalid") is first
        assert registry.by_short("s") is first
        assert registry.by_long("soval") is first
        assert registry.get(key) is None or key == "sovalid"
        assert registry.by_short(short) is None or short == "s"
        assert registry.by_long(long) is None or long == "soval"

    def test_failed_registration_leaves_no_trace(self, registry):
        registry.register("first", "first", "f")
        with pytest.raises(optscan.registry.DuplicateLongForm):
            registry.register("second", "first", "s", required=True)
        assert "second" not in registry
        assert registry.by_short("s") is None
        assert registry.required_keys == []

    @pytest.mark.parametrize(
        ("long", "short"),
        [
            ("a=b", ""),
            ("", "--"),
        ],
    )
    def test_unreachable_form_warns(self, registry, long, short):
        with pytest.warns(optscan.OptscanWarning, match=r"can never be matched"):
            registry.register("valid", long, short)
        assert "valid" in registry


class TestClear:
    def test_clear(self, registry):
        registry.register("valid", "valid", "v", required=True)
        registry.register("other", "other", "o")
        registry.clear("valid")

        assert "valid" not in registry
        assert registry.by_short("v") is None
        assert registry.by_long("valid") is None
        assert registry.required_keys == []
        assert len(registry) == 1

        # Forms can be reused after clearing.
        registry.register("valid", "valid", "v")

    def test_clear_missing_is_noop(self, registry):
        registry.register("valid", "valid", "v")
        registry.clear("missing")
        assert len(registry) == 1

    def test_clear_discards_values(self, registry):
        registry.register("name", "name", "n")
        registry.register("flag", "flag", "f", is_bool=True)
        optscan.scan.scan(registry, ["prog", "-n", "x", "-f", "pos"])
        assert registry.get_string("name") == "x"
        assert registry.get_bool("flag")

        registry.clear("name")
        registry.clear("flag")

        assert registry.get_string("name") == ""
        assert not registry.get_bool("flag")
        assert registry.args == ["pos"]

    def test_clear_all(self, registry):
        registry.register("name", "name", "n", required=True)
        registry.register("flag", "flag", "f", is_bool=True)
        optscan.scan.scan(registry, ["prog", "-f", "pos"])
        assert registry.has_error
        assert registry.args == ["pos"]

        registry.clear_all()

        assert len(registry) == 0
        assert list(registry) == []
        assert registry.required_keys == []
        assert registry.args == []
        assert not registry.has_error
        assert registry.error is None
        assert not registry.get_bool("flag")

    def test_clear_all_allows_scanning_again(self, registry):
        optscan.scan.scan(registry, ["prog", "a"])
        with pytest.raises(RuntimeError):
            optscan.scan.scan(registry, ["prog", "b"])

        registry.clear_all()

        result = optscan.scan.scan(registry, ["prog", "x", "y", "-", "--"])
        assert not result.has_error
        assert result.args == ["x", "y", "-", "--"]


class TestUsage:
    def test_usage(self, registry):
        registry.register("out", "output", "o", required=True, usage="output file")
        registry.register("verbose", "verbose", "v", is_bool=True, usage="talk more")
        registry.register("level", "level", "", usage="log level")
        registry.register("quiet", "", "q", is_bool=True)

        lines = registry.usage().splitlines()

        assert len(lines) == 4
        assert "-o --output REQUIRED <value> output file" in lines
        assert "-v --verbose talk more" in lines
        assert "--level <value> log level" in lines
        assert "-q" in lines

    def test_usage_empty(self, registry):
        assert registry.usage() == ""

    def test_usage_ends_with_newline(self, registry):
        registry.register("quiet", "", "q", is_bool=True)
        assert registry.usage() == "-q\n"


@pytest.mark.parametrize(
    ("long", "short", "expected"),
    [
        ("test", "t", "-t or --test"),
        ("test", "", "--test"),
        ("", "t", "-t"),
    ],
)
def test_describe(long, short, expected):
    assert optscan.registry.Option("key", long, short).describe() == expected


@pytest.mark.parametrize(
    ("given", "expected"),
    [
        ("", ""),
        ("-", "-"),
        ("--", "-"),
        ("---", "-"),
        ("-s", "s"),
        ("--long", "long"),
        ("plain", "plain"),
        ("--a=b", "a=b"),
    ],
)
def test_strip_dashes(given, expected):
    assert optscan.registry.strip_dashes(given) == expected
