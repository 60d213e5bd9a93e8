import optscan.result
import optscan.scan


def test_empty():
    result = optscan.result.ScanResult()
    assert not result.has_error
    assert not result.scanned
    assert result.args == []
    assert not result.get_bool("key")
    assert result.get_string("key") == ""


def test_accessors():
    result = optscan.result.ScanResult(
        bools={"flag": True}, strings={"name": "value"}, args=["a", "b"]
    )
    assert result.get_bool("flag")
    assert not result.get_bool("name")
    assert result.get_string("name") == "value"
    assert result.get_string("flag") == ""
    assert result.args == ["a", "b"]


def test_discard():
    result = optscan.result.ScanResult(bools={"flag": True}, strings={"name": "value"})
    result.discard("flag")
    result.discard("name")
    result.discard("missing")
    assert result.bools == {}
    assert result.strings == {}


def test_error():
    error = optscan.scan.MissingValue("-x")
    result = optscan.result.ScanResult(error=error)
    assert result.has_error
    assert result.error is error


def test_repr():
    result = optscan.result.ScanResult(bools={"b": True, "a": True}, args=["x"])
    assert repr(result) == (
        "ScanResult(bools=['a', 'b'], strings={}, args=['x'], error=None)"
    )
