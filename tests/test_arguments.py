import pytest

from threehalves.arguments import Arguments, ask, build_arguments
from threehalves.exceptions import RequiredArgumentMissing


def _feeder(*lines):
    it = iter(lines)
    return lambda: next(it, "")


class _Holder:
    def __init__(self, a):
        self.a = a


class _GbmLike:
    @staticmethod
    def parameters():
        return [("mu", float), ("sigma", float), ("S0", float), ("dt", float)]


def test_store_and_read_back_values():
    args = Arguments()
    args["a"] = 3
    args["ca"] = _Holder(32)
    assert args["ca"].a == 32
    assert args["a"] == 3


def test_ask_reads_value_from_input():
    args = Arguments()
    out = []
    value = ask(args, "ST", float, _feeder("1.5\n"), out.append)
    assert value == 1.5
    assert args["ST"] == 1.5
    assert out == ["ST(float) : "]


def test_ask_skips_present_key():
    args = Arguments()
    args["ST"] = 2.0
    out = []
    assert ask(args, "ST", float, _feeder("9.0\n"), out.append) == 2.0
    assert out == []


def test_ask_retries_after_bad_input():
    args = Arguments()
    out = []
    value = ask(args, "K", float, _feeder("abc\n", "2.5\n"), out.append)
    assert value == 2.5
    assert out == ["K(float) : ", "err\n", "K(float) : "]


def test_ask_raises_on_end_of_input():
    args = Arguments()
    with pytest.raises(EOFError):
        ask(args, "K", float, _feeder(), lambda text: None)
    assert "K" not in args


def test_ask_parses_int_and_bool():
    args = Arguments()
    sink = []
    assert ask(args, "nos", int, _feeder("2560\n"), sink.append) == 2560
    assert ask(args, "verbose", bool, _feeder("maybe\n", "1\n"), sink.append) is True
    assert ask(args, "simp", bool, _feeder("0\n"), sink.append) is False
    assert "err\n" in sink


def test_ask_string_kind():
    args = Arguments()
    assert ask(args, "CP", str, _feeder("CALL\n"), lambda text: None) == "CALL"
    assert args["CP"] == "CALL"


def test_missing_key_raises():
    args = Arguments()
    assert "T" not in args
    assert args.get("T", 0.0) == 0.0
    with pytest.raises(RequiredArgumentMissing) as info:
        _ = args["T"]
    assert info.value.name == "T"


def test_require():
    args = Arguments()
    args["T"] = 1.0
    args.require("T")
    with pytest.raises(RequiredArgumentMissing):
        args.require("K")


def test_get_with_default():
    args = Arguments()
    args["r"] = 0.05
    assert args.get("r") == 0.05
    assert args.get("rho", -0.5) == -0.5
    assert args.get("rho") is None


def test_overwrite_replaces_value():
    args = Arguments()
    args["nos"] = 2560
    args["nos"] = 10240
    assert args["nos"] == 10240
    assert len(args) == 1


def test_delete():
    args = Arguments()
    args["x"] = 1
    del args["x"]
    assert "x" not in args
    with pytest.raises(RequiredArgumentMissing):
        del args["x"]


def test_iteration_order():
    args = Arguments()
    args["b"] = 1
    args["a"] = 2
    assert list(args) == ["b", "a"]
    assert dict(args.items()) == {"b": 1, "a": 2}


def test_build_arguments_asks_each_parameter():
    args = Arguments()
    out = []
    result = build_arguments(
        _GbmLike, args, _feeder("0.1\n", "0.2\n", "1.0\n", "0.5\n"), out.append
    )
    assert result is args
    assert args["mu"] == 0.1
    assert args["sigma"] == 0.2
    assert args["S0"] == 1.0
    assert args["dt"] == 0.5
    assert len(out) == 4


def test_build_arguments_skips_known_parameters():
    args = Arguments()
    args["mu"] = 0.3
    args["dt"] = 1.0
    out = []
    build_arguments(_GbmLike, args, _feeder("0.2\n", "6.0\n"), out.append)
    assert args["mu"] == 0.3
    assert args["sigma"] == 0.2
    assert args["S0"] == 6.0
    assert out == ["sigma(float) : ", "S0(float) : "]