import pytest

from threehalves.engines import MonteCarloEngine
from threehalves.exceptions import FactoryNotBuiltError, RequiredArgumentMissing
from threehalves.factory import Factory
from threehalves.options import EuropeanOption
from threehalves.pgbm import GeometricBrownianMotion


def _gbm_factory(kind="CALL", verbose=False):
    fac = Factory(GeometricBrownianMotion, MonteCarloEngine, EuropeanOption)
    for key, value in {
        "dt": 1.0,
        "mu": 0.0,
        "sigma": 0.0,
        "S0": 1.2,
        "nos": 4,
        "T": 1.0,
        "K": 1.0,
        "CP": kind,
        "r": 0.0,
    }.items():
        fac.set(key, value)
    if verbose:
        fac.set("verbose", True)
    return fac


def test_build_without_arguments_raises_missing_argument():
    fac = Factory(GeometricBrownianMotion, MonteCarloEngine, EuropeanOption)
    with pytest.raises(RequiredArgumentMissing) as info:
        fac.build()
    assert info.value.name == "T"


def test_accessors_before_build_raise():
    fac = _gbm_factory()
    with pytest.raises(FactoryNotBuiltError):
        fac.price()
    with pytest.raises(FactoryNotBuiltError):
        _ = fac.process
    with pytest.raises(FactoryNotBuiltError):
        _ = fac.option
    with pytest.raises(FactoryNotBuiltError):
        _ = fac.engine


def test_build_stores_components_in_arguments():
    fac = _gbm_factory()
    fac.build()
    args = fac.arguments
    assert args["option"] is fac.option
    assert args["process"] is fac.process
    assert isinstance(fac.engine, MonteCarloEngine)
    assert args["simp"] is True


def test_deterministic_call_price():
    fac = _gbm_factory()
    fac.build()
    assert fac.price() == pytest.approx(0.2)


def test_engine_price_matches_factory_price():
    fac = _gbm_factory()
    fac.build()
    assert fac.engine.price(fac.arguments) == pytest.approx(fac.price())


def test_deterministic_put_is_worthless():
    fac = _gbm_factory(kind="PUT")
    fac.build()
    assert fac.price() == 0.0


def test_verbose_build_prints_notice(capsys):
    fac = _gbm_factory(verbose=True)
    fac.build()
    assert "building..." in capsys.readouterr().out


def test_set_overwrites_value():
    fac = _gbm_factory()
    fac.set("K", 2.0)
    assert fac.arguments["K"] == 2.0


def test_prompt_asks_for_missing_parameters():
    fac = Factory(GeometricBrownianMotion, MonteCarloEngine, EuropeanOption)
    lines = iter(["0.1\n", "0.2\n", "1.5\n", "1.0\n", "5\n", "2.0\n", "1.1\n", "PUT\n"])
    prompts = []
    args = fac.prompt(lambda: next(lines), prompts.append)
    assert args["mu"] == 0.1
    assert args["sigma"] == 0.2
    assert args["S0"] == 1.5
    assert args["dt"] == 1.0
    assert args["nos"] == 5
    assert args["T"] == 2.0
    assert args["K"] == 1.1
    assert args["CP"] == "PUT"
    assert prompts[0] == "mu(float) : "
    assert len(prompts) == 8


def test_prompt_skips_parameters_already_set():
    fac = _gbm_factory()
    prompts = []
    fac.prompt(lambda: "", prompts.append)
    assert prompts == []