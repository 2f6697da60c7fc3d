import pytest

from threehalves.arguments import Arguments
from threehalves.exceptions import BadAccessError, RequiredArgumentMissing
from threehalves.process import Process


def test_dt_and_loaded_flag():
    p = Process(1.0)
    assert p.dt == 1.0
    assert p.loaded is False
    p.loaded = True
    assert p.loaded is True


def test_dt_can_change():
    p = Process(1.0)
    p.dt = 0.25
    assert p.dt == 0.25


def test_from_arguments():
    args = Arguments()
    args["dt"] = 0.5
    p = Process.from_arguments(args)
    assert p.dt == args["dt"]
    assert p.loaded is False


def test_from_arguments_requires_dt():
    with pytest.raises(RequiredArgumentMissing):
        Process.from_arguments(Arguments())


@pytest.mark.parametrize("dt", [0.0, -1.0])
def test_validate_rejects_non_positive_step(dt):
    with pytest.raises(ValueError):
        Process(dt).validate()


def test_validate_accepts_positive_step():
    p = Process(0.1)
    p.validate()
    assert p.dt == 0.1


def test_simulate_is_unsupported():
    with pytest.raises(BadAccessError):
        Process(1.0).simulate()


def test_simulate_with_is_unsupported():
    with pytest.raises(BadAccessError):
        Process(1.0).simulate_with(Arguments())


def test_simulate_path_is_unsupported():
    with pytest.raises(BadAccessError):
        Process(1.0).simulate_path(Arguments())


def test_load_is_unsupported():
    with pytest.raises(BadAccessError):
        Process(1.0).load(Arguments())