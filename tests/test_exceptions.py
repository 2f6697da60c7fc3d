import pytest

from threehalves.exceptions import (
    BadAccessError,
    BesselInputError,
    FactoryNotBuiltError,
    NonCentralChi2Dead,
    NonCentralChi2Error,
    OptionTypeError,
    PathAbnormalError,
    PricingError,
    ProcessNotLoadedError,
    RandomLibraryError,
    RequiredArgumentMissing,
)


@pytest.mark.parametrize(
    "cls, fragment",
    [
        (NonCentralChi2Error, "try again"),
        (FactoryNotBuiltError, "factory need to be built"),
        (ProcessNotLoadedError, "process not loaded"),
        (PathAbnormalError, "nan encountered during path generating"),
        (RandomLibraryError, "rv_library broken"),
        (OptionTypeError, "wrong option type"),
    ],
)
def test_default_messages(cls, fragment):
    error = cls()
    assert fragment in str(error)
    assert isinstance(error, PricingError)


def test_custom_message_replaces_default():
    error = ProcessNotLoadedError("S0 missing")
    assert str(error) == "S0 missing"


def test_nc_chi2_dead_keeps_parameters():
    error = NonCentralChi2Dead(0.5, 3.2)
    assert error.delta == 0.5
    assert error.lam == 3.2
    assert "nc chi 2 dead." in str(error)
    assert "3.2" in str(error)


def test_required_argument_missing_is_key_error():
    error = RequiredArgumentMissing("K")
    assert isinstance(error, KeyError)
    assert error.name == "K"
    assert str(error) == "K"


def test_bessel_input_error_reports_name_and_value():
    error = BesselInputError("v", 2.5)
    assert error.name == "v"
    assert error.value == 2.5
    assert str(error) == "v = 2.5"
    assert isinstance(error, ValueError)


def test_option_type_error_caught_as_value_error():
    error = OptionTypeError()
    assert isinstance(error, ValueError)
    assert "wrong option type" in str(error)


def test_bad_access_is_not_implemented():
    error = BadAccessError("simulate")
    assert isinstance(error, NotImplementedError)
    assert isinstance(error, PricingError)
    assert str(error) == "simulate"