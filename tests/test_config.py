from decimal import Decimal
from fractions import Fraction

import pytest

from quarter_ratio import (
    ConfigMismatchError,
    DistributedRatio,
    DistributedRatioConfig,
    DistributedRatioError,
    InvalidConfigError,
)
from quarter_ratio import config as settings
from quarter_ratio.factory import DistributedRatioFactory, from_settings
from quarter_ratio.models.ratio_config import parse_count, parse_ratios


def test_defaults():
    config = DistributedRatioConfig()

    assert config.number_of_qtrs == 4
    assert config.qtr_defaults == (.25, .25, .25, .25)
    assert config.qtr_val_key == "value"
    assert config.remainder_strategy == "floor"


def test_defaults_derived_from_quarter_count():
    config = DistributedRatioConfig(number_of_qtrs=5)

    assert config.qtr_defaults == pytest.approx((.2,) * 5)


def test_mismatch_between_quarters_and_default_ratios():
    with pytest.raises(ConfigMismatchError,
                       match="default ratios defined do not match the number of quarters"):
        DistributedRatio(
            qtr_val_key="_fake",
            number_of_qtrs=4,
            qtr_defaults=[.1, .1, .1, .1, .5],
        )


def test_mismatch_is_a_distributed_ratio_error():
    assert issubclass(ConfigMismatchError, DistributedRatioError)


@pytest.mark.parametrize("settings_kwargs", [
    {"number_of_qtrs": 0},
    {"number_of_qtrs": -2},
    {"number_of_qtrs": 2.5},
    {"remainder_strategy": "truncate"},
    {"qtr_val_key": ""},
])
def test_invalid_settings(settings_kwargs):
    with pytest.raises(InvalidConfigError):
        DistributedRatioConfig(**settings_kwargs)


def test_config_is_immutable():
    config = DistributedRatioConfig()

    with pytest.raises(AttributeError):
        config.number_of_qtrs = 6


def test_list_defaults_are_frozen_to_a_tuple():
    ratios = [.5, .5]
    config = DistributedRatioConfig(number_of_qtrs=2, qtr_defaults=ratios)
    ratios[0] = 1

    assert config.qtr_defaults == (.5, .5)


def test_equal_configurations_compare_equal():
    assert DistributedRatioConfig() == DistributedRatioConfig(qtr_defaults=[.25, .25, .25, .25])


def test_to_dict():
    assert DistributedRatioConfig(number_of_qtrs=2).to_dict() == {
        "number_of_qtrs": 2,
        "qtr_defaults": [.5, .5],
        "qtr_val_key": "value",
        "remainder_strategy": "floor",
    }


def test_parse_ratios():
    assert parse_ratios(".1, .2,.7") == (.1, .2, .7)
    assert parse_ratios("") is None
    assert parse_ratios(None) is None
    assert parse_ratios([.5, .5]) == (.5, .5)


def test_parse_count():
    assert parse_count("6") == 6
    assert parse_count(" 3 ") == 3
    assert parse_count(4) == 4


@pytest.mark.parametrize("raw", ["four", "", "2.5"])
def test_parse_count_rejects_non_integers(raw):
    with pytest.raises(InvalidConfigError, match="number_of_qtrs"):
        parse_count(raw)


def test_parse_ratios_rejects_non_numbers():
    with pytest.raises(InvalidConfigError, match="qtr_defaults"):
        parse_ratios(".1,x")


def test_non_numeric_default_ratios():
    with pytest.raises(InvalidConfigError, match="qtr_defaults"):
        DistributedRatioConfig(number_of_qtrs=2, qtr_defaults=["half", .5])


def test_default_ratios_are_stored_as_floats():
    config = DistributedRatioConfig(number_of_qtrs=2, qtr_defaults=[Decimal("0.5"), Fraction(1, 2)])

    assert config.qtr_defaults == (.5, .5)
    assert all(type(ratio) is float for ratio in config.qtr_defaults)


def test_from_settings_bad_quarter_count(monkeypatch):
    monkeypatch.setattr(settings, "NUMBER_OF_QTRS", "four")
    monkeypatch.setattr(settings, "QTR_DEFAULTS", "")

    with pytest.raises(InvalidConfigError, match="'four'"):
        DistributedRatioConfig.from_settings()


def test_from_settings_bad_default_ratios(monkeypatch):
    monkeypatch.setattr(settings, "NUMBER_OF_QTRS", "2")
    monkeypatch.setattr(settings, "QTR_DEFAULTS", ".1,x")

    with pytest.raises(InvalidConfigError):
        DistributedRatioConfig.from_settings()


def test_from_settings_override_skips_bad_quarter_count(monkeypatch):
    monkeypatch.setattr(settings, "NUMBER_OF_QTRS", "four")

    assert DistributedRatioConfig.from_settings(number_of_qtrs=2).number_of_qtrs == 2


def test_from_settings_uses_module_settings(monkeypatch):
    monkeypatch.setattr(settings, "NUMBER_OF_QTRS", "3")
    monkeypatch.setattr(settings, "QTR_DEFAULTS", ".5,.25,.25")
    monkeypatch.setattr(settings, "QTR_VAL_KEY", "amount")
    monkeypatch.setattr(settings, "REMAINDER_STRATEGY", "ceil")

    config = DistributedRatioConfig.from_settings()

    assert config == DistributedRatioConfig(
        number_of_qtrs=3, qtr_defaults=(.5, .25, .25),
        qtr_val_key="amount", remainder_strategy="ceil",
    )


def test_from_settings_quarter_override_ignores_configured_defaults(monkeypatch):
    monkeypatch.setattr(settings, "NUMBER_OF_QTRS", "3")
    monkeypatch.setattr(settings, "QTR_DEFAULTS", ".5,.25,.25")

    service = from_settings(number_of_qtrs=2)

    assert service.config.qtr_defaults == (.5, .5)


def test_example_factory():
    service = DistributedRatioFactory()

    assert service.config.number_of_qtrs == 6
    assert service.config.qtr_defaults == (.10, .20, .20, .20, .20, .10)
    assert [q["value"] for q in service.distribute(100, [{"value": 0}] * 6)] == [10, 20, 20, 20, 20, 10]
