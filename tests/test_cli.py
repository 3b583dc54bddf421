import logging

import pytest
from pydantic import ValidationError

from kitchenconv.main import main
from kitchenconv.settings import Settings, get_settings


@pytest.mark.parametrize("argv,expected", [
    (["1", "cup", "to", "ml"], "  1 cup is 236.6 ml"),
    (["3/4", "cup", "to", "ml"], "  3/4 cup is 177.45 ml"),
    (["1", "cup", "butter", "to", "g"], "  1 cup of butter is 226.805 g"),
    (["0.4", "kg", "to", "lb"], "  0.4 kg is 0.881834 lb"),
    (["400", "F", "in", "C"], "  400 f is 204.444 c"),
    (["10", "kg", "to", "lb"], "  10 kg is 22.0459 lb"),
    (["3", "ts", "of", "sugar", "to", "g"], "  3 ts of sugar is 12.502 g"),
    (["1e3", "ml", "to", "l"], "  1e3 ml is 1 l"),
    (["1", "cup", "to", "ml", "of", "butter"], "  1 cup of butter is 236.6 ml"),
])
def test_successful_conversion(capsys, test_settings, argv, expected):
    assert main(argv, settings=test_settings) == 0
    out, err = capsys.readouterr()
    assert out == expected + "\n"
    assert err == ""


def test_too_few_arguments_prints_usage(capsys, test_settings):
    assert main(["1", "cup", "ml"], settings=test_settings) == 1
    out, _ = capsys.readouterr()
    assert out.startswith("usage examples:")
    assert "kitchenconv 3/4 cup to ml" in out


def test_no_arguments_prints_usage(capsys, test_settings):
    assert main([], settings=test_settings) == 1
    assert "usage examples:" in capsys.readouterr().out


def test_syntax_error(capsys, test_settings):
    assert main(["1", "cup", "to", "ml", "in", "l"], settings=test_settings) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err == "syntax error: multiple 'to' or 'in' not allowed\n"


def test_substance_mismatch(capsys, test_settings):
    assert main(["1", "cup", "butter", "to", "g", "flour"], settings=test_settings) == 1
    err = capsys.readouterr().err
    assert "error: cannot convert a quantity of 'butter' into one of 'flour'" in err


def test_missing_substance(capsys, test_settings):
    assert main(["1", "cup", "to", "g"], settings=test_settings) == 1
    err = capsys.readouterr().err
    assert "requires knowing the substance" in err


def test_unknown_unit_lists_suggestions(capsys, test_settings):
    assert main(["1", "cupp", "to", "ml"], settings=test_settings) == 1
    lines = capsys.readouterr().err.splitlines()
    assert lines[0] == "error: unknown unit 'cupp'"
    assert lines[1].startswith("did you mean: cup, ")


def test_unknown_substance_respects_limit(capsys, test_settings):
    settings = test_settings.model_copy(update={"suggestion_limit": 1})
    assert main(["1", "cup", "suger", "to", "g"], settings=settings) == 1
    lines = capsys.readouterr().err.splitlines()
    assert lines[0] == "error: the density of 'suger' is unknown"
    assert lines[1] == "did you mean: sugar"


def test_bad_quantity(capsys, test_settings):
    assert main(["3.5/4", "cup", "to", "ml"], settings=test_settings) == 1
    assert "error: could not convert '3.5/4' into a number" in capsys.readouterr().err


def test_negative_quantity(capsys, test_settings):
    assert main(["-40", "c", "to", "f"], settings=test_settings) == 0
    assert capsys.readouterr().out == "  -40 c is -40 f\n"


def test_incompatible_units(capsys, test_settings):
    assert main(["100", "c", "to", "g"], settings=test_settings) == 1
    err = capsys.readouterr().err
    assert "error: cannot convert from 'c' (a temperature) into 'g' (a weight)" in err


def test_result_digits_setting(capsys, test_settings):
    settings = test_settings.model_copy(update={"result_digits": 3})
    assert main(["1", "cup", "butter", "to", "g"], settings=settings) == 0
    assert capsys.readouterr().out == "  1 cup of butter is 227 g\n"


def test_list_units(capsys, test_settings):
    assert main(["--list-units"], settings=test_settings) == 0
    out = capsys.readouterr().out
    assert "cup" in out
    assert "temperature" in out


def test_list_substances_query(capsys, test_settings):
    assert main(["--list-substances", "--query", "flour"], settings=test_settings) == 0
    out = capsys.readouterr().out
    assert "almond-flour" in out
    assert "sugar" not in out


def test_verbose_flag_does_not_change_output(capsys, test_settings):
    assert main(["-v", "1", "cup", "to", "ml"], settings=test_settings) == 0
    assert capsys.readouterr().out == "  1 cup is 236.6 ml\n"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("KITCHENCONV_RESULT_DIGITS", "4")
    monkeypatch.setenv("KITCHENCONV_SUGGESTION_LIMIT", "2")
    s = Settings(_env_file=None)
    assert s.result_digits == 4
    assert s.suggestion_limit == 2


def test_huge_fraction_reports_error(capsys, test_settings):
    assert main(["1" * 400 + "/1", "cup", "to", "ml"], settings=test_settings) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("error: could not convert '111")


def test_verbose_emits_debug_records(caplog, test_settings):
    with caplog.at_level(logging.DEBUG):
        assert main(["-v", "1", "cup", "butter", "to", "g"], settings=test_settings) == 0

    names = {record.name for record in caplog.records if record.levelno == logging.DEBUG}
    assert "kitchenconv.parsing" in names
    assert "kitchenconv.units" in names


def test_verbose_applies_on_repeated_calls(caplog, test_settings):
    assert main(["1", "cup", "to", "ml"], settings=test_settings) == 0
    assert logging.getLogger("kitchenconv").level == logging.WARNING

    with caplog.at_level(logging.DEBUG):
        assert main(["-v", "1", "cup", "to", "ml"], settings=test_settings) == 0
    assert logging.getLogger("kitchenconv").level == logging.DEBUG
    assert any(record.name == "kitchenconv.units" for record in caplog.records)

    assert main(["1", "cup", "to", "ml"], settings=test_settings) == 0
    assert logging.getLogger("kitchenconv").level == logging.WARNING


def test_invalid_environment_is_rejected(monkeypatch):
    monkeypatch.setenv("KITCHENCONV_LOG_LEVEL", "loud")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)

    monkeypatch.setenv("KITCHENCONV_LOG_LEVEL", "info")
    assert Settings(_env_file=None).log_level == "INFO"


@pytest.mark.parametrize("field,value", [
    ("result_digits", 0),
    ("result_digits", -1),
    ("suggestion_limit", 0),
])
def test_invalid_settings_values(field, value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})


def test_invalid_environment_fails_cleanly(capsys, monkeypatch):
    monkeypatch.setenv("KITCHENCONV_RESULT_DIGITS", "-1")
    get_settings.cache_clear()
    try:
        assert main(["1", "cup", "to", "ml"]) == 1
    finally:
        get_settings.cache_clear()

    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("error: invalid configuration:")
