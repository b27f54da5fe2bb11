import pytest

from steelmc.text.locale import Locale


@pytest.mark.parametrize("locale", list(Locale))
def test_every_code_round_trips(locale):
    assert Locale.parse(locale.value) is locale


def test_case_insensitive():
    assert Locale.parse("EN_GB") is Locale.EN_GB
    assert Locale.parse("De_De") is Locale.DE_DE


@pytest.mark.parametrize("text", ["", "xx_yy", "en-gb", "english"])
def test_unknown_defaults_to_en_us(text):
    assert Locale.parse(text) is Locale.EN_US


def test_unusual_codes():
    assert Locale.parse("zlm_arab") is Locale.ZLM_ARAB
    assert Locale.parse("qya_aa") is Locale.QYA_AA
    assert Locale.parse("tok") is Locale.TOK


@pytest.mark.parametrize("locale", list(Locale))
def test_upper_case_name_parses_to_same_locale(locale):
    assert Locale.parse(locale.name) is locale
    assert Locale.parse(locale.name).value == locale.name.lower()