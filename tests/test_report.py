import pytest

from uncertain_fx.converter import ConversionResult
from uncertain_fx.errors import ReportFormatError
from uncertain_fx.report import format_report, parse_report


def test_format_uses_six_decimals():
    text = format_report(ConversionResult(sampled_rate=0.8734567891, converted_amount=87.34567891))
    assert text == "Uncertain conversion rate: 0.873457\nConverted Amount: 87.345679"


def test_format_pads_whole_numbers():
    text = format_report(ConversionResult(sampled_rate=1.5, converted_amount=15.0))
    assert text.splitlines() == ["Uncertain conversion rate: 1.500000", "Converted Amount: 15.000000"]


def test_parse_plain_output():
    result = parse_report("Uncertain conversion rate: 0.85\nConverted Amount: 85.00")
    assert result == ConversionResult(sampled_rate=0.85, converted_amount=85.0)


def test_parse_ignores_distribution_tokens():
    stdout = (
        "Uncertain conversion rate: 0.875000Ux0000000000000000003FEC0000000000000000000000000001\n"
        "Converted Amount: 87.500000Ux00000000000000000040B5E000000000000000000000000001\n"
    )
    result = parse_report(stdout)
    assert result.sampled_rate == pytest.approx(0.875)
    assert result.converted_amount == pytest.approx(87.5)


def test_parse_negative_rate():
    result = parse_report("Uncertain conversion rate: -0.250000\nConverted Amount: -2.500000")
    assert result.sampled_rate == -0.25


@pytest.mark.parametrize("stdout", [
    "",
    "Uncertain conversion rate: 0.85",
    "Converted Amount: 85.00",
    "Error: rateMax must be greater than rateMin.",
])
def test_parse_incomplete_output(stdout):
    with pytest.raises(ReportFormatError):
        parse_report(stdout)


def test_format_then_parse_keeps_printed_precision():
    result = parse_report(format_report(ConversionResult(1.2345674, 12.345674)))
    assert result == ConversionResult(1.234567, 12.345674)
