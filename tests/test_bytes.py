import pytest

from mudutils import bytes as byteslib
from mudutils.bytes import Bytes, BytesError, BytesOptions, ByteUnit, parse_bytes


@pytest.fixture
def converter():
    return Bytes()


def test_parse_basic(converter):
    assert converter.parse("1KB") == 1024
    assert converter.parse("1MB") == 1048576
    assert converter.parse("1GB") == 1073741824
    assert converter.parse("1TB") == 1099511627776


def test_parse_decimal(converter):
    assert converter.parse("1.5KB") == 1536
    assert converter.parse("2.5MB") == 2621440
    assert converter.parse("0.5GB") == 536870912


def test_parse_plain_number(converter):
    assert converter.parse("100") == 100
    assert converter.parse("1024") == 1024
    assert converter.parse("0") == 0


def test_parse_case_insensitive(converter):
    assert converter.parse("1kb") == 1024
    assert converter.parse("1Mb") == 1048576
    assert converter.parse("1gB") == 1073741824


def test_parse_with_spaces(converter):
    assert converter.parse(" 1KB ") == 1024
    assert converter.parse("1 MB") == 1048576


@pytest.mark.parametrize("text", ["-1KB", "invalid", "1XB", ""])
def test_parse_errors(converter, text):
    with pytest.raises(BytesError):
        converter.parse(text)


def test_parse_negative_plain_number(converter):
    with pytest.raises(BytesError, match="Negative values not allowed"):
        converter.parse("-5")


def test_format_basic(converter):
    assert converter.format(1024) == "1KB"
    assert converter.format(1048576) == "1MB"
    assert converter.format(1073741824) == "1GB"
    assert converter.format(1099511627776) == "1TB"


def test_format_decimal(converter):
    assert converter.format(1536) == "1.5KB"
    assert converter.format(2621440) == "2.5MB"
    assert converter.format(536870912) == "512MB"


def test_format_small_values(converter):
    assert converter.format(0) == "0B"
    assert converter.format(100) == "100B"
    assert converter.format(512) == "512B"


def test_format_with_options(converter):
    options = BytesOptions(unit=ByteUnit.MB, decimal_places=3, fixed_decimals=True)
    assert converter.format(1048576, options) == "1.000MB"


def test_format_with_unit_separator(converter):
    assert converter.format(1024, BytesOptions(unit_separator=" ")) == "1 KB"


def test_format_with_thousands_separator(converter):
    options = BytesOptions(thousands_separator=",", unit=ByteUnit.B)
    assert converter.format(1234567, options) == "1,234,567B"


def test_format_rejects_negative(converter):
    with pytest.raises(BytesError):
        converter.format(-1)


def test_convert_number(converter):
    assert converter.convert_number(1024) == "1KB"
    assert converter.convert_number(1048576) == "1MB"


def test_convert_string(converter):
    assert converter.convert_string("1KB") == 1024
    assert converter.convert_string("1MB") == 1048576


def test_byte_unit_multiplier():
    assert ByteUnit.B.multiplier() == 1
    assert ByteUnit.KB.multiplier() == 1024
    assert ByteUnit.MB.multiplier() == 1048576
    assert ByteUnit.GB.multiplier() == 1073741824
    assert ByteUnit.TB.multiplier() == 1099511627776
    assert ByteUnit.PB.multiplier() == 1125899906842624


def test_byte_unit_from_str():
    assert ByteUnit.from_str("b") is ByteUnit.B
    assert ByteUnit.from_str("KB") is ByteUnit.KB
    assert ByteUnit.from_str("mb") is ByteUnit.MB
    assert ByteUnit.from_str("Gb") is ByteUnit.GB
    with pytest.raises(BytesError):
        ByteUnit.from_str("invalid")


@pytest.mark.parametrize(
    ("text", "expected"),
    [("b", "B"), ("kb", "KB"), ("mb", "MB"), ("gb", "GB"), ("tb", "TB"), ("pb", "PB")],
)
def test_byte_unit_to_string(converter, text, expected):
    unit = ByteUnit.from_str(text)
    assert str(unit) == expected
    assert converter.format(0, BytesOptions(unit=unit)) == f"0{expected}"


def test_convenience_functions():
    assert byteslib.bytes(1024) == "1KB"
    assert byteslib.bytes(1048576) == "1MB"
    assert parse_bytes("1KB") == 1024
    assert parse_bytes("1MB") == 1048576


@pytest.mark.parametrize(
    "value", [0, 100, 1024, 1536, 1048576, 2621440, 1073741824]
)
def test_round_trip_conversion(converter, value):
    assert converter.parse(converter.format(value)) == value