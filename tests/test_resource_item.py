"""Tests for resource item setters, readers and change bookkeeping."""

import copy
from datetime import datetime, timezone

import pytest

from conftest import TEST_ZONE
from datatypes import DataType
from descriptors import INVALID_STRING, ResourceItemDescriptor, get_resource_item_descriptor
from resource_item import ResourceItem


@pytest.fixture
def make_item(step_clock):
    def _make(suffix):
        return ResourceItem(get_resource_item_descriptor(suffix), step_clock)
    return _make


def _msecs(*args, tz=timezone.utc):
    return int(datetime(*args, tzinfo=tz).timestamp()) * 1000


def test_initial_state(make_item):
    item = make_item("state/bri")
    assert item.to_number() == 0
    assert item.to_number_previous() == 0
    assert item.last_set is None
    assert item.last_changed is None
    assert item.is_public
    assert item.rules_involved() == []
    assert item.to_variant() is None
    assert item.to_string() == INVALID_STRING


def test_textual_item_starts_empty(make_item):
    item = make_item("attr/name")
    assert item.to_string() == ""


def test_set_number_records_change(make_item):
    item = make_item("state/bri")
    assert item.set_number(120)
    assert item.to_number() == 120
    assert item.to_number_previous() == 0
    assert item.last_set is not None
    assert item.last_changed == item.last_set


def test_same_value_updates_last_set_only(make_item):
    item = make_item("state/bri")
    item.set_number(120)
    changed = item.last_changed
    first_set = item.last_set

    assert item.set_number(120)
    assert item.last_changed == changed
    assert item.last_set > first_set
    assert item.to_number_previous() == 120


def test_previous_value_tracks_last_write(make_item):
    item = make_item("state/bri")
    item.set_number(10)
    item.set_number(20)
    assert item.to_number() == 20
    assert item.to_number_previous() == 10


def test_last_set_advances_monotonically(make_item):
    item = make_item("state/ct")
    stamps = []
    for value in (153, 153, 370, 500):
        assert item.set_value(value)
        stamps.append(item.last_set)
    assert stamps == sorted(stamps)
    assert len(set(stamps)) == len(stamps)


def test_last_changed_never_after_last_set(make_item):
    item = make_item("state/hue")
    for value in (1, 1, 2, 2):
        item.set_value(value)
        assert item.last_set >= item.last_changed


@pytest.mark.parametrize(
    "suffix, accepted, rejected",
    [
        ("state/humidity", [0, 10000], [-1, 10001]),
        ("config/battery", [0, 100], [101]),
        ("config/tholdoffset", [1, 65534], [0, 65535]),
        ("state/temperature", [-27315, 32767], [-27316, 32768]),
        ("config/heatsetpoint", [500, 3000], [499, 3001]),
        ("config/sunriseoffset", [-120, 120], [-121, 121]),
    ],
)
def test_range_boundaries(make_item, suffix, accepted, rejected):
    item = make_item(suffix)
    for value in accepted:
        assert item.set_number(value), value
        assert item.to_number() == value
    for value in rejected:
        stored = item.to_number()
        last_set = item.last_set
        assert not item.set_number(value), value
        assert not item.set_value(value), value
        assert item.to_number() == stored
        assert item.last_set == last_set


def test_out_of_range_leaves_item_untouched(make_item):
    item = make_item("state/temperature")
    assert item.set_value(2500)
    assert not item.set_value(40000)
    assert item.to_number() == 2500


def test_speed_range(make_item):
    item = make_item("state/speed")
    assert not item.set_value(7)
    assert item.last_set is None
    assert item.set_value(6)
    assert item.to_number() == 6


def test_number_must_fit_64_bits(make_item):
    item = make_item("state/consumption")
    assert item.set_number(2 ** 63 - 1)
    assert not item.set_number(2 ** 63)


def test_set_number_rejects_text_items(make_item):
    item = make_item("attr/name")
    assert not item.set_number(1)
    assert item.last_set is None


def test_set_string(make_item):
    item = make_item("attr/name")
    assert item.set_string("Kitchen")
    assert item.to_string() == "Kitchen"
    changed = item.last_changed

    assert item.set_string("Kitchen")
    assert item.last_changed == changed
    assert item.last_set > changed


def test_set_string_rejects_numeric_items(make_item):
    item = make_item("state/bri")
    assert not item.set_string("10")
    assert item.last_set is None


def test_bool_variant(make_item):
    item = make_item("state/on")
    assert item.set_value(True)
    assert item.to_bool()
    assert item.to_number() == 1
    assert item.to_variant() is True

    assert item.set_value("false")
    assert not item.to_bool()
    assert item.set_value(0)
    assert item.to_variant() is False
    assert not item.set_value({"on": True})


def test_bool_variant_repeated(make_item):
    item = make_item("state/on")
    item.set_value(True)
    changed = item.last_changed

    assert item.set_value(True)
    assert item.last_changed == changed
    assert item.last_set > changed
    assert item.to_number_previous() == 1


@pytest.mark.parametrize(
    "value, expected",
    [
        (42, 42),
        ("42", 42),
        (" 7 ", 7),
        (2.4, 2),
        (2.5, 3),
        (-2.5, -3),
        (True, 1),
    ],
)
def test_integer_variant_coercion(make_item, value, expected):
    item = make_item("state/bri")
    assert item.set_value(value)
    assert item.to_number() == expected


@pytest.mark.parametrize("value", ["abc", "1.5", [1], {"v": 1}, float("nan")])
def test_integer_variant_rejects(make_item, value):
    item = make_item("state/bri")
    assert not item.set_value(value)
    assert item.last_set is None


def test_numeric_variant_is_float(make_item):
    item = make_item("state/temperature")
    item.set_value(2150)
    assert item.to_variant() == 2150.0
    assert isinstance(item.to_variant(), float)


def test_string_variant(make_item):
    item = make_item("state/alert")
    assert item.set_value("select")
    assert item.to_variant() == "select"
    assert item.set_value(True)
    assert item.to_string() == "true"
    assert item.set_value(3.0)
    assert item.to_string() == "3"
    assert not item.set_value(["a"])


def test_time_pattern_is_opaque_text(step_clock):
    item = ResourceItem(ResourceItemDescriptor(DataType.TIME_PATTERN, "config/scheduler"), step_clock)
    assert item.set_value("W127/T08:00:00")
    assert item.to_string() == "W127/T08:00:00"


def test_lastupdated_round_trip_in_utc(make_item):
    item = make_item("state/lastupdated")
    assert item.set_value("2020-01-02T03:04:05")
    assert item.to_string() == "2020-01-02T03:04:05"
    assert item.to_number() == _msecs(2020, 1, 2, 3, 4, 5)
    assert item.to_variant() == "2020-01-02T03:04:05"


def test_local_time_round_trip(make_item):
    item = make_item("config/localtime")
    assert item.set_value("2020-06-01T10:00:00")
    assert item.to_string() == "2020-06-01T10:00:00"
    assert item.to_number() == _msecs(2020, 6, 1, 10, 0, 0, tz=TEST_ZONE)


def test_time_from_datetime(make_item):
    item = make_item("state/lastupdated")
    moment = datetime(2019, 12, 31, 23, 59, 59, tzinfo=timezone.utc)
    assert item.set_value(moment)
    assert item.to_string() == "2019-12-31T23:59:59"


def test_time_from_string_path(make_item):
    item = make_item("state/lastupdated")
    assert item.set_string("2021-03-04T05:06:07")
    assert item.to_string() == "2021-03-04T05:06:07"


@pytest.mark.parametrize(
    "text",
    [
        "2020-13-01T00:00:00",
        "2020-02-30T00:00:00",
        "2020-01-02 03:04:05",
        "2020-01-02T03:04:05.123",
        "2020-01-02T03:04:05Z",
        "2020-1-2T3:4:5",
        "yesterday",
    ],
)
def test_time_parse_failure(make_item, text):
    item = make_item("state/lastupdated")
    assert not item.set_value(text)
    assert item.last_set is None
    assert item.to_number() == 0


def test_time_rejects_numbers(make_item):
    item = make_item("config/localtime")
    assert not item.set_value(1234)


def test_null_variant_clears_timestamps(make_item):
    item = make_item("state/bri")
    item.set_value(100)
    assert item.set_value(None)
    assert item.last_set is None
    assert item.last_changed is None
    assert item.to_variant() is None
    assert item.to_number() == 100


def test_set_time_stamps(make_item):
    item = make_item("state/bri")
    moment = datetime(2018, 5, 1, tzinfo=timezone.utc)
    item.set_time_stamps(moment)
    assert item.last_set == moment
    assert item.last_changed == moment
    assert item.to_variant() == 0.0


def test_in_rule_keeps_unique_order(make_item):
    item = make_item("state/presence")
    for handle in (3, 1, 3, 2, 1):
        item.in_rule(handle)
    assert item.rules_involved() == [3, 1, 2]


def test_rules_involved_is_a_snapshot(make_item):
    item = make_item("state/presence")
    item.in_rule(5)
    snapshot = item.rules_involved()
    snapshot.append(6)
    assert item.rules_involved() == [5]


def test_is_public_flag(make_item):
    item = make_item("config/pending")
    item.is_public = False
    assert not item.is_public


def test_copy_is_independent(make_item):
    item = make_item("attr/name")
    item.set_value("Hall")
    item.in_rule(1)

    other = copy.copy(item)
    other.set_value("Garage")
    other.in_rule(2)

    assert item.to_string() == "Hall"
    assert item.rules_involved() == [1]
    assert other.to_string() == "Garage"
    assert other.last_set > item.last_set
