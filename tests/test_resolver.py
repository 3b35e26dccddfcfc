import pytest
from datetime import datetime, timedelta, timezone

from climbsync.lib.shared.models.booking import ParseFailure, ResolvedBooking
from climbsync.services.bookings.resolver import DateResolver, parse_booking_fragment, parse_received_at
from tests.factories import make_pair

pytestmark = pytest.mark.offline

@pytest.mark.parametrize("fragment, expected", [
    ("Thu, June 12, 6 PM", (6, 12, 18)),
    ("Mon, January 1, 6 PM", (1, 1, 18)),
    ("Sat, December 31, 12 PM", (12, 31, 12)),
    ("Sun, August 3, 12 AM", (8, 3, 0)),
    ("Fri, October 10, 9 AM", (10, 10, 9)),
])
def test_parse_booking_fragment(fragment, expected):
    parsed = parse_booking_fragment(fragment)
    assert (parsed.month, parsed.day, parsed.hour) == expected
    assert parsed.minute == 0

@pytest.mark.parametrize("fragment", [
    "not a date",
    "",
    "June 12, 6 PM",
    "Thu, June 12",
    "Thu, June 12, 6:30 PM",
    "Thu, June 12, 18 PM",
    "Thu, Jun 12, 6 PM",
    "Thu, June 12, 6 PM 2024",
])
def test_parse_booking_fragment_rejects(fragment):
    assert parse_booking_fragment(fragment) is None

def test_weekday_is_not_checked_against_date():
    # June 12 2024 is a Wednesday
    parsed = parse_booking_fragment("Mon, June 12, 6 PM")
    assert (parsed.month, parsed.day) == (6, 12)

@pytest.mark.parametrize("value, expected", [
    ("Tue, 30 Nov 2023 10:00:00 -0800", (2023, 11, 30)),
    ("Tue, 30 Nov 2023 10:00:00", (2023, 11, 30)),
    ("Mon, 1 Jan 2024", (2024, 1, 1)),
    ("Wed, 6 Mar 2024 17:04:11 +0000 (UTC)", (2024, 3, 6)),
])
def test_parse_received_at(value, expected):
    parsed = parse_received_at(value)
    assert (parsed.year, parsed.month, parsed.day) == expected

@pytest.mark.parametrize("value", ["", "   ", "yesterday-ish"])
def test_parse_received_at_rejects(value):
    assert parse_received_at(value) is None

def test_earlier_month_rolls_to_year_after_received():
    resolver = DateResolver(clock=lambda: datetime(2030, 6, 1))
    result = resolver.resolve(make_pair("Mon, January 1, 6 PM", "Tue, 30 Nov 2023 10:00:00"))

    assert isinstance(result, ResolvedBooking)
    assert result.instant == datetime(2024, 1, 1, 18, 0)

def test_same_or_later_month_uses_wall_clock_year():
    resolver = DateResolver(clock=lambda: datetime(2024, 3, 5))
    result = resolver.resolve(make_pair("Wed, March 10, 5 PM", "Mon, 1 Jan 2024"))

    assert result.instant == datetime(2024, 3, 10, 17, 0)

def test_wall_clock_year_wins_over_received_year():
    resolver = DateResolver(clock=lambda: datetime(2025, 2, 1))
    result = resolver.resolve(make_pair("Sat, March 1, 10 AM", "Fri, 1 Mar 2024 08:00:00 -0800"))

    assert result.instant == datetime(2025, 3, 1, 10, 0)

def test_same_month_is_not_rolled_over(resolver):
    result = resolver.resolve(make_pair("Fri, March 29, 7 PM", "Mon, 4 Mar 2024 09:00:00 -0800"))
    assert result.instant == datetime(2024, 3, 29, 19, 0)

def test_resolved_instant_is_naive_and_keeps_source(resolver):
    pair = make_pair("Wed, March 10, 5 PM")
    result = resolver.resolve(pair)

    assert result.instant.tzinfo is None
    assert result.tz_naive is True
    assert result.source is pair

def test_resolution_is_deterministic(resolver):
    pair = make_pair("Thu, June 12, 6 PM")
    assert resolver.resolve(pair) == resolver.resolve(pair)

    bad = make_pair("not a date")
    assert resolver.resolve(bad) == resolver.resolve(bad)

def test_unparsable_fragment_is_a_failure_not_an_exception(resolver):
    result = resolver.resolve(make_pair("not a date"))

    assert isinstance(result, ParseFailure)
    assert "booking fragment" in result.reason

def test_unparsable_received_timestamp_is_a_failure(resolver):
    result = resolver.resolve(make_pair("Thu, June 12, 6 PM", "sometime last week"))

    assert isinstance(result, ParseFailure)
    assert "received timestamp" in result.reason

def test_leap_day_needs_a_leap_year():
    pair = make_pair("Thu, February 29, 6 PM", "Mon, 1 Jan 2024")

    leap = DateResolver(clock=lambda: datetime(2024, 1, 2)).resolve(pair)
    assert leap.instant == datetime(2024, 2, 29, 18, 0)

    non_leap = DateResolver(clock=lambda: datetime(2025, 1, 2)).resolve(pair)
    assert isinstance(non_leap, ParseFailure)

def test_resolve_all_keeps_going_after_failures(resolver):
    pairs = [
        make_pair("not a date"),
        make_pair("Wed, March 10, 5 PM"),
        make_pair("Thu, June 12, 6 PM", "garbage"),
        make_pair("Thu, June 12, 6 PM"),
    ]
    results = resolver.resolve_all(pairs)

    assert [type(r) for r in results] == [ParseFailure, ResolvedBooking, ParseFailure, ResolvedBooking]
    assert results[3].instant == datetime(2024, 6, 12, 18, 0)

PACIFIC_STANDARD = timezone(timedelta(hours=-8))

def test_received_month_is_read_in_local_time():
    # 02:00 UTC on Dec 1 is still Nov 30 in Vancouver, so the booking stays in 2023.
    resolver = DateResolver(clock=lambda: datetime(2023, 11, 30, 19, 0), local_tz=PACIFIC_STANDARD)
    result = resolver.resolve(make_pair("Thu, November 30, 8 PM", "Fri, 01 Dec 2023 02:00:00 +0000"))

    assert result.instant == datetime(2023, 11, 30, 20, 0)

def test_received_year_is_read_in_local_time():
    # 03:00 UTC on Jan 1 2024 is Dec 31 2023 locally: a January booking rolls to 2024, not 2025.
    resolver = DateResolver(clock=lambda: datetime(2023, 12, 31, 19, 0), local_tz=PACIFIC_STANDARD)
    result = resolver.resolve(make_pair("Fri, January 5, 6 PM", "Mon, 01 Jan 2024 03:00:00 +0000"))

    assert result.instant == datetime(2024, 1, 5, 18, 0)

def test_naive_received_timestamp_is_taken_as_local():
    resolver = DateResolver(clock=lambda: datetime(2023, 11, 30, 19, 0), local_tz=PACIFIC_STANDARD)
    result = resolver.resolve(make_pair("Thu, November 30, 8 PM", "Fri, 01 Dec 2023 02:00:00"))

    # A naive Dec 1 stays Dec 1; November is the earlier month, so the booking rolls over
    assert result.instant == datetime(2024, 11, 30, 20, 0)
