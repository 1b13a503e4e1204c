import dataclasses
import json
from datetime import datetime

import pytest

from bookingrecords.models import (
    BookingDetails,
    BookingDetailsResult,
    BookingHotel,
    BookingLog,
    BookingSummary,
    CancellationPolicy,
    HotelDetail,
    Passenger,
    Record,
    Transaction,
    column_map,
)


def test_defaults_are_none():
    details = BookingDetails()
    assert all(value is None for value in dataclasses.asdict(details).values())


def test_to_dict_uses_json_names():
    details = BookingDetails(booking_id=7, status="Confirmed", total=12.5)
    data = details.to_dict()
    assert data["bookingId"] == 7
    assert data["status"] == "Confirmed"
    assert data["total"] == 12.5
    assert data["paymentDeadLine"] is None
    assert "Status" not in data


def test_to_dict_key_count_matches_fields():
    data = BookingDetails().to_dict()
    assert len(data) == len(dataclasses.fields(BookingDetails))


def test_to_dict_encodes_datetime():
    moment = datetime(2024, 1, 2, 3, 4, 5)
    log = BookingLog(log_id=1, texte="created", date=moment)
    data = log.to_dict()
    assert datetime.fromisoformat(data["date"]) == moment
    assert data["texte"] == "created"


def test_summary_json_names():
    summary = BookingSummary(number_rooms=2, number_adults=3)
    assert summary.to_dict() == {
        "numberRooms": 2,
        "numberAdults": 3,
        "numberChildren": None,
        "numberInfant": None,
    }


def test_column_map_is_lower_case():
    mapping = column_map(BookingDetails)
    assert mapping["status"] == "status"
    assert mapping["destination"] == "destination"
    assert mapping["bookingid"] == "booking_id"
    assert all(key == key.lower() for key in mapping)


def test_column_map_source_column_names():
    assert column_map(HotelDetail)["iddetailhotel"] == "id_detail_hotel"
    assert column_map(BookingSummary)["number_rooms"] == "number_rooms"
    assert column_map(BookingHotel)["bookinghotelid"] == "booking_hotel_id"
    assert column_map(CancellationPolicy)["id"] == "id"
    assert column_map(Transaction)["numcde"] == "num_cde"


def test_column_map_covers_every_field():
    for record_type in (Passenger, Transaction, HotelDetail):
        mapping = column_map(record_type)
        names = {f.name for f in dataclasses.fields(record_type)}
        assert set(mapping.values()) == names


def test_column_map_returns_independent_copy():
    first = column_map(Passenger)
    first.clear()
    assert column_map(Passenger)["idpassager"] == "id_passager"


@pytest.mark.parametrize("bad", [dict, Record, BookingDetailsResult, "Passenger"])
def test_column_map_rejects_non_records(bad):
    with pytest.raises(TypeError):
        column_map(bad)


def test_result_recordset_order():
    keys = list(BookingDetailsResult().to_dict())
    assert keys == [
        "bookingDetails",
        "hotelDetails",
        "detailOptions",
        "bookingServices",
        "miscellaneous",
        "passengers",
        "bookingSummary",
        "bookingHotels",
        "bookingProducts",
        "transactions",
        "cancellationPolicies",
        "bookingLogs",
    ]


def test_result_record_types_in_metadata():
    types = [f.metadata["record"] for f in dataclasses.fields(BookingDetailsResult)]
    assert types[0] is BookingDetails
    assert types[-1] is BookingLog
    assert all(issubclass(t, Record) for t in types)
    for record_type in types:
        mapping = column_map(record_type)
        assert len(mapping) == len(dataclasses.fields(record_type))
        assert len(record_type().to_dict()) == len(mapping)


def test_result_lists_are_independent():
    first = BookingDetailsResult()
    second = BookingDetailsResult()
    first.passengers.append(Passenger(id_passager=1))
    assert second.passengers == []


def test_result_to_json_round_trip():
    moment = datetime(2023, 6, 1, 12, 0, 0)
    result = BookingDetailsResult(
        booking_details=[BookingDetails(booking_id=5, email="user@example.com")],
        passengers=[Passenger(first_name="Ann", birth_date=moment)],
    )
    loaded = json.loads(result.to_json())
    assert loaded == result.to_dict()
    assert loaded["bookingDetails"][0]["bookingId"] == 5
    assert loaded["bookingDetails"][0]["email"] == "user@example.com"
    assert datetime.fromisoformat(loaded["passengers"][0]["birthDate"]) == moment
    assert loaded["transactions"] == []