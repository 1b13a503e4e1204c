# bookingrecords

Typed records for a travel-booking system, plus helpers that read the
result sets of a single database query into those records.

A booking query returns up to twelve result sets, in this order: booking
details, hotel details, detail options, booking services, miscellaneous
items, passengers, booking summary, booking hotels, booking products,
transactions, cancellation policies and booking logs.
`BookingDetailsResult` (in `bookingrecords.models`) holds one list for
each of them.

## Installing

```
pip install .
```

The package has no runtime dependencies. For the tests:

```
pip install ".[test]"
pytest
```

## Records

Every record class (`BookingDetails`, `HotelDetail`, `DetailOption`,
`BookingService`, `Miscellaneous`, `Passenger`, `BookingSummary`,
`BookingHotel`, `BookingProduct`, `Transaction`, `CancellationPolicy` and
`BookingLog`) is a dataclass derived from `Record`. All fields default to
`None`, because any column may be NULL. Each field carries its database
column name and its JSON name in its metadata.

```python
from bookingrecords.models import Passenger, column_map

passenger = Passenger(first_name="Ada", last_name="Example", age=36)
passenger.to_dict()    # keys are the JSON names, e.g. "firstName"

column_map(Passenger)  # lower-cased column name -> attribute name
```

`Record.to_dict()` writes `date` and `datetime` values as ISO 8601
strings and leaves every other value as it is. `column_map()` raises
`TypeError` for anything that is not a record dataclass.

`BookingDetailsResult.to_dict()` returns each recordset as a list of
row dictionaries under its JSON name (`bookingDetails`,
`hotelDetails`, ...), and `to_json()` serialises that with the standard
`json` module. Values that `json` cannot encode, such as `Decimal`,
make `to_json()` raise `TypeError`.

## Reading result sets

`bookingrecords.recordset.scan_recordset(cursor, record_type)` fetches
every remaining row of the cursor's current result set and returns a
list of `record_type` instances. Columns are matched to fields by column
name, ignoring case. Columns that have no matching field are skipped,
and fields that have no matching column stay `None`. A cursor whose
`description` is `None` gives an empty list.

`scan_multiple_recordsets(cursor, result_type)` creates a `result_type`
and fills its list fields from successive result sets: the first field
from the current one, each later field after a call to the cursor's
`nextset()`. It stops as soon as `nextset()` returns a false value, or
when the cursor has no `nextset` method, leaving the remaining lists
empty. It raises `TypeError` if `result_type` is not a dataclass.

```python
from bookingrecords.models import BookingDetailsResult
from bookingrecords.recordset import scan_multiple_recordsets

cursor = connection.cursor()
cursor.execute(booking_query, (booking_id,))
result = scan_multiple_recordsets(cursor, BookingDetailsResult)

print(result.to_json())
```

Any DB-API 2.0 cursor will do, as long as it sets `description` and,
for more than one result set, provides `nextset()`.

## What it does not do

The package opens no database connection, carries no SQL or stored
procedure of its own and has no command-line program. You supply the
connection, run the query and hand the cursor to the scanning
functions.