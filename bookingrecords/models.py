"""Record types for the recordsets returned by the booking details query.

Each record field carries two names in its metadata. ``db`` is the column
name in the recordset, matched case-insensitively. ``json`` is the key used
when the record is serialised.
"""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from datetime import date, datetime
from functools import lru_cache
from typing import Any


def _col(db: str, json_name: str | None = None) -> Any:
    """Declare a nullable record field bound to column ``db``."""
    return field(default=None, metadata={"db": db, "json": json_name or db})


def _encode(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


class Record:
    """Base class of every recordset row type."""

    def to_dict(self) -> dict[str, Any]:
        """Return the row keyed by JSON names, with dates as ISO strings."""
        return {
            f.metadata["json"]: _encode(getattr(self, f.name))
            for f in dataclasses.fields(self)  # type: ignore[arg-type]
        }


@lru_cache(maxsize=None)
def _column_map(record_type: type) -> dict[str, str]:
    return {
        f.metadata["db"].lower(): f.name
        for f in dataclasses.fields(record_type)
        if f.metadata.get("db")
    }


def column_map(record_type: type) -> dict[str, str]:
    """Map lower-cased column names to attribute names of ``record_type``."""
    if not (
        isinstance(record_type, type)
        and issubclass(record_type, Record)
        and dataclasses.is_dataclass(record_type)
    ):
        raise TypeError(f"{record_type!r} is not a record type")
    return dict(_column_map(record_type))


@dataclass
class BookingDetails(Record):
    """Main booking information."""

    booking_id: int | None = _col("bookingId")
    refresa: str | None = _col("refresa")
    booking_ref: str | None = _col("bookingRef")
    booking_number: str | None = _col("bookingNumber")
    voucher_number: str | None = _col("voucherNumber")
    confirm_number: str | None = _col("confirmNumber")
    tracking_id: str | None = _col("trackingId")
    process_id: str | None = _col("processId")
    customer_id: int | None = _col("customerId")
    partner_id: int | None = _col("partnerId")
    partner_name: str | None = _col("partnerName")
    agency_id: int | None = _col("agencyId")
    agency_name: str | None = _col("agencyName")
    lang_id: int | None = _col("langId")
    booking_date: datetime | None = _col("bookingDate")
    payment_dead_line: datetime | None = _col("paymentDeadLine")
    status_id: int | None = _col("statusId")
    payment_status_id: int | None = _col("paymentStatusId")
    user_id: int | None = _col("userId")
    agent_id: int | None = _col("agentId")
    status: str | None = _col("Status", "status")
    payment_status: str | None = _col("paymentStatus")
    user_name: str | None = _col("userName")
    agent_name: str | None = _col("agentName")
    product_name: str | None = _col("productName")
    hotel_id: int | None = _col("hotelId")
    product_id: int | None = _col("productId")
    destination: str | None = _col("Destination", "destination")
    hotel_address: str | None = _col("hotelAddress")
    hotel_phone_number: str | None = _col("hotelPhoneNumber")
    dep_date: datetime | None = _col("depDate")
    ret_date: datetime | None = _col("retDate")
    days: int | None = _col("days")
    nights: int | None = _col("nights")
    dep_city: str | None = _col("depCity")
    total: float | None = _col("Total", "total")
    total_cost: float | None = _col("totalCost")
    profit_margin: float | None = _col("profitMargin")
    reseller_margin: float | None = _col("resellerMargin")
    distributor_margin: float | None = _col("distributorMargin")
    commission: float | None = _col("Commission", "commission")
    currency: str | None = _col("currency")
    display_currency: str | None = _col("displayCurrency")
    exchange_rate: float | None = _col("exchangeRate")
    title: str | None = _col("title")
    last_name: str | None = _col("lastName")
    first_name: str | None = _col("firstName")
    customer_address: str | None = _col("customerAddress")
    customer_city: str | None = _col("customerCity")
    customer_country: str | None = _col("customerCountry")
    email: str | None = _col("email")
    mobile: str | None = _col("mobile")
    nationality: str | None = _col("nationality")
    professional_id: int | None = _col("professionalId")
    product_type_id: int | None = _col("productTypeId")
    product_type: str | None = _col("productType")
    cancellation_fee: float | None = _col("cancellationFee")
    amount_to_pay: float | None = _col("amountToPay")
    supplier_id: int | None = _col("supplierId")
    supplier: str | None = _col("supplier")


@dataclass
class HotelDetail(Record):
    """Hotel room details."""

    id_detail_hotel: int | None = _col("IdDetailHotel", "idDetailHotel")
    hotel_name: str | None = _col("hotelName")
    country: str | None = _col("country")
    city: str | None = _col("city")
    arr_date: datetime | None = _col("arrDate")
    dep_date: datetime | None = _col("depDate")
    room_name: str | None = _col("roomName")
    room_id: int | None = _col("roomId")
    pension_id: int | None = _col("pensionId")
    quantity: int | None = _col("quantity")
    board: str | None = _col("Board", "board")
    adults: int | None = _col("adults")
    children: int | None = _col("children")
    infant: int | None = _col("infant")
    ages: str | None = _col("Ages", "ages")
    purchase_price: float | None = _col("PurchasePrice", "purchasePrice")
    sale_price: float | None = _col("SalePrice", "salePrice")
    hotel_id: int | None = _col("hotelId")
    product_id: int | None = _col("productId")
    num_chambre: int | None = _col("NumChambre", "numChambre")
    rate_key: str | None = _col("rateKey")


@dataclass
class DetailOption(Record):
    """Booking options."""

    id_detail_option: int | None = _col("IdDetailOption", "idDetailOption")
    booking_id: int | None = _col("bookingId")
    id_type_produit: int | None = _col("IdTypeProduit", "idTypeProduit")
    libelle: str | None = _col("Libelle", "libelle")
    description: str | None = _col("Description", "description")
    nombre: int | None = _col("Nombre", "nombre")
    quantity: int | None = _col("Quantity", "quantity")
    purchase_price: float | None = _col("PurchasePrice", "purchasePrice")
    sale_price: float | None = _col("SalePrice", "salePrice")


@dataclass
class BookingService(Record):
    """Services attached to a booking."""

    booking_service_id: int | None = _col("bookingServiceId")
    booking_id: int | None = _col("bookingId")
    product_type_id: int | None = _col("productTypeId")
    product_type: str | None = _col("productType")
    service_name: str | None = _col("serviceName")
    quantity: int | None = _col("quantity")
    price: float | None = _col("price")


@dataclass
class Miscellaneous(Record):
    """Miscellaneous items."""

    id_detail_option: int | None = _col("IdDetailOption", "idDetailOption")
    libelle: str | None = _col("Libelle", "libelle")
    nombre: int | None = _col("Nombre", "nombre")
    quantity: int | None = _col("Quantity", "quantity")
    description: str | None = _col("Description", "description")


@dataclass
class Passenger(Record):
    """Passenger details."""

    id_passager: int | None = _col("IdPassager", "idPassager")
    ref_resa: str | None = _col("refResa")
    booking_id: int | None = _col("bookingId")
    title: str | None = _col("title")
    last_name: str | None = _col("lastName")
    first_name: str | None = _col("firstName")
    age: int | None = _col("Age", "age")
    birth_date: datetime | None = _col("birthDate")
    pax_type: str | None = _col("paxType")
    id_produit: int | None = _col("IdProduit", "idProduit")
    num_chambre: int | None = _col("NumChambre", "numChambre")
    room_id: int | None = _col("roomId")


@dataclass
class BookingSummary(Record):
    """Room and passenger counts."""

    number_rooms: int | None = _col("number_rooms", "numberRooms")
    number_adults: int | None = _col("number_adults", "numberAdults")
    number_children: int | None = _col("number_children", "numberChildren")
    number_infant: int | None = _col("number_infant", "numberInfant")


@dataclass
class BookingHotel(Record):
    """Hotel information."""

    booking_hotel_id: int | None = _col("bookingHotelID")
    hotel_id: int | None = _col("hotelId")
    hotel_name: str | None = _col("hotelName")
    country: str | None = _col("country")
    city: str | None = _col("city")
    address: str | None = _col("address")
    booking_id: int | None = _col("bookingId")
    arr_date: datetime | None = _col("arrDate")
    dep_date: datetime | None = _col("depDate")
    rating: int | None = _col("rating")


@dataclass
class BookingProduct(Record):
    """Product details."""

    booking_product_id: int | None = _col("bookingProductId")
    product_id: int | None = _col("productId")
    product_name: str | None = _col("productName")
    destination: str | None = _col("destination")
    product_type_id: int | None = _col("productTypeId")
    product_type: str | None = _col("productType")
    photo: str | None = _col("photo")
    booking_id: int | None = _col("bookingId")
    dep_date: datetime | None = _col("depDate")
    ret_date: datetime | None = _col("retDate")
    days: int | None = _col("days")
    nights: int | None = _col("nights")
    adults: int | None = _col("adults")
    children: int | None = _col("children")
    infants: int | None = _col("infants")
    ages: str | None = _col("ages")
    sale_price: float | None = _col("salePrice")
    purchase_price: float | None = _col("purchasePrice")
    confirm_number: str | None = _col("confirmNumber")
    referer_booking_id: int | None = _col("refererBookingId")


@dataclass
class Transaction(Record):
    """Payment transactions."""

    transaction_id: int | None = _col("transactionId")
    s_id: str | None = _col("sId")
    affilie_id: int | None = _col("affilieId")
    num_cde: str | None = _col("NumCde", "numCde")
    payment_ref: str | None = _col("paymentRef")
    payment_ref2: str | None = _col("paymentRef2")
    amount: float | None = _col("amount")
    booking_ref: str | None = _col("bookingRef")
    booking_id: int | None = _col("bookingId")
    create_date: datetime | None = _col("createDate")
    update_date: datetime | None = _col("updateDate")
    payment_method: str | None = _col("paymentMethod")
    currency: str | None = _col("currency")
    status_id: int | None = _col("statusId")
    terminal: str | None = _col("terminal")
    action: str | None = _col("action")
    json_confirm: str | None = _col("jsonConfirm")


@dataclass
class CancellationPolicy(Record):
    """Cancellation policies."""

    id: int | None = _col("ID", "id")
    date_from: datetime | None = _col("dateFrom")
    date_to: datetime | None = _col("dateTo")
    fee_type: str | None = _col("feeType")
    value: float | None = _col("value")
    remarks: str | None = _col("remarks")
    booking_id: int | None = _col("bookingId")
    currency: str | None = _col("currency")
    purchase_price: float | None = _col("purchasePrice")
    sale_price: float | None = _col("salePrice")


@dataclass
class BookingLog(Record):
    """Booking log entries."""

    log_id: int | None = _col("logId")
    texte: str | None = _col("texte")
    date: datetime | None = _col("date")
    user_id: int | None = _col("userId")
    agent_name: str | None = _col("agentName")
    booking_id: int | None = _col("bookingId")
    alias: str | None = _col("alias")


def _recordset(record_type: type, json_name: str) -> Any:
    return field(
        default_factory=list,
        metadata={"json": json_name, "record": record_type},
    )


@dataclass
class BookingDetailsResult:
    """All recordsets of one booking, in the order the query returns them.

    Each field's metadata names its row type under ``record``.
    """

    booking_details: list[BookingDetails] = _recordset(BookingDetails, "bookingDetails")
    hotel_details: list[HotelDetail] = _recordset(HotelDetail, "hotelDetails")
    detail_options: list[DetailOption] = _recordset(DetailOption, "detailOptions")
    booking_services: list[BookingService] = _recordset(BookingService, "bookingServices")
    miscellaneous: list[Miscellaneous] = _recordset(Miscellaneous, "miscellaneous")
    passengers: list[Passenger] = _recordset(Passenger, "passengers")
    booking_summary: list[BookingSummary] = _recordset(BookingSummary, "bookingSummary")
    booking_hotels: list[BookingHotel] = _recordset(BookingHotel, "bookingHotels")
    booking_products: list[BookingProduct] = _recordset(BookingProduct, "bookingProducts")
    transactions: list[Transaction] = _recordset(Transaction, "transactions")
    cancellation_policies: list[CancellationPolicy] = _recordset(
        CancellationPolicy, "cancellationPolicies"
    )
    booking_logs: list[BookingLog] = _recordset(BookingLog, "bookingLogs")

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Return every recordset keyed by its JSON name."""
        return {
            f.metadata["json"]: [row.to_dict() for row in getattr(self, f.name)]
            for f in dataclasses.fields(self)
        }

    def to_json(self) -> str:
        """Serialise all recordsets as a JSON document."""
        return json.dumps(self.to_dict())