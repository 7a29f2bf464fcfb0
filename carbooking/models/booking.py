"""
Booking document, stored in the `bookingforms` collection.

The booking form posts a loose JSON object; fields not declared here are
dropped on the way in rather than rejected, hence `strict: False` on the
document and its embedded parts.
"""
import mongoengine

from carbooking.models.base import _now
from carbooking.utils.constants import (
    BOOKING_STATUSES,
    CAR_TYPES,
    NOTIFICATION_STATUSES,
    PAYMENT_STATUSES,
    BookingStatus,
    CarType,
    NotificationStatus,
    PaymentStatus,
)


class RentalExtras(mongoengine.EmbeddedDocument):
    additional_driver = mongoengine.IntField(db_field="additionalDriver")
    child_seat = mongoengine.IntField(db_field="childSeat")
    booster_seat = mongoengine.IntField(db_field="boosterSeat")

    meta = {"strict": False}


class Coordinates(mongoengine.EmbeddedDocument):
    lat = mongoengine.FloatField()
    lon = mongoengine.FloatField()

    meta = {"strict": False}


class SelectedVehicle(mongoengine.EmbeddedDocument):
    vehicle_id = mongoengine.StringField(db_field="id")
    name = mongoengine.StringField()
    type = mongoengine.StringField()
    image = mongoengine.StringField()
    price = mongoengine.FloatField()

    meta = {"strict": False}


class Booking(mongoengine.Document):
    booking_type = mongoengine.StringField(db_field="bookingType", choices=CAR_TYPES, default=CarType.TRANSFER)
    booking_reference = mongoengine.StringField(db_field="bookingReference", unique=True)

    # trip
    from_location = mongoengine.StringField(db_field="fromLocation")
    to_location = mongoengine.StringField(db_field="toLocation")
    date = mongoengine.StringField()
    pickup_time = mongoengine.StringField(db_field="pickupTime")
    passengers = mongoengine.IntField()

    # rental
    dropoff_date = mongoengine.StringField(db_field="dropoffDate")
    dropoff_time = mongoengine.StringField(db_field="dropoffTime")
    license_number = mongoengine.StringField(db_field="licenseNumber")
    rental_extras = mongoengine.EmbeddedDocumentField(RentalExtras, db_field="rentalExtras")

    from_coords = mongoengine.EmbeddedDocumentField(Coordinates, db_field="fromCoords")
    to_coords = mongoengine.EmbeddedDocumentField(Coordinates, db_field="toCoords")

    estimated_time = mongoengine.StringField(db_field="estimatedTime")
    estimated_distance = mongoengine.StringField(db_field="estimatedDistance")

    currency = mongoengine.StringField()
    total_price = mongoengine.FloatField(db_field="totalPrice")

    selected_vehicle = mongoengine.EmbeddedDocumentField(SelectedVehicle, db_field="selectedVehicle")

    pickup_address = mongoengine.StringField(db_field="pickupAddress")
    destination_address = mongoengine.StringField(db_field="destinationAddress")
    special_instructions = mongoengine.StringField(db_field="specialInstructions")

    small_luggage = mongoengine.IntField(db_field="smallLuggage")
    medium_luggage = mongoengine.IntField(db_field="mediumLuggage")

    # passenger
    passenger_title = mongoengine.StringField(db_field="passengerTitle")
    passenger_name = mongoengine.StringField(db_field="passengerName")
    email = mongoengine.StringField()
    phone = mongoengine.StringField()
    country_code = mongoengine.StringField(db_field="countryCode")

    status = mongoengine.StringField(choices=BOOKING_STATUSES, default=BookingStatus.PENDING)

    # payment
    payment_status = mongoengine.StringField(
        db_field="paymentStatus", choices=PAYMENT_STATUSES, default=PaymentStatus.UNPAID
    )
    paypal_order_id = mongoengine.StringField(db_field="paypalOrderId")
    paypal_capture_id = mongoengine.StringField(db_field="paypalCaptureId")

    notification_status = mongoengine.StringField(
        db_field="notificationStatus", choices=NOTIFICATION_STATUSES, default=NotificationStatus.PENDING
    )

    created_at = mongoengine.DateTimeField(db_field="createdAt", default=_now)

    meta = {"collection": "bookingforms", "strict": False}
