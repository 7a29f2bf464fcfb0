import mongoengine

from carbooking.models.base import TimestampedDocument
from carbooking.utils.constants import (
    CAR_TYPES,
    DEFAULT_CANCELLATION_POLICY,
    DEFAULT_CURRENCY,
    FUEL_TYPES,
    PLACEHOLDER_IMAGE,
    TRANSMISSIONS,
)


class Car(TimestampedDocument):
    """
    One inventory vehicle. `car_type` decides which group of fields matters:
    transfers use passengers/luggage/rating, rentals use seats/bags/transmission
    and friends. Both groups are always stored with their defaults.
    """
    car_type = mongoengine.StringField(db_field="carType", required=True, choices=CAR_TYPES)

    # common
    name = mongoengine.StringField(required=True)
    type = mongoengine.StringField(required=True)  # "Standard Service", "Economy", ...
    image = mongoengine.StringField(default=PLACEHOLDER_IMAGE)
    price = mongoengine.FloatField(required=True)
    currency = mongoengine.StringField(default=DEFAULT_CURRENCY)
    description = mongoengine.StringField(default="")

    # transfer
    passengers = mongoengine.IntField(default=0)
    medium_luggage = mongoengine.IntField(db_field="mediumLuggage", default=0)
    small_luggage = mongoengine.IntField(db_field="smallLuggage", default=0)
    rating = mongoengine.FloatField(min_value=0, max_value=5, default=5)
    cancellation_policy = mongoengine.StringField(
        db_field="cancellationPolicy", default=DEFAULT_CANCELLATION_POLICY
    )

    # rental
    category = mongoengine.StringField(default="")  # "Hyundai Avante or similar"
    seats = mongoengine.IntField(default=0)
    bags = mongoengine.IntField(default=0)
    transmission = mongoengine.StringField(choices=TRANSMISSIONS, default="Automatic")
    price_per_day = mongoengine.FloatField(db_field="pricePerDay", default=0)
    fuel_type = mongoengine.StringField(db_field="fuelType", choices=FUEL_TYPES, default="Petrol")
    pickup_location = mongoengine.StringField(db_field="pickupLocation", default="")
    features = mongoengine.ListField(mongoengine.StringField())

    is_active = mongoengine.BooleanField(db_field="isActive", default=True)

    meta = {
        "collection": "cars",
        "indexes": ["car_type", "-created_at"],
    }
