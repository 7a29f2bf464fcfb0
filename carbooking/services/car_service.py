import logging
from typing import Optional

from carbooking.exceptions import CarNotFoundError, CatalogNotEmptyError, InvalidPayloadError
from carbooking.models.car import Car
from carbooking.services.common import object_id_or_none
from carbooking.services.domain_service import DomainService
from carbooking.utils.constants import REQUIRED_CAR_FIELDS, CarType
from carbooking.utils.payloads import CarPayload
from carbooking.utils.uploads import save_image_upload
from carbooking.utils.wire import apply_wire_fields, document_to_wire

logger = logging.getLogger(__name__)

# never taken from a request body
PROTECTED_CAR_FIELDS = ("_id", "createdAt", "updatedAt")

_SEED_FEATURES = ["Free Cancellation", "Damage & theft coverage", "Full to Full"]


def _transfer(name, type_, image, seats, medium, small, price, rating=5):
    return {
        "carType": CarType.TRANSFER, "name": name, "type": type_, "image": image,
        "passengers": seats, "mediumLuggage": medium, "smallLuggage": small,
        "price": price, "currency": "USD", "rating": rating,
        "cancellationPolicy": "Free Cancellation 24h", "isActive": True,
    }


def _rental(name, type_, category, image, bags, price, per_day, fuel="Petrol"):
    return {
        "carType": CarType.RENTAL, "name": name, "type": type_, "category": category,
        "image": image, "seats": 5, "bags": bags, "transmission": "Automatic",
        "price": price, "pricePerDay": per_day, "description": "Free Cancellation",
        "fuelType": fuel, "pickupLocation": "Free Shuttle Bus",
        "features": list(_SEED_FEATURES), "currency": "USD", "isActive": True,
    }


TRANSFER_CARS = [
    _transfer("Sedan Car 3pax", "Standard Service", "/sedan-transfer.png", 3, 2, 3, 2269.46),
    _transfer("MPV 4pax", "Standard Service", "/mpv-transfer.png", 4, 4, 4, 2937.80),
    _transfer("Minivan 5pax", "Standard Service", "/minivan-transfer.png", 5, 5, 5, 3250.00, rating=4.5),
    _transfer("SUV 6pax", "Premium Service", "/suv-transfer.png", 6, 6, 6, 4100.00),
]

RENTAL_CARS = [
    _rental("Compact", "Economy", "Hyundai Avante or similar", "/compact-car-city.png", 3, 23002.02, 5750.505),
    _rental("SUV", "Premium", "Toyota Land Cruiser or similar", "/suv-car.png", 5, 316352.38, 79088.095),
    _rental("Fullsize", "Standard", "Hyundai i45 or similar", "/fullsize-sedan.jpg", 5, 519151.54, 129787.885),
    _rental("Truck", "Utility", "Ford Ranger or similar", "/truck-pickup.jpg", 3, 206265.42, 51566.355, fuel="Diesel"),
]


class CarService:
    """Vehicle inventory: list, CRUD and the demo catalogue."""

    @staticmethod
    def list_cars(car_type: Optional[str] = None, is_active: Optional[bool] = None,
                  domain_name: Optional[str] = None) -> list[dict]:
        """
        Newest first. With `domain_name`, an active domain's overrides are laid
        over the result: hidden cars are dropped and override prices replace
        the catalogue price. Unknown or inactive domains leave the list as is.
        """
        query = {}
        if car_type:
            query["car_type"] = car_type
        if is_active is not None:
            query["is_active"] = is_active
        cars = [document_to_wire(c) for c in Car.objects(**query).order_by("-created_at", "-id")]

        if not domain_name:
            return cars
        domain = DomainService.find_by_name(domain_name)
        if domain is None or not domain.is_active:
            return cars
        return apply_domain_overrides(cars, domain.car_overrides())

    @staticmethod
    def _get(car_id) -> Car:
        oid = object_id_or_none(car_id)
        car = Car.objects(id=oid).first() if oid else None
        if car is None:
            raise CarNotFoundError()
        return car

    @staticmethod
    def get_car(car_id) -> dict:
        return document_to_wire(CarService._get(car_id))

    @staticmethod
    def create_car(payload: CarPayload) -> dict:
        fields = payload.fields
        missing = [k for k in REQUIRED_CAR_FIELDS if k != "price" and not fields.get(k)]
        if missing or fields.get("price") is None:
            raise InvalidPayloadError("Name, type, carType, and price are required")

        car = apply_wire_fields(Car(), fields, exclude=PROTECTED_CAR_FIELDS)
        if payload.image_upload is not None:
            car.image = save_image_upload(payload.image_upload)
        car.save()
        logger.info("Created %s car %s (%s)", car.car_type, car.name, car.id)
        return document_to_wire(car)

    @staticmethod
    def update_car(car_id, payload: CarPayload) -> dict:
        """Partial update: only keys present in the payload are touched."""
        car = CarService._get(car_id)
        fields = payload.fields
        if "carType" in fields and fields["carType"] != car.car_type:
            raise InvalidPayloadError("carType cannot be changed after creation")

        apply_wire_fields(car, fields, exclude=PROTECTED_CAR_FIELDS)
        if payload.image_upload is not None:
            car.image = save_image_upload(payload.image_upload)
        car.save()
        return document_to_wire(car)

    @staticmethod
    def delete_car(car_id) -> None:
        CarService._get(car_id).delete()

    @staticmethod
    def seed_catalog() -> str:
        existing = Car.objects.count()
        if existing > 0:
            raise CatalogNotEmptyError(
                f"Database already has {existing} cars. Delete them first if you want to reseed."
            )
        docs = [apply_wire_fields(Car(), data) for data in TRANSFER_CARS + RENTAL_CARS]
        Car.objects.insert(docs)
        message = (
            f"Successfully seeded {len(docs)} cars "
            f"({len(TRANSFER_CARS)} transfers, {len(RENTAL_CARS)} rentals)"
        )
        logger.info(message)
        return message

    @staticmethod
    def clear_catalog() -> str:
        deleted = Car.objects.delete()
        logger.info("Deleted %s cars", deleted)
        return f"Deleted {deleted} cars"


def apply_domain_overrides(cars: list[dict], overrides: dict) -> list[dict]:
    result = []
    for car in cars:
        cfg = overrides.get(car["_id"])
        if cfg is None:
            result.append(car)
            continue
        if not cfg.is_visible:
            continue
        result.append({**car, "price": cfg.price})
    return result
