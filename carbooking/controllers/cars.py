from flask import Blueprint, request

from ..services.car_service import CarService
from ..utils.payloads import decode_car_request
from ..utils.wire import envelope

bp = Blueprint("cars", __name__, url_prefix="/api/cars")


@bp.get("")
def list_cars():
    """?carType=transfer|rental, ?isActive=true|false, ?domainName=<tenant>"""
    is_active = None
    if "isActive" in request.args:
        is_active = request.args.get("isActive") == "true"
    cars = CarService.list_cars(
        car_type=request.args.get("carType") or None,
        is_active=is_active,
        domain_name=(request.args.get("domainName") or "").strip() or None,
    )
    return envelope(cars)


@bp.post("")
def create_car():
    car = CarService.create_car(decode_car_request(request))
    return envelope(car, message="Car created successfully", status=201)


@bp.post("/seed")
def seed_cars():
    return envelope(message=CarService.seed_catalog(), status=201)


@bp.delete("/seed")
def clear_cars():
    return envelope(message=CarService.clear_catalog())


@bp.get("/<car_id>")
def get_car(car_id):
    return envelope(CarService.get_car(car_id))


@bp.put("/<car_id>")
def update_car(car_id):
    car = CarService.update_car(car_id, decode_car_request(request))
    return envelope(car, message="Car updated successfully")


@bp.delete("/<car_id>")
def delete_car(car_id):
    CarService.delete_car(car_id)
    return envelope(message="Car deleted successfully")
