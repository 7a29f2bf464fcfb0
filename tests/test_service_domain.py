import pytest

from carbooking.exceptions import DomainNotFoundError, DuplicateDomainError, InvalidPayloadError
from carbooking.services.car_service import CarService
from carbooking.services.domain_service import DomainService
from carbooking.utils.payloads import CarPayload


def test_create_and_find_case_insensitive(app):
    DomainService.create_domain({"domainName": "Example.com", "themeId": "royal-purple"})
    found = DomainService.find_by_name("example.com")
    assert found is not None
    assert found.domain_name == "Example.com"
    assert found.theme_id == "royal-purple"


def test_lookup_is_literal_not_a_pattern(app):
    DomainService.create_domain({"domainName": "example.com"})
    assert DomainService.find_by_name("example.co.") is None
    assert DomainService.find_by_name(".*") is None
    assert DomainService.find_by_name("examplexcom") is None


def test_name_required(app):
    with pytest.raises(InvalidPayloadError) as exc:
        DomainService.create_domain({"themeId": "teal-ocean"})
    assert exc.value.message == "Domain name is required"


def test_duplicate_name_rejected(app):
    DomainService.create_domain({"domainName": "a.test"})
    with pytest.raises(DuplicateDomainError):
        DomainService.create_domain({"domainName": "a.test"})


def test_update_and_delete(app):
    created = DomainService.create_domain({"domainName": "b.test"})
    updated = DomainService.update_domain(created["_id"], {
        "isActive": False,
        "cars": [{"carId": "abc", "price": 10}],
    })
    assert updated["isActive"] is False
    assert updated["cars"] == [{"carId": "abc", "price": 10.0, "isVisible": True}]

    DomainService.delete_domain(created["_id"])
    with pytest.raises(DomainNotFoundError):
        DomainService.get_domain(created["_id"])


def test_domain_overrides_apply_to_car_listing(app):
    shown = CarService.create_car(CarPayload(fields={"carType": "rental", "name": "A", "type": "Economy", "price": 100}))
    hidden = CarService.create_car(CarPayload(fields={"carType": "rental", "name": "B", "type": "Economy", "price": 200}))
    untouched = CarService.create_car(CarPayload(fields={"carType": "rental", "name": "C", "type": "Economy", "price": 300}))
    DomainService.create_domain({
        "domainName": "tenant.test",
        "cars": [
            {"carId": shown["_id"], "price": 80},
            {"carId": hidden["_id"], "price": 150, "isVisible": False},
        ],
    })

    cars = {c["_id"]: c for c in CarService.list_cars(domain_name="TENANT.test")}
    assert hidden["_id"] not in cars
    assert cars[shown["_id"]]["price"] == 80
    assert cars[untouched["_id"]]["price"] == 300

    # inactive domains leave the catalogue untouched
    domain = DomainService.find_by_name("tenant.test")
    DomainService.update_domain(str(domain.id), {"isActive": False})
    assert len(CarService.list_cars(domain_name="tenant.test")) == 3
