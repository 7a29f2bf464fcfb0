import mongoengine

from carbooking.models.base import TimestampedDocument


class DomainCarConfig(mongoengine.EmbeddedDocument):
    """Per-domain price and visibility override for one car."""
    car_id = mongoengine.StringField(db_field="carId", required=True)
    price = mongoengine.FloatField(required=True)
    is_visible = mongoengine.BooleanField(db_field="isVisible", default=True)

    meta = {"strict": False}


class Domain(TimestampedDocument):
    domain_name = mongoengine.StringField(db_field="domainName", required=True, unique=True)
    theme_id = mongoengine.StringField(db_field="themeId")
    cars = mongoengine.EmbeddedDocumentListField(DomainCarConfig)
    is_active = mongoengine.BooleanField(db_field="isActive", default=True)

    meta = {"collection": "domains"}

    def car_overrides(self) -> dict:
        """carId -> DomainCarConfig"""
        return {cfg.car_id: cfg for cfg in self.cars}
