from collections import Counter, defaultdict

from carbooking.models.booking import Booking
from carbooking.models.car import Car
from carbooking.models.domain import Domain
from carbooking.services.common import round2
from carbooking.utils.constants import BOOKING_STATUSES, CAR_TYPES, PaymentStatus


class AnalyticsService:
    """Aggregations for the admin dashboard."""

    @staticmethod
    def summary():
        cars_by_type = {t: Car.objects(car_type=t).count() for t in CAR_TYPES}

        status_cnt = Counter(Booking.objects.scalar("status"))
        bookings_by_status = {s: status_cnt.get(s, 0) for s in BOOKING_STATUSES}

        revenue = defaultdict(float)
        paid = 0
        for currency, total in Booking.objects(payment_status=PaymentStatus.PAID).scalar("currency", "total_price"):
            paid += 1
            revenue[currency or "USD"] += float(total or 0)

        return {
            "cars": {
                "total": sum(cars_by_type.values()),
                "active": Car.objects(is_active=True).count(),
                "byType": cars_by_type,
            },
            "domains": Domain.objects.count(),
            "bookings": {
                "total": sum(status_cnt.values()),
                "byStatus": bookings_by_status,
                "paid": paid,
                "revenueByCurrency": {k: round2(v) for k, v in sorted(revenue.items())},
            },
        }
