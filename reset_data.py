"""
reset_data.py
-------------
Utility script to remove every car from the configured MongoDB database.

Bookings, domains and the theme preference are left alone; bookings are
never deleted.

Usage:
    $ python reset_data.py

After running this script, you can repopulate the demo catalogue with:
    $ python seeds.py
"""

from carbooking import create_app
from carbooking.services.car_service import CarService


def main():
    app = create_app()
    with app.app_context():
        print(f"✅ {CarService.clear_catalog()}")
    print("💡 Tip: Run `python seeds.py` to regenerate demo data.")


if __name__ == "__main__":
    main()
