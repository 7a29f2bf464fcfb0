"""
seeds.py
--------
Load the demo car catalogue (4 transfers, 4 rentals) into MongoDB.

Usage:
    $ python seeds.py            # seed an empty catalogue
    $ python seeds.py --reset    # clear existing cars first
"""
import sys

from carbooking import create_app
from carbooking.exceptions import CatalogNotEmptyError
from carbooking.services.car_service import CarService


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    app = create_app()
    with app.app_context():
        if "--reset" in argv:
            print(f"🧹 {CarService.clear_catalog()}")
        try:
            print(f"✅ {CarService.seed_catalog()}")
        except CatalogNotEmptyError as e:
            print(f"⚠️  {e.message}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
