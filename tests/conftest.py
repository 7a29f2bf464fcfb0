import sys, pathlib, uuid

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import mongomock
import pytest
from mongoengine import disconnect

from carbooking import create_app
from carbooking.extensions import mail


@pytest.fixture
def app(tmp_path):
    """
    App bound to a fresh in-memory Mongo database. SMTP credentials are set so
    booking creation works; TESTING suppresses the actual send.
    """
    app = create_app({
        "TESTING": True,
        "MONGODB_URI": "mongodb://localhost",
        "MONGODB_DB": f"carbooking_test_{uuid.uuid4().hex[:8]}",
        "MONGO_CLIENT_CLASS": mongomock.MongoClient,
        "EMAIL_USER": "bookings@example.com",
        "EMAIL_PASS": "secret",
        "ADMIN_EMAIL": "admin@example.com",
        "CLERK_PUBLISHABLE_KEY": None,
        "CLERK_SECRET_KEY": None,
        "TOMTOM_API_KEY": None,
        "PAYPAL_CLIENT_ID": None,
        "PAYPAL_CLIENT_SECRET": None,
        "UPLOAD_FOLDER": str(tmp_path / "uploads"),
    })
    with app.app_context():
        yield app
    disconnect()


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def outbox(app):
    """Messages 'sent' through Flask-Mail during the test."""
    with mail.record_messages() as sent:
        yield sent
