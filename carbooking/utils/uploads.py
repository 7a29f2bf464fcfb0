import logging
import os
import uuid

from flask import current_app
from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..exceptions import InvalidPayloadError
from .constants import ALLOWED_IMAGE_EXTENSIONS

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/static/uploads"


def allowed_image(filename: str) -> bool:
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    return ext in ALLOWED_IMAGE_EXTENSIONS


def save_image_upload(upload: FileStorage) -> str:
    """Store an uploaded car image under UPLOAD_FOLDER and return its public URL."""
    original = secure_filename(upload.filename or "")
    if not original or not allowed_image(original):
        raise InvalidPayloadError("Image must be one of: " + ", ".join(sorted(ALLOWED_IMAGE_EXTENSIONS)))

    ext = original.rsplit(".", 1)[-1].lower()
    name = f"{uuid.uuid4().hex}.{ext}"
    folder = current_app.config["UPLOAD_FOLDER"]
    os.makedirs(folder, exist_ok=True)
    upload.save(os.path.join(folder, name))
    logger.info("Stored car image %s (%s)", name, original)
    return f"{UPLOAD_URL_PREFIX}/{name}"
