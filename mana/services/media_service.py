# mana/services/media_service.py
"""Proxy uploads to the hosted media service (Cloudinary)."""
from __future__ import annotations
import logging

import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError
from flask import current_app

log = logging.getLogger(__name__)


class UploadError(Exception):
    pass


def _credentials() -> dict:
    creds = {
        "cloud_name": current_app.config.get("CLOUDINARY_CLOUD_NAME"),
        "api_key": current_app.config.get("CLOUDINARY_API_KEY"),
        "api_secret": current_app.config.get("CLOUDINARY_API_SECRET"),
    }
    if not all(creds.values()):
        raise UploadError("Media host is not configured.")
    return creds


def upload_file(stream, filename: str, folder: str | None = None) -> dict:
    """Send bytes to the media host; ``resource_type=auto`` lets it tell images from documents."""
    creds = _credentials()
    try:
        data = cloudinary.uploader.upload(
            stream,
            folder=folder or current_app.config.get("CLOUDINARY_FOLDER", "mana-uploads"),
            resource_type="auto",
            filename=filename or "upload",
            timeout=current_app.config.get("UPLOAD_TIMEOUT", 30),
            **creds,
        )
    except CloudinaryError as e:
        log.error("Media upload failed for %s: %s", filename, e)
        raise UploadError(str(e) or "Upload failed.") from e

    log.info("Media upload ok file=%s public_id=%s", filename, data.get("public_id"))
    return {
        "url": data.get("secure_url") or data.get("url"),
        "publicId": data.get("public_id"),
        "resourceType": data.get("resource_type"),
    }
