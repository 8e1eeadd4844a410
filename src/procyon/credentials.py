import json
from pathlib import Path

from google.oauth2 import service_account

from .core import SCOPES
from .logger import logger
from .schemas.credentials import ServiceAccountKey


def load_credentials(key_path: str | Path) -> service_account.Credentials:
    """
    Reads a service account key file and returns credentials scoped to cloud-platform.

    Missing or unreadable files raise OSError (FileNotFoundError, PermissionError).
    Malformed JSON or a key missing required fields raises ValueError.
    The key file is only read, never rewritten.
    """
    path = Path(key_path)
    account_key = path.read_text(encoding="utf-8")

    info = json.loads(account_key)
    key = ServiceAccountKey.model_validate(info)
    logger.debug(f"Loaded key {key.private_key_id} for {key.client_email}")

    return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)


def describe_credentials(credentials: service_account.Credentials) -> str:
    """One-line diagnostic summary. Never includes key material."""
    scopes = ", ".join(credentials.scopes or [])
    return (
        f"{credentials.service_account_email} "
        f"(project: {credentials.project_id}, scopes: {scopes})"
    )
