"""
Firestore connection
Resolves service-account credentials from the environment and builds the client
"""
import json
import os

import google.auth
from google.auth.exceptions import DefaultCredentialsError
from google.cloud import firestore
from google.oauth2 import service_account

import config

_db = None


class MissingCredentialError(RuntimeError):
    """No usable service-account configuration was found"""


def _from_info(info: dict):
    credentials = service_account.Credentials.from_service_account_info(info)
    return credentials, info.get("project_id")


def resolve_credentials(environ=None):
    """Return (credentials, project_id, source) following the env var precedence"""
    if environ is None:
        environ = os.environ

    raw_json = environ.get(config.ENV_CREDENTIALS_JSON)
    if raw_json:
        credentials, project = _from_info(json.loads(raw_json))
        return credentials, project, "json"

    credentials_path = environ.get(config.ENV_CREDENTIALS_PATH)
    if not credentials_path:
        raise MissingCredentialError(
            f"Missing service account configuration. Set {config.ENV_CREDENTIALS_PATH} "
            f"or {config.ENV_CREDENTIALS_JSON}"
        )

    if not os.path.isabs(credentials_path):
        credentials_path = os.path.join(os.getcwd(), credentials_path)

    try:
        with open(credentials_path, encoding="utf-8") as f:
            info = json.load(f)
    except OSError:
        # Unreadable key file: fall back to ambient application default credentials
        try:
            credentials, project = google.auth.default()
        except DefaultCredentialsError as e:
            raise MissingCredentialError(
                f"Could not read {credentials_path} and no default credentials are available: {e}"
            ) from e
        return credentials, project, "default"

    credentials, project = _from_info(info)
    return credentials, project, "file"


def get_db(environ=None) -> firestore.Client:
    """Return the process-wide Firestore client, creating it on first use"""
    global _db
    if _db is not None:
        return _db

    if environ is None:
        environ = os.environ
    credentials, project, source = resolve_credentials(environ)
    project = environ.get(config.ENV_PROJECT) or project
    print(f"[OK] Loaded credentials ({source}) for project: {project}")
    _db = firestore.Client(project=project, credentials=credentials)
    return _db


def reset_db() -> None:
    global _db
    _db = None
