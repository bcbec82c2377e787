import json
import logging
from pathlib import Path
from typing import Any, Dict

from bson.objectid import ObjectId


def load_settings(config_file: Path | None) -> Dict[str, Any]:
    """Read a JSON settings file. Unreadable or malformed files yield an empty dict."""
    try:
        if config_file:
            with open(config_file, 'r') as config_handle:
                settings = json.load(config_handle)
                if isinstance(settings, dict):
                    return settings
                logging.warning(f"Settings file {config_file} does not hold a JSON object, ignoring it")
    except (OSError, ValueError) as e:
        logging.warning(f"Could not read settings file {config_file}: {e}")

    return {}


def serialize_mongo_document(doc: Dict[str, Any]) -> Dict[str, Any]:
    """
    Serialize MongoDB document for printing or JSON output.
    Convert ObjectId to string.
    """
    if '_id' in doc and isinstance(doc['_id'], ObjectId):
        doc = {**doc, '_id': str(doc['_id'])}
    return doc
