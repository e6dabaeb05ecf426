import json
import time

from generator.request import GenerationRequest

from server import config


def log_request(entry):
    """Append one JSON line to the request log. Entries never hold passwords."""
    if not config.SETTINGS["log_enabled"]:
        return

    entry = {"ts": time.time(), **entry}
    with open(config.REQUESTS_LOG, "a", encoding="utf-8") as f:
        f.write(json.dumps(entry) + "\n")


def parse_generation_request(data):
    """
    Build and validate a GenerationRequest from a JSON body.

    Raises ValueError with a user-facing message on bad input.
    """
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")

    classes = data.get("classes", [])
    if isinstance(classes, str):
        classes = [classes]
    if not isinstance(classes, list) or not all(isinstance(c, str) for c in classes):
        raise ValueError("classes must be a list of class names")

    request = GenerationRequest(
        length=data.get("length", 16),
        classes=tuple(classes),
        quantity=data.get("quantity", 1),
    )
    return request.validate()


def parse_password(data):
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    password = data.get("password", "")
    if not isinstance(password, str):
        raise ValueError("password must be a string")
    return password
