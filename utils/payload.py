from flask import request

from services.errors import ValidationError


def json_body() -> dict:
    """Request JSON as a dict; an absent or unparsable body counts as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
