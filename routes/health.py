from datetime import datetime

from flask import Blueprint, jsonify

health_bp = Blueprint("health", __name__, url_prefix="/api")


@health_bp.get("/health")
def health():
    return jsonify(status="ok", timestamp=datetime.utcnow().isoformat()), 200
