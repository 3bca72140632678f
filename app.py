from flask import Flask, jsonify
from config import Config
from routes import health_bp, events_bp, booking_bp, waitlist_bp

from models import db
from flask_migrate import Migrate
from services.errors import BookingError
from werkzeug.exceptions import HTTPException


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Register routes
    app.register_blueprint(health_bp)
    app.register_blueprint(events_bp)
    app.register_blueprint(booking_bp)
    app.register_blueprint(waitlist_bp)

    # Database init
    db.init_app(app)

    # Migrations
    Migrate(app, db)

    @app.errorhandler(BookingError)
    def _booking_error(err):
        # StorageError is already logged with its traceback by the unit of work
        if err.status_code >= 500:
            app.logger.error("%s: %s", type(err).__name__, err.message)
        return jsonify(error=err.message), err.status_code

    @app.errorhandler(HTTPException)
    def _http_error(err):
        # routing errors use the same {"error": ...} body as everything else
        return jsonify(error=err.name), err.code

    @app.after_request
    def add_security_headers(resp):
        resp.headers["X-Content-Type-Options"] = "nosniff"
        resp.headers["X-Frame-Options"] = "DENY"
        resp.headers["Referrer-Policy"] = "no-referrer"
        resp.headers["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"
        resp.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none';"
        return resp


    register_cli(app)


    return app

#-------------------------
import click
from utils.seed import seed_event

def register_cli(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables (local setups without migrations)."""
        db.create_all()
        print("Database tables created")

    @app.cli.command("seed-event")
    @click.option("--slug", default=None, help="Slug of the event to create.")
    def seed_event_command(slug):
        """Create the default event and its rooms (idempotent)."""
        event, created_rooms = seed_event(slug or app.config["DEFAULT_EVENT_SLUG"])
        print(f"Event '{event.name}' ({event.slug}) ready, {created_rooms} rooms created")

#-------------------------




if __name__ == "__main__":
    app = create_app()
    # Run locally
    app.run(host="127.0.0.1", port=3000)
