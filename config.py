import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))

class Config:
    # Secrets
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-only-change-me")

    # SQLite database file stored next to the app as bedbooking.db; Postgres in production
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "DATABASE_URL",
        "sqlite:///" + os.path.join(BASE_DIR, "bedbooking.db")
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Placeholder names written onto restricted sibling beds
    BLOCK_MARKER = os.getenv("BLOCK_MARKER", "🔒 ")            # prefixed to the anchor's name
    WOMEN_ROOM_LABEL = os.getenv("WOMEN_ROOM_LABEL", "Frauenzimmer")
    MEN_ROOM_LABEL = os.getenv("MEN_ROOM_LABEL", "Männerzimmer")

    # Input limits
    NAME_MAX_LENGTH = 100
    WAITLIST_COMMENT_MAX_LENGTH = 500

    # Event created by `flask seed-event`
    DEFAULT_EVENT_SLUG = os.getenv("DEFAULT_EVENT_SLUG", "maitreffen")

    # Basic app settings
    DEBUG = False


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
