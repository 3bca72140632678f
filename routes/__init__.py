from .health import health_bp
from .events import events_bp
from .booking import booking_bp
from .waitlist import waitlist_bp
