import enum
from datetime import datetime
from models.db import db


class BedStatus(str, enum.Enum):
    BOOKED = "booked"
    BLOCKED = "blocked"
    WOMEN_ONLY = "women_only"
    MEN_ONLY = "men_only"


# Statuses that only exist as the result of a cascade (always carry blocked_by)
RESTRICTED_STATUSES = (BedStatus.BLOCKED, BedStatus.WOMEN_ONLY, BedStatus.MEN_ONLY)
# Statuses a Claim may convert into a booking
CLAIMABLE_STATUSES = (BedStatus.WOMEN_ONLY, BedStatus.MEN_ONLY)


class Restriction(str, enum.Enum):
    NONE = "none"
    BLOCKED = "blocked"
    WOMEN = "women"
    MEN = "men"

    @property
    def status(self):
        return {
            Restriction.BLOCKED: BedStatus.BLOCKED,
            Restriction.WOMEN: BedStatus.WOMEN_ONLY,
            Restriction.MEN: BedStatus.MEN_ONLY,
        }.get(self)


LOGISTICS_FIELDS = (
    "arrival_date",
    "arrival_time",
    "departure_date",
    "departure_time",
    "transport",
    "needs_pickup",
    "offers_ride_seats",
    "departure_city",
    "train_station",
    "train_time",
    "train_number",
)


class BedSlot(db.Model):
    __tablename__ = "bookings"

    id = db.Column(db.Integer, primary_key=True)

    event_id = db.Column(db.Integer, db.ForeignKey("events.id"), nullable=False, index=True)
    bed_id = db.Column(db.String(50), nullable=False)

    name = db.Column(db.String(100), nullable=False)
    status = db.Column(db.String(20), nullable=False, default=BedStatus.BOOKED.value)
    # status values: booked, blocked, women_only, men_only (no row = free)

    # Anchor bed whose booking caused this restriction; only used for cascade release
    blocked_by = db.Column(db.String(50), nullable=True, index=True)

    booked_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    # Travel logistics
    arrival_date = db.Column(db.Date, nullable=True)
    arrival_time = db.Column(db.String(5), nullable=True)
    departure_date = db.Column(db.Date, nullable=True)
    departure_time = db.Column(db.String(5), nullable=True)
    transport = db.Column(db.String(20), nullable=True)  # e.g. car, train, other
    needs_pickup = db.Column(db.Boolean, default=False, nullable=False)
    offers_ride_seats = db.Column(db.Integer, default=0, nullable=False)
    departure_city = db.Column(db.String(100), nullable=True)
    train_station = db.Column(db.String(100), nullable=True)
    train_time = db.Column(db.String(5), nullable=True)
    train_number = db.Column(db.String(20), nullable=True)

    __table_args__ = (
        # One live row per bed and event; upserts and cascade inserts conflict on this key
        db.UniqueConstraint("event_id", "bed_id", name="uq_bookings_event_bed"),
        db.CheckConstraint(
            "status IN ('booked', 'blocked', 'women_only', 'men_only')",
            name="ck_bookings_status",
        ),
        db.CheckConstraint(
            "status = 'booked' OR blocked_by IS NOT NULL",
            name="ck_bookings_restriction_anchor",
        ),
    )

    def to_dict(self):
        out = {
            "name": self.name,
            "status": self.status,
            "blocked_by": self.blocked_by,
            "booked_at": self.booked_at.isoformat() if self.booked_at else None,
        }
        for field in LOGISTICS_FIELDS:
            value = getattr(self, field)
            if field in ("arrival_date", "departure_date") and value is not None:
                value = value.isoformat()
            out[field] = value
        return out
