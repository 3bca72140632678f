from datetime import datetime
from models.db import db

class Event(db.Model):
    __tablename__ = "events"

    id = db.Column(db.Integer, primary_key=True)
    slug = db.Column(db.String(60), unique=True, nullable=False, index=True)
    name = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text, nullable=True)

    start_date = db.Column(db.Date, nullable=True)
    end_date = db.Column(db.Date, nullable=True)

    location_name = db.Column(db.String(160), nullable=True)
    location_address = db.Column(db.String(255), nullable=True)
    location_url = db.Column(db.String(255), nullable=True)

    # "HH:MM" as shown to attendees
    check_in_time = db.Column(db.String(5), nullable=True)
    check_out_time = db.Column(db.String(5), nullable=True)

    is_active = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    rooms = db.relationship("EventRoom", back_populates="event", order_by="EventRoom.sort_order")
