from models.db import db

class EventRoom(db.Model):
    __tablename__ = "event_rooms"

    id = db.Column(db.Integer, primary_key=True)
    event_id = db.Column(db.Integer, db.ForeignKey("events.id"), nullable=False, index=True)

    room_name = db.Column(db.String(80), nullable=False)
    floor = db.Column(db.String(20), nullable=True)
    beds_count = db.Column(db.Integer, nullable=False, default=1)
    has_private_bath = db.Column(db.Boolean, default=False, nullable=False)
    is_accessible = db.Column(db.Boolean, default=False, nullable=False)
    notes = db.Column(db.String(255), nullable=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    event = db.relationship("Event", back_populates="rooms")

    @property
    def bed_ids(self):
        return [f"room{self.sort_order}-bed{n}" for n in range(1, self.beds_count + 1)]
