from .db import db
from .audit_log import AuditLog
from .event import Event
from .event_room import EventRoom
from .bed_slot import BedSlot, BedStatus, Restriction
from .waitlist_entry import WaitlistEntry
