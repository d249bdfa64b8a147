from .trips.trip_model import Trip
from .trips.participant import Participant
from .activity.activity import Activity
from .link.link import Link
