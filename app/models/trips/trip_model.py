from sqlalchemy import Column, String, Boolean, DateTime, Uuid, func
from app.core.database import Base
from sqlalchemy.orm import relationship
import uuid


class Trip(Base):
    __tablename__ = "trips"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    destination = Column(String(90), nullable=False)
    starts_at = Column(DateTime(timezone=True), nullable=False)
    ends_at = Column(DateTime(timezone=True), nullable=False)
    is_confirmed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    participants = relationship(
        "Participant",
        back_populates="trip",
        cascade="all, delete",
    )
    activities = relationship(
        "Activity",
        back_populates="trip",
        cascade="all, delete",
        order_by="Activity.occurs_at",
    )
    links = relationship("Link", back_populates="trip", cascade="all, delete")

    def to_dict(self):
        """Projection returned by the trip details endpoint"""
        return {
            "id": self.id,
            "destination": self.destination,
            "starts_at": self.starts_at,
            "ends_at": self.ends_at,
            "is_confirmed": self.is_confirmed,
        }
