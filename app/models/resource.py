from sqlalchemy import Column, Integer, String, Text, DateTime, Float, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base
import enum


class ResourceStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Resource(Base):
    __tablename__ = "resources"

    id = Column(Integer, primary_key=True, index=True)

    # Basic Information
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text)
    category_id = Column(Integer, ForeignKey("categories.id"), index=True)

    # Location
    address = Column(String(500), nullable=False)
    latitude = Column(Float)
    longitude = Column(Float)

    # Contact
    phone = Column(String(50))
    email = Column(String(255))
    website = Column(String(1000))
    operating_hours = Column(String(255))

    # Capacity
    capacity = Column(Integer)
    current_availability = Column(Integer)

    status = Column(String(20), default=ResourceStatus.ACTIVE.value, index=True)

    # Metadata
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    category = relationship("Category", back_populates="resources")

    def __repr__(self):
        return f"<Resource {self.name} ({self.status})>"
