# presensi/db/models/school_settings.py
from sqlalchemy import Column, Integer, Float, Boolean
from presensi.db.base import Base


class SchoolSettings(Base):
    """Singleton row (id=1) with the geofence and the required checks."""
    __tablename__ = "school_settings"

    id = Column(Integer, primary_key=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    radius_meters = Column(Float, nullable=True, default=100)

    require_location_verification = Column(Boolean, nullable=False, default=False)
    require_face_verification = Column(Boolean, nullable=False, default=False)
    require_rfid = Column(Boolean, nullable=False, default=False)
