# presensi/db/models/attendance.py
from sqlalchemy import (
    Column, Integer, String, Boolean, Date, DateTime, Float, Text, ForeignKey, Enum, UniqueConstraint,
)
from sqlalchemy.orm import relationship
from presensi.db.base import Base
from presensi.core.clock import utcnow

ATTENDANCE_STATUSES = ("present", "excused", "sick", "absent")


class AttendanceRecord(Base):
    __tablename__ = "attendance_records"
    # One row per user per day: every write is an upsert on this pair
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_attendance_user_date"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False)  # e.g. 2026-10-18
    time_in = Column(DateTime, nullable=True)
    time_out = Column(DateTime, nullable=True)

    # present — hadir, excused — izin, sick — sakit, absent — alfa
    status = Column(Enum(*ATTENDANCE_STATUSES, name="attendance_status"), nullable=False, default="present")
    notes = Column(Text, nullable=True)

    rfid_code = Column(String, nullable=True, index=True)
    device_id = Column(String, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    face_verified = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)

    user = relationship("User", back_populates="attendance_records")
