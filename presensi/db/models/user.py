
from sqlalchemy import Column, Integer, String, Enum, DateTime
from sqlalchemy.orm import relationship
from presensi.db.base import Base
from presensi.core.clock import utcnow

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(Enum("student", "teacher", "admin", name="user_role"), nullable=False, default="student")
    full_name = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    attendance_records = relationship("AttendanceRecord", back_populates="user")
    face_references = relationship("StoredFaceReference", back_populates="user")
