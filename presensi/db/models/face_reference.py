# presensi/db/models/face_reference.py
from sqlalchemy import Column, Integer, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from presensi.db.base import Base
from presensi.core.clock import utcnow


class StoredFaceReference(Base):
    __tablename__ = "student_faces"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # URL or data URI, passed through to the vision model as-is
    face_image_reference = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    user = relationship("User", back_populates="face_references")
