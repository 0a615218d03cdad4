from presensi.db.base import Base
from presensi.db.models.user import User
from presensi.db.models.attendance import AttendanceRecord
from presensi.db.models.school_settings import SchoolSettings
from presensi.db.models.device import Device
from presensi.db.models.face_reference import StoredFaceReference

__all__ = ["Base", "User", "AttendanceRecord", "SchoolSettings", "Device", "StoredFaceReference"]
