# presensi/db/models/device.py
from sqlalchemy import Column, String, DateTime
from presensi.db.base import Base


class Device(Base):
    __tablename__ = "esp32_devices"

    device_id = Column(String, primary_key=True)
    last_seen = Column(DateTime, nullable=True)
