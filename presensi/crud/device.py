# presensi/crud/device.py
from datetime import datetime

from sqlalchemy.orm import Session

from presensi.db.models.device import Device
from presensi.db.upsert import upsert_insert


def touch_device(db: Session, device_id: str, seen_at: datetime) -> None:
    stmt = upsert_insert(db, Device).values(device_id=device_id, last_seen=seen_at)
    stmt = stmt.on_conflict_do_update(
        index_elements=[Device.device_id],
        set_={"last_seen": seen_at},
    )
    db.execute(stmt)
    db.commit()


def get_device(db: Session, device_id: str):
    return db.query(Device).filter(Device.device_id == device_id).first()
