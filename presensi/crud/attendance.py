# presensi/crud/attendance.py
from datetime import date, datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from presensi.core.verification import SubmissionState
from presensi.db.models.attendance import AttendanceRecord
from presensi.db.models.user import User
from presensi.db.upsert import upsert_insert


def upsert_attendance(
    db: Session,
    user_id: int,
    day: date,
    state: SubmissionState,
    time_in: datetime,
) -> AttendanceRecord:
    """
    Inserts or overwrites the (user_id, date) row in a single statement.
    The unique constraint does the arbitration, there is no read before the write.
    """
    latitude, longitude = state.location if state.location else (None, None)
    values = {
        "time_in": time_in,
        "status": state.status,
        "notes": state.notes or None,
        "rfid_code": state.rfid_code or None,
        "latitude": latitude,
        "longitude": longitude,
        "face_verified": state.face_verified,
    }

    stmt = upsert_insert(db, AttendanceRecord).values(
        user_id=user_id, date=day, created_at=time_in, **values
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[AttendanceRecord.user_id, AttendanceRecord.date],
        set_=values,
    )
    db.execute(stmt)
    db.commit()

    return get_record_for_day(db, user_id, day)


def get_record_for_day(db: Session, user_id: int, day: date) -> Optional[AttendanceRecord]:
    return db.query(AttendanceRecord).filter(
        AttendanceRecord.user_id == user_id,
        AttendanceRecord.date == day
    ).populate_existing().first()


def find_user_id_by_rfid(db: Session, rfid_code: str) -> Optional[int]:
    # RFID codes are not registered anywhere: whoever used the code last owns it
    row = (
        db.query(AttendanceRecord.user_id)
        .filter(AttendanceRecord.rfid_code == rfid_code)
        .order_by(AttendanceRecord.created_at.desc(), AttendanceRecord.id.desc())
        .first()
    )
    return row[0] if row else None


def create_device_record(
    db: Session,
    user_id: int,
    day: date,
    rfid_code: str,
    device_id: str,
    time_in: datetime,
) -> AttendanceRecord:
    record = AttendanceRecord(
        user_id=user_id,
        date=day,
        time_in=time_in,
        status="present",
        rfid_code=rfid_code,
        device_id=device_id,
        face_verified=False,
        created_at=time_in,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def set_time_out(db: Session, record: AttendanceRecord, time_out: datetime) -> AttendanceRecord:
    record.time_out = time_out
    db.commit()
    db.refresh(record)
    return record


def get_user_records(db: Session, user_id: int, limit: int = 30):
    return (
        db.query(AttendanceRecord)
        .filter(AttendanceRecord.user_id == user_id)
        .order_by(AttendanceRecord.date.desc())
        .limit(limit)
        .all()
    )


def get_daily_summary(db: Session, day: date) -> dict:
    rows = (
        db.query(AttendanceRecord.status, func.count(AttendanceRecord.id))
        .filter(AttendanceRecord.date == day)
        .group_by(AttendanceRecord.status)
        .all()
    )
    by_status = {status: 0 for status in ("present", "excused", "sick", "absent")}
    by_status.update({status: count for status, count in rows})

    total = db.query(func.count(User.id)).scalar() or 0
    present = by_status["present"]
    # Halves round up: 1 of 8 present is 13%
    rate = (present * 200 + total) // (2 * total) if total > 0 else 0

    return {
        "date": day,
        "today_present": present,
        "today_absent": total - present,
        "total_users": total,
        "attendance_rate": rate,
        "by_status": by_status,
    }
