# presensi/api/devices.py
import logging

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from presensi.api.deps import get_db
from presensi.core.clock import today, utcnow
from presensi.crud import attendance as crud_attendance
from presensi.crud.device import touch_device
from presensi.schemas.attendance import AttendanceOut
from presensi.schemas.device import DeviceScanIn

router = APIRouter()
logger = logging.getLogger(__name__)

RFID_NOT_REGISTERED = (
    "RFID tidak terdaftar. Silakan daftarkan kartu RFID terlebih dahulu melalui aplikasi."
)


@router.post("/esp32-attendance")
def device_ingest(payload: DeviceScanIn, db: Session = Depends(get_db)):
    logger.info(
        f"📥 [ESP32] Scan: rfid_code={payload.rfid_code}, "
        f"device_id={payload.device_id}, timestamp={payload.timestamp}"
    )

    missing = [name for name in ("rfid_code", "device_id") if not getattr(payload, name)]
    if missing:
        return JSONResponse(
            status_code=400,
            content={
                "error": f"Missing required fields: {', '.join(missing)}",
                "missing": missing,
            },
        )

    now = utcnow()

    # Bookkeeping only, never fails the scan
    try:
        touch_device(db, payload.device_id, now)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ [ESP32] Device update error for {payload.device_id}: {e}")

    try:
        user_id = crud_attendance.find_user_id_by_rfid(db, payload.rfid_code)
        if user_id is None:
            return JSONResponse(
                status_code=404,
                content={"success": False, "message": RFID_NOT_REGISTERED},
            )

        day = today()
        existing = crud_attendance.get_record_for_day(db, user_id, day)
        if existing:
            return {
                "success": False,
                "message": "Sudah absen hari ini",
                "time_in": existing.time_in,
            }

        try:
            record = crud_attendance.create_device_record(
                db,
                user_id=user_id,
                day=day,
                rfid_code=payload.rfid_code,
                device_id=payload.device_id,
                time_in=now,
            )
        except IntegrityError:
            # A concurrent scan won the (user_id, date) constraint
            db.rollback()
            existing = crud_attendance.get_record_for_day(db, user_id, day)
            return {
                "success": False,
                "message": "Sudah absen hari ini",
                "time_in": existing.time_in if existing else None,
            }
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("🔥 [ESP32] Database error")
        return JSONResponse(
            status_code=500,
            content={"error": "Database error", "details": str(e)},
        )

    logger.info(f"✅ [ESP32] Attendance recorded: user_id={user_id}, record_id={record.id}")
    return {
        "success": True,
        "message": "Absensi berhasil dicatat",
        "attendance": jsonable_encoder(AttendanceOut.model_validate(record)),
    }
