import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from presensi.api.deps import get_db, get_current_user
from presensi.core.clock import today, utcnow
from presensi.core.geofence import check_geofence, failed_geolocation
from presensi.core.verification import SubmissionState, VerificationStatus, evaluate_gate
from presensi.crud import attendance as crud_attendance
from presensi.crud.school_settings import get_school_settings
from presensi.db.models.user import User
from presensi.schemas.attendance import (
    AttendanceOut,
    CheckInRequest,
    LocationCheckOut,
    LocationCheckRequest,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def build_submission_state(payload: CheckInRequest, school_settings) -> SubmissionState:
    location = None
    location_status = VerificationStatus.IDLE

    if payload.location_error:
        location_status = failed_geolocation(payload.location_error).status
    elif payload.latitude is not None and payload.longitude is not None:
        location = (payload.latitude, payload.longitude)
        location_status = check_geofence(payload.latitude, payload.longitude, school_settings).status

    return SubmissionState(
        status=payload.status,
        notes=payload.notes,
        rfid_code=payload.rfid_code,
        location=location,
        location_status=location_status,
        face_status=VerificationStatus.VERIFIED if payload.face_verified else VerificationStatus.IDLE,
    )


@router.post("/location-check", response_model=LocationCheckOut)
def location_check(
    payload: LocationCheckRequest,
    db: Session = Depends(get_db),
):
    result = check_geofence(payload.latitude, payload.longitude, get_school_settings(db))
    return {
        "status": result.status.value,
        "verified": result.verified,
        "distance_m": result.distance_m,
        "radius_m": result.radius_m,
        "message": result.message,
    }


@router.post("/check-in", response_model=AttendanceOut)
def check_in(
    payload: CheckInRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    school_settings = get_school_settings(db)
    state = build_submission_state(payload, school_settings)

    decision = evaluate_gate(school_settings, state)
    if not decision.allowed:
        logger.info(f"⛔ [ABSENSI] user_id={current_user.id} rejected: {decision.requirement}")
        raise HTTPException(status_code=400, detail=decision.message)

    try:
        record = crud_attendance.upsert_attendance(
            db, current_user.id, today(), state, time_in=utcnow()
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(f"🔥 [ABSENSI] Upsert failed for user_id={current_user.id}")
        raise HTTPException(status_code=500, detail=f"Absensi gagal: {e}")

    logger.info(f"✅ [ABSENSI] user_id={current_user.id} status={state.status}")
    return record


@router.post("/check-out", response_model=AttendanceOut)
def check_out(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    record = crud_attendance.get_record_for_day(db, current_user.id, today())
    if not record:
        raise HTTPException(status_code=404, detail="Belum absen masuk hari ini")
    return crud_attendance.set_time_out(db, record, utcnow())


@router.get("/today", response_model=Optional[AttendanceOut])
def today_record(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return crud_attendance.get_record_for_day(db, current_user.id, today())


@router.get("/records", response_model=List[AttendanceOut])
def my_records(
    limit: int = Query(30, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return crud_attendance.get_user_records(db, current_user.id, limit=limit)
