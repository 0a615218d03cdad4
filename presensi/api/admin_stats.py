from fastapi import APIRouter, Depends, Query
from datetime import date
from typing import Optional
from sqlalchemy.orm import Session

from presensi.api.deps import get_db, get_current_user
from presensi.core.clock import today
from presensi.crud.attendance import get_daily_summary
from presensi.schemas.attendance import DailySummary

router = APIRouter()


@router.get("/dashboard", response_model=DailySummary)
def dashboard(
    day: Optional[date] = Query(None, description="Tanggal, default hari ini"),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user)
):
    return get_daily_summary(db, day or today())
