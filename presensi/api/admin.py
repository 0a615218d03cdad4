# presensi/api/admin.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from presensi.api.deps import get_db, require_admin
from presensi.crud.school_settings import get_school_settings, update_school_settings
from presensi.crud.user import list_users
from presensi.db.models.user import User
from presensi.schemas.school_settings import SchoolSettingsOut, SchoolSettingsUpdate
from presensi.schemas.user import UserOut

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/users", response_model=List[UserOut])
def get_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    return list_users(db)


@router.put("/settings", response_model=SchoolSettingsOut)
def put_school_settings(
    data: SchoolSettingsUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    changes = data.model_dump(exclude_unset=True)
    current = get_school_settings(db)
    lat = changes.get("latitude", current.latitude if current else None)
    lng = changes.get("longitude", current.longitude if current else None)
    if (lat is None) != (lng is None):
        raise HTTPException(status_code=400, detail="Latitude dan longitude harus diisi bersama")

    school_settings = update_school_settings(db, changes)
    logger.info(f"⚙️ [ADMIN] School settings updated by user_id={current_user.id}: {changes}")
    return school_settings
