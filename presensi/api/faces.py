# presensi/api/faces.py
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from presensi.api.deps import get_db, get_current_user
from presensi.core.exceptions import FaceServiceError, FaceServiceNotConfigured
from presensi.core.face_matcher import FaceComparator, get_face_comparator
from presensi.crud.face import get_active_face_reference, register_face_reference
from presensi.db.models.user import User
from presensi.schemas.face import FaceReferenceOut, FaceRegisterIn, FaceVerifyIn, FaceVerifyOut

router = APIRouter()
logger = logging.getLogger(__name__)

FACE_NOT_REGISTERED = (
    "Foto wajah belum terdaftar. Silakan daftarkan foto wajah terlebih dahulu."
)
NOT_CONFIGURED = "AI verification service not configured"


@router.post("/verify-face", response_model=FaceVerifyOut, response_model_exclude_none=True)
async def verify_face(
    payload: FaceVerifyIn,
    db: Session = Depends(get_db),
    comparator: FaceComparator = Depends(get_face_comparator),
):
    missing = [
        name for name in ("user_id", "captured_image_base64")
        if getattr(payload, name) in (None, "")
    ]
    if missing:
        return JSONResponse(
            status_code=400,
            content={"error": f"Missing required fields: {', '.join(missing)}", "missing": missing},
        )

    logger.info(f"🔍 [FACE] Verification request for user_id={payload.user_id}")

    user_id = str(payload.user_id).strip()
    reference = get_active_face_reference(db, int(user_id)) if user_id.isascii() and user_id.isdigit() else None
    if not reference:
        return {"verified": False, "message": FACE_NOT_REGISTERED}

    if not comparator.configured:
        logger.error("❌ [FACE] AI_API_KEY not configured")
        return JSONResponse(status_code=500, content={"verified": False, "message": NOT_CONFIGURED})

    try:
        verdict = await comparator.compare(
            reference.face_image_reference, payload.captured_image_base64
        )
    except FaceServiceNotConfigured:
        return JSONResponse(status_code=500, content={"verified": False, "message": NOT_CONFIGURED})
    except FaceServiceError as e:
        return JSONResponse(
            status_code=500,
            content={"verified": False, "message": "AI verification service error", "details": str(e)},
        )

    if verdict.verified:
        return {"verified": True, "message": "Verifikasi wajah berhasil", "confidence": "high"}
    return {
        "verified": False,
        "message": "Wajah tidak cocok dengan data yang terdaftar",
        "confidence": "low",
    }


@router.post("/faces/register", response_model=FaceReferenceOut)
def register_face(
    payload: FaceRegisterIn,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    reference = register_face_reference(db, current_user.id, payload.face_image_reference)
    logger.info(f"✅ [FACE] Reference registered for user_id={current_user.id}")
    return reference
