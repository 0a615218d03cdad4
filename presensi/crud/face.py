# presensi/crud/face.py
from sqlalchemy.orm import Session

from presensi.db.models.face_reference import StoredFaceReference


def get_active_face_reference(db: Session, user_id: int):
    return (
        db.query(StoredFaceReference)
        .filter(
            StoredFaceReference.user_id == user_id,
            StoredFaceReference.is_active.is_(True)
        )
        .order_by(StoredFaceReference.id.desc())
        .first()
    )


def register_face_reference(db: Session, user_id: int, face_image_reference: str):
    # Only the newest reference stays active
    db.query(StoredFaceReference).filter(
        StoredFaceReference.user_id == user_id,
        StoredFaceReference.is_active.is_(True)
    ).update({"is_active": False}, synchronize_session=False)

    reference = StoredFaceReference(
        user_id=user_id,
        face_image_reference=face_image_reference,
        is_active=True,
    )
    db.add(reference)
    db.commit()
    db.refresh(reference)
    return reference
