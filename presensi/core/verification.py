# presensi/core/verification.py
import enum
from dataclasses import dataclass
from typing import Optional, Tuple


class VerificationStatus(str, enum.Enum):
    IDLE = "idle"
    VERIFYING = "verifying"
    VERIFIED = "verified"
    FAILED = "failed"


@dataclass(frozen=True)
class SubmissionState:
    """Snapshot of one check-in form at the moment it is submitted."""
    status: str
    notes: Optional[str] = None
    rfid_code: Optional[str] = None
    location: Optional[Tuple[float, float]] = None
    location_status: VerificationStatus = VerificationStatus.IDLE
    face_status: VerificationStatus = VerificationStatus.IDLE

    @property
    def face_verified(self) -> bool:
        return self.face_status == VerificationStatus.VERIFIED


@dataclass(frozen=True)
class GateDecision:
    allowed: bool
    requirement: Optional[str] = None
    message: Optional[str] = None


# Order matters: location is checked before face
_REQUIREMENTS = (
    ("location", "require_location_verification", "location_status",
     "Verifikasi lokasi wajib dilakukan sebelum absen"),
    ("face", "require_face_verification", "face_status",
     "Verifikasi wajah wajib dilakukan sebelum absen"),
)


def evaluate_gate(school_settings, state: SubmissionState) -> GateDecision:
    # require_rfid is only a hint for the form, it is not enforced here
    if school_settings is None:
        return GateDecision(allowed=True)

    for name, flag, status_attr, message in _REQUIREMENTS:
        if getattr(school_settings, flag, False) and \
                getattr(state, status_attr) != VerificationStatus.VERIFIED:
            return GateDecision(allowed=False, requirement=name, message=message)

    return GateDecision(allowed=True)
