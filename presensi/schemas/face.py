from pydantic import BaseModel
from typing import Literal, Optional, Union


class FaceVerifyIn(BaseModel):
    # Devices and web clients send the id as a string
    user_id: Optional[Union[int, str]] = None
    captured_image_base64: Optional[str] = None

class FaceVerifyOut(BaseModel):
    verified: bool
    message: str
    confidence: Optional[Literal["high", "low"]] = None

class FaceRegisterIn(BaseModel):
    face_image_reference: str

class FaceReferenceOut(BaseModel):
    id: int
    user_id: int
    is_active: bool

    class Config:
        from_attributes = True
