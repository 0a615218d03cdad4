from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from presensi.api.deps import get_db, get_current_user
from presensi.schemas.user import UserCreate, UserLogin, Token, UserOut
from presensi.crud import user as crud_user
from presensi.core.security import create_access_token

router = APIRouter()


@router.post("/register", response_model=Token)
def register(user_in: UserCreate, db: Session = Depends(get_db)):
    if crud_user.get_user_by_email(db, user_in.email):
        raise HTTPException(status_code=400, detail="Email sudah terdaftar")

    user = crud_user.create_user(
        db, user_in.email, user_in.password, user_in.full_name, role=user_in.role
    )
    return {"access_token": create_access_token(user.email, user.role), "token_type": "bearer"}


@router.post("/login", response_model=Token)
def login(form: UserLogin, db: Session = Depends(get_db)):
    user = crud_user.authenticate(db, form.email, form.password)
    if not user:
        raise HTTPException(status_code=401, detail="Email atau password salah")
    return {"access_token": create_access_token(user.email, user.role), "token_type": "bearer"}


@router.get("/me", response_model=UserOut)
def me(current_user=Depends(get_current_user)):
    return current_user
