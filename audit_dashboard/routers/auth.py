"""Access-gate endpoints: login, token verification, admin management."""


from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from audit_dashboard.core.response import MessageResponse
from audit_dashboard.routers.deps import get_auth_service, get_current_user
from audit_dashboard.schemas.auth import (
    CreateAdminRequest,
    LoginRequest,
    LoginResponse,
    UpdatePasswordRequest,
    UserOut,
    VerifyResponse,
)
from audit_dashboard.services.auth import AuthService, Principal

router = APIRouter(prefix="/auth", tags=["Auth"])


class CreateAdminResponse(BaseModel):
    message: str
    user: UserOut


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, svc: AuthService = Depends(get_auth_service)):
    token, user = await svc.login(body.email, body.password)
    return LoginResponse(token=token, user=UserOut.model_validate(user))


@router.get("/verify", response_model=VerifyResponse)
async def verify(user: Principal = Depends(get_current_user)):
    return VerifyResponse(user=UserOut(id=user.id, email=user.email, role=user.role))


@router.post("/logout", response_model=MessageResponse)
async def logout():
    """Tokens are stateless; the client discards its copy."""
    return {"message": "Logout successful"}


@router.post("/create-admin", response_model=CreateAdminResponse, status_code=status.HTTP_201_CREATED)
async def create_admin(
    body: CreateAdminRequest,
    _: Principal = Depends(get_current_user),
    svc: AuthService = Depends(get_auth_service),
):
    user = await svc.create_admin(body.email, body.password)
    return {"message": "Admin user created successfully", "user": UserOut.model_validate(user)}


@router.put("/update-password", response_model=MessageResponse)
async def update_password(
    body: UpdatePasswordRequest,
    user: Principal = Depends(get_current_user),
    svc: AuthService = Depends(get_auth_service),
):
    await svc.update_password(user.id, body.current_password, body.new_password)
    return {"message": "Password updated successfully"}
