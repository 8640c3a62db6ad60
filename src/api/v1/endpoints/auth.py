from fastapi import APIRouter, Depends

from ...dependencies import get_auth_service
from ....services.auth_service import AuthService
from ..schemas import LoginRequest, LoginResponse

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    return auth_service.login(request)
