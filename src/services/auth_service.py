import structlog

from ..api.v1.schemas import LoginRequest, LoginResponse
from ..core.security import TokenService


class AuthService:
    def __init__(self, token_service: TokenService, logger=None):
        self.token_service = token_service
        self.logger = logger or structlog.get_logger(__name__)

    def login(self, request: LoginRequest) -> LoginResponse:
        # Any well-formed username/password pair gets a token.
        token = self.token_service.issue(request.username)
        self.logger.info("Issued token", username=request.username)
        return LoginResponse(token=token)
