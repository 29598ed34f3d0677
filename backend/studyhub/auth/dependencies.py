import logging
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from studyhub.core.security import InvalidToken, owner_id_from_token

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)  # читает заголовок Authorization: Bearer <token>


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> UUID:
    """
    Возвращает user_id (claim "sub") из токена внешнего identity-провайдера.
    """
    try:
        if credentials is None:
            raise InvalidToken("missing bearer token")
        return owner_id_from_token(credentials.credentials)
    except InvalidToken as exc:
        logger.debug("rejected token: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
