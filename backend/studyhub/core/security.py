from uuid import UUID

from jose import jwt, JWTError

from studyhub.core.config import settings


class InvalidToken(Exception):
    pass


def owner_id_from_token(token: str) -> UUID:
    """
    Проверяет подпись и срок токена identity-провайдера и достаёт владельца из "sub".
    Сами токены мы не выпускаем.
    """
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as exc:
        raise InvalidToken(str(exc)) from exc

    sub = claims.get("sub")
    if not sub:
        raise InvalidToken("token has no subject")

    try:
        return UUID(str(sub))
    except ValueError as exc:
        raise InvalidToken(f"subject {sub!r} is not a UUID") from exc
