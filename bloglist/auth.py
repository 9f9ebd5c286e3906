import os
from jose import jwt, JWTError, ExpiredSignatureError
from datetime import datetime, timedelta, timezone
from passlib.context import CryptContext
from .errors import TokenInvalidError, TokenExpiredError

# Prefer SECRET but support JWT_SECRET for compatibility
SECRET = os.getenv('SECRET') or os.getenv('JWT_SECRET', 'devsecret')
ALGORITHM = os.getenv('JWT_ALGORITHM', 'HS256')
TOKEN_EXPIRE_SECONDS = int(os.getenv('TOKEN_EXPIRE_SECONDS', str(60 * 60)))

pwd_ctx = CryptContext(schemes=['bcrypt'], deprecated='auto')

def hash_password(password: str) -> str:
    return pwd_ctx.hash(password)

def verify_password(password: str, hashed: str) -> bool:
    return pwd_ctx.verify(password, hashed)

def issue_token(user, now: datetime = None) -> str:
    """Sign {username, id} for `user`, expiring TOKEN_EXPIRE_SECONDS after `now`."""
    if isinstance(user, dict):
        to_encode = {'username': user['username'], 'id': user['id']}
    else:
        to_encode = {'username': user.username, 'id': user.id}
    issued = now or datetime.now(timezone.utc)
    to_encode.update({'exp': issued + timedelta(seconds=TOKEN_EXPIRE_SECONDS)})
    return jwt.encode(to_encode, SECRET, algorithm=ALGORITHM)

def verify_token(token: str) -> dict:
    try:
        payload = jwt.decode(token, SECRET, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        raise TokenExpiredError()
    except JWTError:
        raise TokenInvalidError()
    return {'username': payload.get('username'), 'id': payload.get('id')}

def bearer(token: str) -> str:
    return f'Bearer {token}'
