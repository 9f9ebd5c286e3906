"""
Request chain: bearer token extraction, user resolution and the
centralized error translator.
"""
import logging
from fastapi import FastAPI, Request, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException
from .auth import verify_token
from .crud import get_user_by_id
from .errors import BloglistError, TokenInvalidError, ValidationError
from .models import get_session

logger = logging.getLogger('bloglist')

BEARER_PREFIX = 'Bearer '


def get_token_from(request: Request):
    authorization = request.headers.get('authorization')
    if authorization and authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):]
    return None


async def token_extractor(request: Request, call_next):
    request.state.token = get_token_from(request)
    return await call_next(request)


async def request_logger(request: Request, call_next):
    logger.info({'msg': 'request_start', 'method': request.method, 'path': request.url.path})
    response = await call_next(request)
    logger.info({'msg': 'request_end', 'status': response.status_code})
    return response


async def resolve_user(request: Request, session: AsyncSession = Depends(get_session)):
    """Resolve the bearer token to a user and attach it to request.state.user.

    Invalid or expired tokens raise; a valid token whose user no longer exists
    leaves request.state.user as None.
    """
    user = None
    token = getattr(request.state, 'token', None)
    if token:
        decoded = verify_token(token)
        if not decoded.get('id'):
            raise TokenInvalidError()
        user = await get_user_by_id(session, decoded['id'])
    request.state.user = user
    return user


async def require_user(user=Depends(resolve_user)):
    """resolve_user for routes that refuse anonymous callers; runs before the body is validated."""
    if not user:
        raise TokenInvalidError()
    return user


def _error(status_code: int, message: str):
    return JSONResponse(status_code=status_code, content={'error': message})


def validation_message(errors) -> str:
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get('loc', ()) if p != 'body']
        field = '.'.join(loc)
        parts.append(f"{field}: {err.get('msg')}" if field else err.get('msg'))
    return 'validation failed: ' + '; '.join(parts)


async def bloglist_error_handler(request: Request, exc: BloglistError):
    return _error(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return await bloglist_error_handler(request, ValidationError(validation_message(exc.errors())))


async def integrity_error_handler(request: Request, exc: IntegrityError):
    if 'username' in str(exc.orig):
        return _error(400, 'expected `username` to be unique')
    return _error(400, 'constraint violated')


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # only raised by the router itself: no route or no method matched
    if exc.status_code in (404, 405):
        return _error(404, 'unknown endpoint')
    return _error(exc.status_code, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error({'msg': 'unhandled_error', 'path': request.url.path, 'error': str(exc)}, exc_info=exc)
    return _error(500, 'internal server error')


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(BloglistError, bloglist_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
