import logging
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from ..schemas.users import LoginIn, TokenOut
from ..crud import authenticate_user
from ..auth import issue_token
from ..errors import CredentialsError
from ..models import get_session

logger = logging.getLogger('bloglist')

router = APIRouter()


@router.post('', response_model=TokenOut)
async def login(payload: LoginIn, session: AsyncSession = Depends(get_session)):
    user = await authenticate_user(session, payload.username, payload.password)
    if not user:
        logger.info({'msg': 'login_failed', 'username': payload.username})
        raise CredentialsError()
    return {'token': issue_token(user), 'username': user.username, 'name': user.name}
