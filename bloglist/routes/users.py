from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from ..schemas.users import RegisterIn, UserOut
from ..crud import create_user, list_users
from ..models import get_session

router = APIRouter()


@router.post('', response_model=UserOut, status_code=201)
async def register(payload: RegisterIn, session: AsyncSession = Depends(get_session)):
    return await create_user(session, payload)


@router.get('', response_model=List[UserOut])
async def all_users(session: AsyncSession = Depends(get_session)):
    return await list_users(session)
