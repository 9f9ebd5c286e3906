from fastapi import APIRouter, Body, Depends, Request, Response
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from ..schemas.blogs import BlogIn, BlogUpdate, BlogOut
from ..crud import list_blogs, get_blog, create_blog, update_blog, delete_blog
from ..errors import CastError, NotFoundError, TokenInvalidError, ValidationError
from ..middleware import resolve_user, require_user, validation_message
from ..models import get_session

router = APIRouter()

# ids are INTEGER columns, int4 on postgres
MAX_ID = 2**31 - 1


def parse_id(raw: str) -> int:
    try:
        blog_id = int(raw)
    except ValueError:
        raise CastError()
    if blog_id < 1 or blog_id > MAX_ID or str(blog_id) != raw:
        raise CastError()
    return blog_id


async def find_blog_or_404(session: AsyncSession, raw_id: str):
    blog = await get_blog(session, parse_id(raw_id))
    if not blog:
        raise NotFoundError('blog not found')
    return blog


def check_owner(user, blog):
    if not user or blog.user_id is None or str(user.id) != str(blog.user_id):
        raise TokenInvalidError()


@router.get('', response_model=List[BlogOut])
async def all_blogs(session: AsyncSession = Depends(get_session)):
    return await list_blogs(session)


@router.get('/{blog_id}', response_model=BlogOut)
async def one_blog(blog_id: str, session: AsyncSession = Depends(get_session)):
    return await find_blog_or_404(session, blog_id)


@router.post('', response_model=BlogOut, status_code=201)
async def create(payload: BlogIn, session: AsyncSession = Depends(get_session), user=Depends(require_user)):
    return await create_blog(session, user, payload)


@router.put('/{blog_id}', response_model=BlogOut)
async def update(blog_id: str, request: Request, payload: dict = Body(...), session: AsyncSession = Depends(get_session)):
    # lookup, then ownership, then the new field values
    blog = await find_blog_or_404(session, blog_id)
    user = await resolve_user(request, session)
    check_owner(user, blog)
    try:
        changes = BlogUpdate.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(validation_message(e.errors()))
    return await update_blog(session, blog, changes.model_dump(exclude_unset=True))


@router.delete('/{blog_id}', status_code=204)
async def delete(blog_id: str, request: Request, session: AsyncSession = Depends(get_session)):
    blog = await find_blog_or_404(session, blog_id)
    user = await resolve_user(request, session)
    check_owner(user, blog)
    await delete_blog(session, blog)
    return Response(status_code=204)
