from sqlalchemy import select
from sqlalchemy.orm import selectinload
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from .models.users import User
from .models.blogs import Blog
from .auth import hash_password, verify_password

# blogs

async def list_blogs(session: AsyncSession):
    q = await session.execute(select(Blog).options(selectinload(Blog.user)).order_by(Blog.id))
    return q.scalars().all()

async def get_blog(session: AsyncSession, blog_id: int):
    q = await session.execute(
        select(Blog)
        .where(Blog.id == blog_id)
        .options(selectinload(Blog.user))
        .execution_options(populate_existing=True)
    )
    return q.scalars().first()

async def create_blog(session: AsyncSession, user: User, payload):
    # the owner's blog list is the relationship over user_id, so one insert covers both sides
    blog = Blog(
        title=payload.title,
        author=payload.author,
        url=payload.url,
        likes=payload.likes,
        user_id=user.id,
    )
    session.add(blog)
    await session.commit()
    return await get_blog(session, blog.id)

async def update_blog(session: AsyncSession, blog: Blog, changes: dict):
    for field in ('title', 'author', 'url', 'likes'):
        if changes.get(field) is not None:
            setattr(blog, field, changes[field])
    session.add(blog)
    await session.commit()
    return await get_blog(session, blog.id)

async def delete_blog(session: AsyncSession, blog: Blog):
    await session.delete(blog)
    await session.commit()

# users

async def create_user(session: AsyncSession, payload):
    user = User(
        username=payload.username,
        name=payload.name,
        password_hash=hash_password(payload.password),
    )
    session.add(user)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()
        raise
    return await get_user_by_id(session, user.id)

async def list_users(session: AsyncSession):
    q = await session.execute(select(User).options(selectinload(User.blogs)).order_by(User.id))
    return q.scalars().all()

async def get_user_by_id(session: AsyncSession, user_id: int):
    q = await session.execute(
        select(User)
        .where(User.id == user_id)
        .options(selectinload(User.blogs))
        .execution_options(populate_existing=True)
    )
    return q.scalars().first()

async def get_user_by_username(session: AsyncSession, username: str):
    q = await session.execute(select(User).where(User.username == username))
    return q.scalars().first()

async def authenticate_user(session: AsyncSession, username: str, password: str):
    user = await get_user_by_username(session, username)
    if not user or not verify_password(password, user.password_hash):
        return None
    return user
