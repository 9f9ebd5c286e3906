"""Seed data and store snapshots for the API tests."""
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from bloglist.auth import hash_password, issue_token, bearer
from bloglist.models.blogs import Blog
from bloglist.models.users import User
from bloglist.schemas.blogs import BlogOut
from bloglist.schemas.users import UserOut

INITIAL_BLOGS = [
    {
        'title': 'React patterns',
        'author': 'Michael Chan',
        'url': 'https://reactpatterns.com/',
        'likes': 7,
    },
    {
        'title': 'Go To Statement Considered Harmful',
        'author': 'Edsger W. Dijkstra',
        'url': 'http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html',
        'likes': 5,
    },
]

INITIAL_USERS = [
    {'username': 'root', 'name': None, 'password': 'sekret'},
    {'username': 'aaa', 'name': 'AAA', 'password': 'aaa'},
]


async def initialize_db(factory):
    async with factory() as session:
        users = [
            User(username=u['username'], name=u['name'], password_hash=hash_password(u['password']))
            for u in INITIAL_USERS
        ]
        session.add_all(users)
        await session.flush()
        # one blog per user so that every blog has a foreign owner available
        for blog, owner in zip(INITIAL_BLOGS, users):
            session.add(Blog(**blog, user_id=owner.id))
        await session.commit()


async def blogs_in_db(factory):
    async with factory() as session:
        q = await session.execute(select(Blog).options(selectinload(Blog.user)).order_by(Blog.id))
        return [BlogOut.model_validate(b).model_dump(mode='json') for b in q.scalars().all()]


async def users_in_db(factory):
    async with factory() as session:
        q = await session.execute(select(User).options(selectinload(User.blogs)).order_by(User.id))
        return [UserOut.model_validate(u).model_dump(mode='json') for u in q.scalars().all()]


async def find_user(factory, user_id):
    users = await users_in_db(factory)
    return next(u for u in users if str(u['id']) == str(user_id))


async def non_existing_id(factory):
    async with factory() as session:
        blog = Blog(title='will remove this soon', author='noname', url='https://delete.it/', likes=0)
        session.add(blog)
        await session.commit()
        blog_id = blog.id
        await session.delete(blog)
        await session.commit()
    return str(blog_id)


def auth_header(user, **kwargs):
    return {'Authorization': bearer(issue_token(user, **kwargs))}
