from fastapi import APIRouter
from .blogs import router as blogs_router
from .users import router as users_router
from .login import router as login_router

router = APIRouter()
router.include_router(blogs_router, prefix='/blogs', tags=['blogs'])
router.include_router(users_router, prefix='/users', tags=['users'])
router.include_router(login_router, prefix='/login', tags=['login'])
