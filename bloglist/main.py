import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .routes import router
from .models import init_models
from .middleware import token_extractor, request_logger, register_error_handlers
import logging
from pythonjsonlogger import jsonlogger

# setup structured logging
logger = logging.getLogger('bloglist')
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter('%(asctime)s %(levelname)s %(name)s %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
logger.setLevel(os.getenv('LOG_LEVEL', 'INFO'))

CORS_ORIGINS = [o.strip() for o in os.getenv('CORS_ORIGINS', '*').split(',') if o.strip()]

app = FastAPI(title="Bloglist API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

# registered last runs first: the logger wraps the token extractor
app.middleware('http')(token_extractor)
app.middleware('http')(request_logger)

register_error_handlers(app)

app.include_router(router, prefix="/api")

@app.get('/healthz')
async def healthz():
    return {'status': 'ok'}

@app.on_event("startup")
async def startup():
    # Best-effort init, don't block app from starting if the database is unreachable
    try:
        await init_models()
        logger.info({'msg': 'database_ready'})
    except Exception as e:
        logger.warning({'msg': 'database_init_failed', 'error': str(e)})
