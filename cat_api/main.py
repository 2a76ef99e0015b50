# cat_api/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from cat_api.api import auth, cats, adopt
from cat_api.core.config import settings
from cat_api.core.errors import register_error_handlers
from cat_api.database import init_db


@asynccontextmanager
async def lifespan(_: FastAPI):
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_db()
    yield


app = FastAPI(title="Cat Adoption Gallery", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(auth.router)
app.include_router(cats.router)
app.include_router(adopt.router)


@app.get("/")
def root():
    return {"message": "Server is running"}
