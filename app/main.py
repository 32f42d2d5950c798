import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.todos.routes import router as todo_router
from app.api.labels.routes import router as label_router
from app.config import settings
from app.core.exceptions import TodoAppError
from app.core.logging_config import setup_logging
from app.db.session import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    init_db()
    yield

app = FastAPI(title="Todo API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["Content-Type"],
)

# Routers
app.include_router(todo_router, prefix="/todos", tags=["Todos"])
app.include_router(label_router, prefix="/labels", tags=["Labels"])


@app.exception_handler(TodoAppError)
async def todo_app_error_handler(request: Request, exc: TodoAppError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.get("/")
def root():
    return {"message": "Todo API", "endpoints": ["/todos", "/labels"]}

@app.get("/ping")
def ping():
    return {"message": "pong"}
