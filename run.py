import uvicorn

from app.config import settings
from app.core.logging_config import setup_logging

# Determine environment: "prod" or "local"
ENV = settings.ENV.lower()

HOST = settings.HOST
PORT = settings.PORT
RELOAD = True  # Enable live reload in local development

# Production config
if ENV == "prod":
    HOST = "0.0.0.0"
    RELOAD = False  # Disable reload in production

# Start the FastAPI app
if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    uvicorn.run("app.main:app", host=HOST, port=PORT, reload=RELOAD)
