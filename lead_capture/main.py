import uvicorn
from fastapi import FastAPI
from lead_capture.api.routes import router
from lead_capture.core.config import settings
from lead_capture.core.logging import configure_logging

app = FastAPI(title=settings.app_name)
app.include_router(router, prefix=settings.api_prefix)


@app.on_event("startup")
async def _startup():
    configure_logging(settings.log_level)


if __name__ == "__main__":
    uvicorn.run("lead_capture.main:app", host="0.0.0.0", port=8080, reload=False)
