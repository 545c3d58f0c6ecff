from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import listings_router, valuation_router
from config import ACTIVE_CONFIG
from scraper.utils.log import get_logger, setup_logging

setup_logging()
logger = get_logger("api")

app = FastAPI(
    title=ACTIVE_CONFIG.API["TITLE"],
    description=ACTIVE_CONFIG.API["DESCRIPTION"],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ACTIVE_CONFIG.API["CORS_ORIGINS"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Fehler immer als {error: ...} mit 400, wie im restlichen Vertrag
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.get("/")
def root():
    return {"status": "ImmoYield API running"}


app.include_router(listings_router)
app.include_router(valuation_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=ACTIVE_CONFIG.API["HOST"],
        port=ACTIVE_CONFIG.API["PORT"],
        reload=ACTIVE_CONFIG.API["RELOAD"],
    )
