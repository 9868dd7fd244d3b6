# main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swatch_api.config import Config, setup_logging
from swatch_api.routes import swatches

setup_logging()

app = FastAPI(
    title="Swatch API",
    description="Renders color swatches as SVG images from query parameters",
    version="1.0.0",
)

# --- CORS: swatches are embedded from other origins ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(swatches.router)


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "swatch_api.main:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=Config.DEBUG,
        log_level=Config.LOG_LEVEL.lower(),
    )
