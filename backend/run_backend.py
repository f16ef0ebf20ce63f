"""
Start the receipt points API with uvicorn.

Host and port come from HOST / PORT (see receipt_points/core/config.py).

Usage:
    python run_backend.py
"""
import uvicorn

from receipt_points.core.config import settings


def main():
    print(f"Starting server: http://{settings.HOST}:{settings.PORT}")
    print(f"API docs: http://{settings.HOST}:{settings.PORT}/docs")
    uvicorn.run(
        "receipt_points.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
