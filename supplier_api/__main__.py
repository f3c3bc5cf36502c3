"""Run the API with uvicorn: ``python -m supplier_api``."""

import uvicorn

from supplier_api.core.config import settings


def main() -> None:
    uvicorn.run(
        "supplier_api.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
