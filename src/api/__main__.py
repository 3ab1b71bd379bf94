"""Entry point for running the API server as a module.

Allows running with: python -m src.api
"""

import os

import uvicorn
from dotenv import load_dotenv

from src.paths import PROJECT_ROOT

DEFAULT_PORT = 3000


def main() -> None:
    """Serve the API with uvicorn on HOST:PORT."""
    load_dotenv(PROJECT_ROOT / ".env")
    uvicorn.run(
        "src.api.app:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", DEFAULT_PORT)),
        log_config=None,
    )


if __name__ == "__main__":
    main()
