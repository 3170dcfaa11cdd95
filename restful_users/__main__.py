"""
Run the API with Uvicorn.

Usage:
    python -m restful_users

Host and port are read from ``HOST`` and ``PORT`` (defaults ``0.0.0.0``
and ``8000``).
"""

import os

import uvicorn


def main() -> None:
    """Serve ``restful_users.main:app``."""
    uvicorn.run(
        "restful_users.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_config=None,
    )


if __name__ == "__main__":
    main()
