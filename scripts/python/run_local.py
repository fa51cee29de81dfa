"""Run the service locally with auto-reload."""

import os

import uvicorn


def main() -> None:
    """Run the server against the development configuration."""
    os.environ.setdefault("APP_ENV", "development")
    uvicorn.run("recipeshare.main:app", host="127.0.0.1", port=8080, reload=True)


if __name__ == "__main__":
    main()
