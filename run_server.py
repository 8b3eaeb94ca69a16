"""Convenience runner for the identicon API.

Starts uvicorn with host and port from the DOTICON_* settings.
Use:  python run_server.py
"""
import uvicorn

from doticon.settings import get_settings


def main():
    settings = get_settings()
    print(f"[doticon] serving on http://{settings.host}:{settings.port}")
    uvicorn.run("doticon.server:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
