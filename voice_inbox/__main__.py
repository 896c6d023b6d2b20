"""Run the server with uvicorn: `python -m voice_inbox`."""

import uvicorn

from voice_inbox.config import get_settings


def main() -> None:
    """Start uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "voice_inbox.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
