"""Entrypoint that reads PORT from the environment and serves the app with uvicorn."""
from backend.config import Settings, settings
from backend.server import serve


def main(config: Settings | None = None):
    serve(config or settings)


if __name__ == "__main__":
    main()
