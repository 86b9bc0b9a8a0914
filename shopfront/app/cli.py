from __future__ import annotations

from shopfront.app.config import Config
from shopfront.app.factory import create_app


def main() -> None:
    """Run the development server (``shopfront`` console script)."""
    app = create_app(Config)
    app.logger.info("Listening on %s:%s", Config.APP_HOST, Config.APP_PORT)
    app.run(host=Config.APP_HOST, port=Config.APP_PORT, threaded=Config.APP_THREADED)


if __name__ == "__main__":
    main()
