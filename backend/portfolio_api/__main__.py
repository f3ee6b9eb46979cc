"""Run the development server with ``python -m portfolio_api``."""

from __future__ import annotations

from portfolio_api import create_app


def main() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=app.config["PORT"])


if __name__ == "__main__":
    main()
