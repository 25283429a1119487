#setup: pip install -e .
#setup: python -m coastfi   (or: flask --app coastfi.app:create_app run --port 5000 --debug)

from coastfi.app import create_app
from coastfi.config import load_settings


def main() -> None:
    settings = load_settings()
    app = create_app(settings)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
