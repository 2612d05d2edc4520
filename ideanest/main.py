from ideanest.app_factory import create_app
from ideanest.config.settings import Settings
from ideanest.database.connection import apply_schema, close_pool, init_pool
from ideanest.logging.logger import Log


def main() -> None:
    """Entry point: initialize pool -> ensure schema -> build app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)

    try:
        apply_schema()
        app = create_app(settings)
        Log.info(
            f"IdeaNest server starting on {settings.http_host}:{settings.http_port} "
            f"(provider={settings.evaluation_provider})"
        )
        app.run(
            host=app.config["HOST"],
            port=app.config["PORT"],
            debug=app.config["DEBUG"],
        )
    finally:
        close_pool()


if __name__ == "__main__":
    main()
