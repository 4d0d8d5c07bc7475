"""Application entry point."""

from bindkit.api.logging import get_logger
from alice_ui.app.runtime import run_alice_app
from alice_ui.infra.config import load_app_config, load_default_env_files
from alice_ui.infra.logging import setup_logging

logger = get_logger(__name__)


def main() -> None:
    """Run the Alice viewer control panel."""
    load_default_env_files()
    setup_logging()
    config = load_app_config()
    logger.info(
        "app_config host_library=%s window=%dx%d",
        config.host_library,
        config.window_width,
        config.window_height,
    )
    run_alice_app(config)


if __name__ == "__main__":
    main()
