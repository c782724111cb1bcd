#!/usr/bin/env python3
"""
Flask application to serve the infrastructure inventory dashboard at /infra-inventory

Usage:
  infra-inventory [-c CONFIG] [-p PORT] [-D]

Options:
  -c CONFIG         : CONFIG を設定ファイルとして読み込んで実行します。[default: config.yaml]
  -p PORT           : WEB サーバのポートを指定します。[default: 5000]
  -D                : デバッグモードで動作します。
"""

from __future__ import annotations

import logging
import signal
import sys
from typing import TYPE_CHECKING

import flask
import flask_cors
import my_lib.webapp.base
import my_lib.webapp.config
import my_lib.webapp.event
import my_lib.webapp.util

from infra_inventory.spec import db, db_config, inventory
from infra_inventory.spec.webapi.host import host_api
from infra_inventory.spec.webapi.server import server_api
from infra_inventory.spec.webapi.stats import stats_api
from infra_inventory.spec.webapi.website import website_api

if TYPE_CHECKING:
    from infra_inventory.config import Config

URL_PREFIX = "/infra-inventory"


def term() -> None:
    """Terminate the application gracefully."""
    logging.info("Terminating application...")
    logging.info("Application terminated.")
    sys.exit(0)


def sig_handler(num: int, frame) -> None:  # noqa: ARG001
    """Handle signals for graceful shutdown."""
    logging.warning("Received signal %d", num)

    if num in (signal.SIGTERM, signal.SIGINT):
        term()


def create_app(
    webapp_config: my_lib.webapp.config.WebappConfig,
    config: Config | None = None,
) -> flask.Flask:
    my_lib.webapp.config.URL_PREFIX = URL_PREFIX
    my_lib.webapp.config.init(webapp_config)

    # Initialize paths from config
    if config:
        db.init_from_config(config)
        db_config.reset_all_paths()

    app = flask.Flask("infra-inventory")

    # NOTE: アクセスログは無効にする
    logging.getLogger("werkzeug").setLevel(logging.ERROR)

    flask_cors.CORS(app)

    # Register API blueprints
    app.register_blueprint(host_api, url_prefix=f"{URL_PREFIX}/api")
    app.register_blueprint(server_api, url_prefix=f"{URL_PREFIX}/api")
    app.register_blueprint(website_api, url_prefix=f"{URL_PREFIX}/api")
    app.register_blueprint(stats_api, url_prefix=f"{URL_PREFIX}/api")

    # Register webapp blueprints (static SPA, SSE events)
    app.register_blueprint(my_lib.webapp.base.blueprint_default)
    app.register_blueprint(my_lib.webapp.base.blueprint, url_prefix=URL_PREFIX)
    app.register_blueprint(my_lib.webapp.event.blueprint, url_prefix=URL_PREFIX)
    app.register_blueprint(my_lib.webapp.util.blueprint, url_prefix=URL_PREFIX)

    # Initialize database (required for API to work)
    inventory.init_db()
    logging.info("Inventory database: %s", db_config.get_inventory_db_path())

    if config and config.data.sample:
        inventory.seed_sample_data()

    app.config["CONFIG"] = config

    my_lib.webapp.config.show_handler_list(app)

    return app


def main() -> None:
    import pathlib
    import traceback

    import docopt
    import my_lib.logger
    import my_lib.webapp.config

    from infra_inventory.config import Config

    assert __doc__ is not None
    args = docopt.docopt(__doc__)

    config_file = args["-c"]
    port = int(args["-p"])
    debug_mode = args["-D"]

    my_lib.logger.init("infra-inventory", level=logging.DEBUG if debug_mode else logging.INFO)

    logging.info("Starting infra-inventory webui...")
    logging.info("Config file: %s", config_file)
    logging.info("Port: %s, Debug: %s", port, debug_mode)

    # Use cwd-relative schema path (works for both source and Docker)
    schema_path = pathlib.Path("schema/config.schema")
    if not schema_path.exists():
        # Fall back to db.CONFIG_SCHEMA_PATH for source tree
        schema_path = db.CONFIG_SCHEMA_PATH
    logging.info("Schema path: %s (exists: %s)", schema_path, schema_path.exists())

    try:
        config = Config.load(pathlib.Path(config_file), schema_path)
        logging.info("Config loaded successfully, %d locations defined", len(config.location))

        webapp_config = my_lib.webapp.config.WebappConfig.parse({
            "static_dir_path": str(config.webapp.get_static_dir(db.BASE_DIR)),
        })

        app = create_app(webapp_config, config=config)

        signal.signal(signal.SIGTERM, sig_handler)

        app.run(host="0.0.0.0", port=port, debug=debug_mode)  # noqa: S104
    except KeyboardInterrupt:
        logging.info("Received KeyboardInterrupt, shutting down...")
        sig_handler(signal.SIGINT, None)
    except Exception:
        logging.exception("Fatal error during application startup")
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
