"""Command line entry point for the mysql-health service."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from mysql_health.domain.exceptions import MySQLHealthConfigError
from mysql_health.factories import (
    check_connectivity,
    create_node_classifier,
    create_query_adapter,
)
from mysql_health.usecases.classification import CLASSIFICATIONS
from mysql_health_fastapi.settings import load_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Every option defaults to None so that unset flags do not override the
    option file or the YAML config.
    """
    parser = argparse.ArgumentParser(
        prog="mysql-health-check",
        description="HTTP API answering role and status checks of a MySQL node",
    )
    parser.add_argument("--user", help="Database user with privileges (default: mysql)")
    parser.add_argument("--password", help="Password of database user")
    parser.add_argument("--host", help="Hostname/IP of target database (default: localhost)")
    parser.add_argument("--port", type=int, help="Port of target database (default: 3306)")
    parser.add_argument("--cnf", help="Path to .my.cnf file")
    parser.add_argument("--socket", help="Socket to connect to database")
    parser.add_argument(
        "--replication-status-statement",
        dest="replication_status_statement",
        choices=["SHOW SLAVE STATUS", "SHOW REPLICA STATUS"],
        help="Statement used to read replica status (default: SHOW SLAVE STATUS)",
    )
    parser.add_argument(
        "--listen-address",
        dest="listen_address",
        help="Address where API is listening for requests (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--listen-port",
        dest="listen_port",
        type=int,
        help="Port where API is listening for requests (default: 3307)",
    )
    parser.add_argument(
        "--failure-status-code",
        dest="failure_status_code",
        type=int,
        help="HTTP status of negative answers (default: 403)",
    )
    parser.add_argument(
        "--metrics",
        dest="metrics_enabled",
        action="store_true",
        default=None,
        help="Expose Prometheus metrics on /metrics",
    )
    parser.add_argument("--log-level", dest="log_level", help="Logging level (default: INFO)")
    parser.add_argument(
        "--master-marker-path",
        dest="master_marker_path",
        help="File whose presence forces /role/master to succeed, empty to disable "
        "(default: /master)",
    )
    parser.add_argument("--config", help="Path to YAML config file")
    parser.add_argument(
        "--check",
        choices=sorted(CLASSIFICATIONS),
        help="Answer one classification, print it as JSON and exit (0 on success)",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=0,
        help="Lag threshold in seconds for --check role.replica_by_lag (0 = unbounded)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the service, or a single check with --check.

    Returns:
        Process exit code. 2 on configuration or connectivity errors.
    """
    args = build_parser().parse_args(argv)
    overrides: dict[str, Any] = {
        key: value
        for key, value in vars(args).items()
        if key not in ("config", "check", "threshold")
    }

    try:
        service_settings, database_settings = load_settings(overrides, args.config)
    except MySQLHealthConfigError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Invalid configuration: {e}")
        return 2

    logging.basicConfig(
        level=service_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.threshold < 0:
        logger.error(f"--threshold cannot be negative, got: {args.threshold}")
        return 2

    query_adapter = create_query_adapter(database_settings)
    try:
        check_connectivity(query_adapter)
    except MySQLHealthConfigError as e:
        logger.error(str(e))
        query_adapter.dispose()
        return 2

    metrics = None
    if service_settings.metrics_enabled:
        from mysql_health.adapters.prometheus_metrics import PrometheusMetricsAdapter

        metrics = PrometheusMetricsAdapter()

    classifier = create_node_classifier(
        query_adapter,
        replication_status_statement=database_settings.replication_status_statement,
        metrics=metrics,
        master_marker_path=service_settings.master_marker_path,
    )

    try:
        if args.check:
            result = classifier.classify(args.check, threshold_seconds=args.threshold)
            print(json.dumps({"status": result.succeeded, "content": result.detail}))
            return 0 if result.succeeded else 1

        import uvicorn

        from mysql_health_fastapi.app import create_app

        app = create_app(classifier, service_settings)
        logger.info(f"Listening on port {service_settings.listen_port} ...")
        uvicorn.run(
            app,
            host=service_settings.listen_address,
            port=service_settings.listen_port,
            log_level=service_settings.log_level.lower(),
            access_log=False,
        )
        return 0
    finally:
        query_adapter.dispose()


if __name__ == "__main__":
    sys.exit(main())
