"""Application entry point for the ProctorQt assessment client."""

from __future__ import annotations

import argparse
import os
import sys

from PySide6.QtWidgets import QApplication

from proctor_app.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from proctor_app.constants.network_constants import (
    API_TIMEOUT_SECONDS,
    DEFAULT_API_BASE_URL,
    SANDBOX_HOST,
    SANDBOX_PORT,
)
from proctor_app.core.api_client import ProctorApiClient
from proctor_app.core.models import AuthenticatedUser
from proctor_app.core.services.session_guard import QuizRoute
from proctor_app.server.sandbox_backend import SandboxStore, start_sandbox_server
from proctor_app.ui.quiz_window import QuizWindow
from proctor_app.utils.logging_config import configure_logging

SANDBOX_USER_ID = "sandbox-candidate"
SANDBOX_TOKEN = "sandbox-token"
SANDBOX_DEFAULT_JOB = "job-python"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="proctorqt",
        description=f"{APP_NAME} {APP_VERSION}: take a proctored job assessment.",
        epilog=APP_ABOUT_TEXT,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION} ({APP_LICENSE})",
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--job", help="Job post id to take the quiz for.")
    target.add_argument("--route", help="Quiz route to open, e.g. /quiz/<jobId>[/<sessionId>].")
    parser.add_argument(
        "--api-url",
        default=os.environ.get("PROCTOR_API_URL"),
        help=f"Backend base URL (env PROCTOR_API_URL, default {DEFAULT_API_BASE_URL}).",
    )
    parser.add_argument(
        "--user-id",
        default=os.environ.get("PROCTOR_USER_ID"),
        help="Authenticated user id (env PROCTOR_USER_ID).",
    )
    parser.add_argument(
        "--token",
        default=os.environ.get("PROCTOR_TOKEN"),
        help="Bearer token for the backend (env PROCTOR_TOKEN).",
    )
    parser.add_argument(
        "--sandbox",
        action="store_true",
        help="Serve demo job posts from an in-process backend and use it.",
    )
    return parser


def _resolve_route(args: argparse.Namespace, parser: argparse.ArgumentParser) -> QuizRoute:
    if args.route:
        try:
            return QuizRoute.parse(args.route)
        except ValueError as exc:
            parser.error(str(exc))
    if args.job:
        return QuizRoute(job_id=args.job)
    if args.sandbox:
        return QuizRoute(job_id=SANDBOX_DEFAULT_JOB)
    parser.error("one of --job or --route is required")


def main(argv: list[str] | None = None) -> None:
    """Parse options, optionally start the sandbox backend, and launch the Qt UI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    route = _resolve_route(args, parser)
    api_url = args.api_url or DEFAULT_API_BASE_URL
    user_id = args.user_id
    token = args.token

    if args.sandbox:
        start_sandbox_server(SandboxStore.with_demo_data(), host=SANDBOX_HOST, port=SANDBOX_PORT)
        api_url = f"http://{SANDBOX_HOST}:{SANDBOX_PORT}"
        user_id = user_id or SANDBOX_USER_ID
        token = token or SANDBOX_TOKEN
        logger.info("Sandbox backend serving at %s", api_url)

    user = AuthenticatedUser(id=user_id, token=token) if user_id else None
    if user is None:
        logger.warning("No user id given; the quiz will ask for authentication")

    api = ProctorApiClient.from_base_url(api_url, timeout=API_TIMEOUT_SECONDS)
    app = QApplication(sys.argv[:1])
    window = QuizWindow(api=api, user=user, route=route)
    window.show()
    window.open_route()
    exit_code = app.exec()
    api.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
