"""password-tool entrypoint: generate, check and authenticate password credentials."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from getpass import getpass
from typing import TextIO

from credential_auth.application.services.password_auth_service import PasswordAuthService
from credential_auth.config.settings import Settings, load_settings
from credential_auth.domain.auth.errors import CredentialError, FailureClass
from credential_auth.domain.auth.strength_policy import PasswordStrengthPolicy
from credential_auth.infrastructure.logging import configure_logging
from credential_auth.infrastructure.security.pbkdf2_hasher import Pbkdf2CredentialHasher

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_CLIENT_ERROR = 2
EXIT_SERVER_ERROR = 3

logger = logging.getLogger(__name__)


def build_password_auth_service(*, settings: Settings) -> PasswordAuthService:
    """Build password auth facade with the PBKDF2 hasher and configured field names."""

    return PasswordAuthService(
        hasher=Pbkdf2CredentialHasher(),
        fields=settings.credential_fields,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="password-tool")
    subcommands = parser.add_subparsers(dest="command", required=True)

    generate = subcommands.add_parser("generate", help="print a new credential as JSON")
    generate.add_argument("--password", default=None)

    check = subcommands.add_parser("check", help="report password strength")
    check.add_argument("--password", default=None)

    authenticate = subcommands.add_parser(
        "authenticate",
        help="verify a password against a JSON user record",
    )
    authenticate.add_argument("--password", default=None)
    authenticate.add_argument(
        "--record",
        required=True,
        help="JSON object holding the stored hash and salt fields",
    )
    return parser


def _resolve_password(value: str | None) -> str:
    if value is not None:
        return value
    return getpass("Password: ")


async def run_command(
    args: argparse.Namespace,
    *,
    service: PasswordAuthService,
    out: TextIO,
) -> int:
    """Execute one parsed subcommand and return the process exit code."""

    password = _resolve_password(args.password)

    if args.command == "check":
        report = PasswordStrengthPolicy().evaluate(password)
        payload = {
            "accepted": report.accepted,
            "long_enough": report.long_enough,
            "classes": [str(character_class) for character_class in report.matched_classes],
        }
        out.write(json.dumps(payload) + "\n")
        return EXIT_OK if report.accepted else EXIT_CLIENT_ERROR

    if args.command == "generate":
        credential = await service.generate(password)
        record = {service.fields.hash_field: credential.hash, service.fields.salt_field: credential.salt}
        out.write(json.dumps(record) + "\n")
        return EXIT_OK

    try:
        record = json.loads(args.record)
    except json.JSONDecodeError as exc:
        raise ValueError("record must be a JSON object") from exc
    if not isinstance(record, dict):
        raise ValueError("record must be a JSON object")

    is_valid = await service.authenticate(password, record)
    out.write(json.dumps({"authenticated": is_valid}) + "\n")
    return EXIT_OK if is_valid else EXIT_MISMATCH


def main(argv: Sequence[str] | None = None, *, out: TextIO | None = None) -> int:
    """Run password-tool and return its exit code."""

    settings = load_settings()
    configure_logging(level=settings.log_level)
    args = build_parser().parse_args(argv)
    service = build_password_auth_service(settings=settings)
    stream = out if out is not None else sys.stdout

    try:
        return asyncio.run(run_command(args, service=service, out=stream))
    except CredentialError as exc:
        logger.warning("password_tool_failed command=%s error=%s", args.command, exc)
        sys.stderr.write(f"error: {exc}\n")
        if exc.failure_class is FailureClass.CLIENT:
            return EXIT_CLIENT_ERROR
        return EXIT_SERVER_ERROR
    except ValueError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return EXIT_CLIENT_ERROR


if __name__ == "__main__":
    sys.exit(main())
