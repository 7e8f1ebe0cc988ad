from __future__ import annotations

import io
import json
from collections.abc import Iterator

import pytest

from apps.password_tool.main import (
    EXIT_CLIENT_ERROR,
    EXIT_MISMATCH,
    EXIT_OK,
    build_password_auth_service,
    main,
)
from credential_auth.config.settings import Settings, load_settings
from credential_auth.domain.auth.credentials import LEGACY_FIELDS


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("CREDENTIAL_FIELD_CONVENTION", raising=False)
    monkeypatch.chdir("/")
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def _run(argv: list[str]) -> tuple[int, dict[str, object]]:
    out = io.StringIO()
    code = main(argv, out=out)
    output = out.getvalue().strip()
    return code, json.loads(output) if output else {}


def test_generate_then_authenticate_round_trip() -> None:
    code, credential = _run(["generate", "--password", "Pass!23"])
    assert code == EXIT_OK
    assert set(credential) == {"hash", "salt"}

    record = json.dumps(credential)
    code, payload = _run(["authenticate", "--password", "Pass!23", "--record", record])
    assert code == EXIT_OK
    assert payload == {"authenticated": True}

    code, payload = _run(["authenticate", "--password", "wrong-Pass1", "--record", record])
    assert code == EXIT_MISMATCH
    assert payload == {"authenticated": False}


def test_generate_with_weak_password_exits_with_client_error() -> None:
    code, payload = _run(["generate", "--password", "password"])

    assert code == EXIT_CLIENT_ERROR
    assert payload == {}


def test_authenticate_with_incomplete_record_exits_with_client_error() -> None:
    code, _ = _run(["authenticate", "--password", "Pass!23", "--record", '{"hash": "abc"}'])

    assert code == EXIT_CLIENT_ERROR


def test_authenticate_with_non_object_record_exits_with_client_error() -> None:
    code, _ = _run(["authenticate", "--password", "Pass!23", "--record", "[1, 2]"])

    assert code == EXIT_CLIENT_ERROR


def test_check_reports_matched_classes() -> None:
    code, payload = _run(["check", "--password", "Passw1rd"])

    assert code == EXIT_OK
    assert payload == {
        "accepted": True,
        "long_enough": True,
        "classes": ["lowercase", "uppercase", "digit"],
    }


def test_check_rejects_short_password() -> None:
    code, payload = _run(["check", "--password", "aB3!"])

    assert code == EXIT_CLIENT_ERROR
    assert payload["accepted"] is False


def test_service_uses_configured_field_convention(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CREDENTIAL_FIELD_CONVENTION", "legacy")

    service = build_password_auth_service(settings=Settings(_env_file=None))

    assert service.fields == LEGACY_FIELDS


def test_legacy_convention_round_trip_uses_pass_field(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CREDENTIAL_FIELD_CONVENTION", "legacy")

    code, credential = _run(["generate", "--password", "HELP@2"])
    assert code == EXIT_OK
    assert set(credential) == {"pass", "salt"}

    code, payload = _run(
        ["authenticate", "--password", "HELP@2", "--record", json.dumps(credential)]
    )
    assert code == EXIT_OK
    assert payload == {"authenticated": True}


def test_authenticate_with_non_text_hash_exits_with_client_error() -> None:
    code, payload = _run(
        ["authenticate", "--password", "Pass!23", "--record", '{"hash": 5, "salt": "c2FsdA=="}']
    )

    assert code == EXIT_CLIENT_ERROR
    assert payload == {}
