from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
import sys
from urllib.parse import urlparse


class ConfigurationError(ValueError):
    pass


@dataclass(frozen=True)
class AppSettings:
    app_key: str
    app_secret: str
    api_base_url: str = "https://api.dingtalk.com"
    oapi_base_url: str = "https://oapi.dingtalk.com"
    timeout_seconds: int = 30
    log_level: str = "INFO"

    @staticmethod
    def from_env() -> "AppSettings":
        _load_dotenv_if_present()

        app_key = os.getenv("DINGTALK_APP_KEY", "").strip()
        app_secret = os.getenv("DINGTALK_APP_SECRET", "").strip()

        api_base_url = os.getenv("DINGTALK_API_BASE_URL", "https://api.dingtalk.com").strip().rstrip("/")
        oapi_base_url = os.getenv("DINGTALK_OAPI_BASE_URL", "https://oapi.dingtalk.com").strip().rstrip("/")

        raw_timeout = os.getenv("DINGTALK_TIMEOUT_SECONDS", "30").strip()
        try:
            timeout_seconds = int(raw_timeout)
        except ValueError as exc:
            raise ConfigurationError(
                f"DINGTALK_TIMEOUT_SECONDS must be an integer, got {raw_timeout!r}"
            ) from exc

        log_level = os.getenv("DINGTALK_LOG_LEVEL", "INFO").strip().upper()

        settings = AppSettings(
            app_key=app_key,
            app_secret=app_secret,
            api_base_url=api_base_url,
            oapi_base_url=oapi_base_url,
            timeout_seconds=timeout_seconds,
            log_level=log_level,
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        missing = []
        if not self.app_key:
            missing.append("DINGTALK_APP_KEY")
        if not self.app_secret:
            missing.append("DINGTALK_APP_SECRET")

        if missing:
            raise ConfigurationError(
                "Missing required settings: " + ", ".join(missing)
            )

        url_fields = {
            "DINGTALK_API_BASE_URL": self.api_base_url,
            "DINGTALK_OAPI_BASE_URL": self.oapi_base_url,
        }
        invalid_urls = [
            name for name, value in url_fields.items()
            if urlparse(value).scheme not in ("http", "https")
        ]
        if invalid_urls:
            raise ConfigurationError(
                "Base URLs must use http or https: " + ", ".join(invalid_urls)
            )

        if self.timeout_seconds <= 0:
            raise ConfigurationError("DINGTALK_TIMEOUT_SECONDS must be greater than 0")


def _load_dotenv_if_present(file_name: str = ".env") -> None:
    for candidate in _candidate_env_files(file_name):
        _load_env_file(candidate)


def _candidate_env_files(file_name: str) -> list[Path]:
    candidates: list[Path] = []

    explicit = os.getenv("DINGTALK_ENV_FILE", "").strip()
    if explicit:
        candidates.append(Path(explicit).expanduser())

    candidates.append(Path.cwd() / file_name)

    if getattr(sys, "frozen", False):
        candidates.append(Path(sys.executable).resolve().parent / file_name)

    unique_candidates: list[Path] = []
    seen: set[str] = set()
    for path in candidates:
        normalized = str(path.resolve()) if path.exists() else str(path)
        if normalized in seen:
            continue
        seen.add(normalized)
        unique_candidates.append(path)
    return unique_candidates


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return

    try:
        with path.open("r", encoding="utf-8") as env_file:
            for raw_line in env_file:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue

                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"').strip("'")

                # variables already in the environment win
                if key and key not in os.environ:
                    os.environ[key] = value
    except OSError:
        return
