# SPDX-License-Identifier: Apache-2.0
# jobgate/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv
load_dotenv()  # load .env early


def _env(name: str, default: str) -> str:
    v = os.getenv(name)
    return v.strip() if v and v.strip() else default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, "").strip() or default)
    except Exception:
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int((os.getenv(name, "") or str(default)).strip())
    except Exception:
        return default


def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    v = v.strip().lower()
    return v in {"1", "true", "yes", "on", "y", "t"}


@dataclass
class ActorConfig:
    """One Apify actor and how we talk to it ('sync' or 'async')."""
    actor_id: str
    mode: str = "sync"


@dataclass
class _Apify:
    # Never embed a token here; env only.
    token: str = field(default_factory=lambda: _env("APIFY_TOKEN", _env("APIFY_API_TOKEN", "")))
    base_url: str = field(default_factory=lambda: _env("APIFY_BASE_URL", "https://api.apify.com/v2"))
    poll_interval_s: float = field(default_factory=lambda: _env_float("APIFY_POLL_INTERVAL_S", 5.0))
    max_poll_attempts: int = field(default_factory=lambda: _env_int("APIFY_MAX_POLL_ATTEMPTS", 60))
    # Applies to async-mode requests only; sync runs rely on the platform's own limit.
    http_timeout_s: float = field(default_factory=lambda: _env_float("APIFY_HTTP_TIMEOUT_S", 30.0))


@dataclass
class _Server:
    name: str = field(default_factory=lambda: _env("JOBGATE_SERVER_NAME", "jobgate"))
    transport: str = field(default_factory=lambda: _env("JOBGATE_TRANSPORT", "stdio"))
    host: str = field(default_factory=lambda: _env("JOBGATE_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: _env_int("JOBGATE_PORT", 8000))


@dataclass
class _Settings:
    apify: _Apify = field(default_factory=_Apify)
    linkedin: ActorConfig = field(
        default_factory=lambda: ActorConfig(
            actor_id=_env("LINKEDIN_ACTOR_ID", "BHzefUZlZRKWxkTck"),
            mode=_env("LINKEDIN_ACTOR_MODE", "async").lower(),
        )
    )
    indeed: ActorConfig = field(
        default_factory=lambda: ActorConfig(
            actor_id=_env("INDEED_ACTOR_ID", "hMvNSpz3JnHgl5jkh"),
            mode=_env("INDEED_ACTOR_MODE", "sync").lower(),
        )
    )
    server: _Server = field(default_factory=_Server)

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    log_json: bool = field(default_factory=lambda: _env_bool("LOG_JSON", False))


SETTINGS = _Settings()
