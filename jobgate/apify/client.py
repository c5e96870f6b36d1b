# SPDX-License-Identifier: Apache-2.0
# jobgate/apify/client.py
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote

import requests

from ..exceptions import (
    ConfigurationError,
    DatasetFetchError,
    JobFailedError,
    JobTimeoutError,
    TransportError,
)
from ..settings import SETTINGS

logger = logging.getLogger(__name__)

SYNC = "sync"
ASYNC = "async"
MODES = (SYNC, ASYNC)

SUCCEEDED = "SUCCEEDED"
# Platform statuses that can still change; anything else is terminal.
IN_PROGRESS = frozenset({"READY", "RUNNING", "TIMING-OUT", "ABORTING"})


@dataclass(frozen=True)
class JobRequest:
    """One actor invocation. Built per tool call and never mutated."""
    actor_id: str
    input: Mapping[str, Any]
    mode: str = SYNC

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ConfigurationError(
                f"Unknown run mode '{self.mode}' for actor {self.actor_id}; expected one of: {', '.join(MODES)}"
            )


@dataclass
class JobRun:
    """Remote run state, updated only from status reads."""
    id: str
    status: str
    dataset_ref: Optional[str] = None

    @property
    def terminal(self) -> bool:
        return self.status not in IN_PROGRESS


def _error_detail(resp: requests.Response) -> str:
    """Short, token-free description of a failed response body."""
    try:
        body = resp.json()
    except ValueError:
        text = (resp.text or "").strip()
        return f": {text[:200]}" if text else ""
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, dict) and err.get("message"):
            return f": {err['message']}"
    return ""


def _as_items(data: Any, step: str, error_cls: type = TransportError) -> List[Any]:
    if not isinstance(data, list):
        raise error_cls(f"{step} returned {type(data).__name__} instead of a list of items")
    return data


def _run_data(data: Any, step: str) -> Dict[str, Any]:
    run = data.get("data") if isinstance(data, dict) else None
    if not isinstance(run, dict):
        raise TransportError(f"{step} returned an unexpected payload (no 'data' object)")
    return run


class ActorClient:
    """
    Thin client for the actor platform.

    - sync:  one POST to run-sync-get-dataset-items, blocking until the
      platform returns the dataset (the platform enforces its own limit).
    - async: start a run, poll its status every `poll_interval_s` for at most
      `max_poll_attempts` checks, then fetch the run's dataset items.

    Blocking HTTP calls run in a worker thread; waits between polls use
    asyncio.sleep so other tool calls keep being served.
    No retries: the first failure is reported.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = "https://api.apify.com/v2",
        poll_interval_s: float = 5.0,
        max_poll_attempts: int = 60,
        http_timeout_s: Optional[float] = 30.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not token:
            raise ConfigurationError("APIFY_TOKEN is not set. Export it or add it to your .env file.")
        if max_poll_attempts < 1:
            raise ConfigurationError("max_poll_attempts must be at least 1")
        self._token = token
        self.base_url = base_url.rstrip("/")
        self.poll_interval_s = poll_interval_s
        self.max_poll_attempts = max_poll_attempts
        self.http_timeout_s = http_timeout_s
        self._session = session

    @classmethod
    def from_settings(cls) -> "ActorClient":
        cfg = SETTINGS.apify
        return cls(
            cfg.token,
            base_url=cfg.base_url,
            poll_interval_s=cfg.poll_interval_s,
            max_poll_attempts=cfg.max_poll_attempts,
            http_timeout_s=cfg.http_timeout_s,
        )

    # ---------------------------
    # HTTP plumbing
    # ---------------------------
    def _get(self) -> requests.Session:
        if self._session is None:
            s = requests.Session()
            s.headers.update({"Accept": "application/json", "User-Agent": "jobgate"})
            self._session = s
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    @property
    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._token}"}

    def _url(self, actor_id: str, *parts: str) -> str:
        segs = [quote(actor_id, safe="~")] + [quote(p, safe="") for p in parts]
        return f"{self.base_url}/acts/" + "/".join(segs)

    def _request(self, method: str, url: str, *, step: str, error_cls: type = TransportError, **kwargs: Any) -> Any:
        try:
            r = self._get().request(method, url, **kwargs)
        except requests.RequestException as e:
            raise error_cls(f"{step} failed: {e}") from e

        if not 200 <= r.status_code < 300:
            raise error_cls(
                f"{step} failed with HTTP {r.status_code}{_error_detail(r)}",
                status_code=r.status_code,
            )
        try:
            return r.json()
        except ValueError as e:
            raise error_cls(f"{step} returned a body that is not JSON") from e

    async def _call(self, method: str, url: str, **kwargs: Any) -> Any:
        return await asyncio.to_thread(self._request, method, url, **kwargs)

    # ---------------------------
    # Sync protocol
    # ---------------------------
    async def run_sync(self, request: JobRequest) -> List[Any]:
        logger.info("Running actor %s (sync)", request.actor_id)
        data = await self._call(
            "POST",
            self._url(request.actor_id, "run-sync-get-dataset-items"),
            step="Actor run",
            params={"token": self._token},
            json=dict(request.input),
            timeout=None,
        )
        items = _as_items(data, "Actor run")
        logger.info("Actor %s returned %d items", request.actor_id, len(items))
        return items

    # ---------------------------
    # Async-poll protocol
    # ---------------------------
    async def start_run(self, request: JobRequest) -> JobRun:
        data = await self._call(
            "POST",
            self._url(request.actor_id, "runs"),
            step="Actor start",
            headers=self._auth_headers,
            json=dict(request.input),
            timeout=self.http_timeout_s,
        )
        run = _run_data(data, "Actor start")
        run_id = run.get("id")
        if not run_id:
            raise TransportError("Actor start returned no run id")
        job = JobRun(id=str(run_id), status=str(run.get("status") or "READY"), dataset_ref=run.get("defaultDatasetId"))
        logger.info("Started actor %s run %s (status=%s)", request.actor_id, job.id, job.status)
        return job

    async def get_run_status(self, actor_id: str, run_id: str) -> str:
        data = await self._call(
            "GET",
            self._url(actor_id, "runs", run_id),
            step="Run status check",
            headers=self._auth_headers,
            timeout=self.http_timeout_s,
        )
        status = _run_data(data, "Run status check").get("status")
        if not status:
            raise TransportError(f"Run status check for {run_id} returned no status")
        return str(status)

    async def wait_for_run(self, actor_id: str, run: JobRun) -> JobRun:
        """Poll until the run is terminal; JobTimeoutError when the budget runs out."""
        attempts = 0
        while attempts < self.max_poll_attempts:
            await asyncio.sleep(self.poll_interval_s)
            attempts += 1
            run.status = await self.get_run_status(actor_id, run.id)
            logger.debug("Run %s status=%s (check %d/%d)", run.id, run.status, attempts, self.max_poll_attempts)
            if run.terminal:
                return run
        raise JobTimeoutError(run.id, run.status, attempts)

    async def get_dataset_items(self, actor_id: str, run_id: str) -> List[Any]:
        data = await self._call(
            "GET",
            self._url(actor_id, "runs", run_id, "dataset", "items"),
            step="Dataset fetch",
            error_cls=DatasetFetchError,
            headers=self._auth_headers,
            params={"format": "json"},
            timeout=self.http_timeout_s,
        )
        return _as_items(data, "Dataset fetch", DatasetFetchError)

    async def run_async(self, request: JobRequest) -> List[Any]:
        run = await self.start_run(request)
        if not run.terminal:
            run = await self.wait_for_run(request.actor_id, run)
        if run.status != SUCCEEDED:
            raise JobFailedError(run.id, run.status)
        items = await self.get_dataset_items(request.actor_id, run.id)
        logger.info("Actor %s run %s returned %d items", request.actor_id, run.id, len(items))
        return items

    async def run(self, request: JobRequest) -> List[Any]:
        """Run the actor with the request's mode and return raw dataset items."""
        if request.mode == ASYNC:
            return await self.run_async(request)
        return await self.run_sync(request)
