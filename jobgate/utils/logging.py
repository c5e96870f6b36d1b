# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations
import json
import logging
import re
import sys

APIFY_TOKEN_RE = re.compile(r"(apify_api_)([A-Za-z0-9]+)")
QUERY_TOKEN_RE = re.compile(r"([?&]token=)([^&\s]+)", re.IGNORECASE)
BEARER_RE = re.compile(r"(Bearer\s+)([^\s,'\"]+)", re.IGNORECASE)


def mask_secrets(text: str) -> str:
    text = APIFY_TOKEN_RE.sub(r"\1***", text)
    text = QUERY_TOKEN_RE.sub(r"\1***", text)
    return BEARER_RE.sub(r"\1***", text)


class SecretMask(logging.Filter):
    """Redact platform tokens from messages and string args."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = mask_secrets(record.msg)
        if record.args:
            if isinstance(record.args, tuple):
                args = []
                for a in record.args:
                    if isinstance(a, str):
                        a = mask_secrets(a)
                    args.append(a)
                record.args = tuple(args)
        return True


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        data = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S"),
            "lvl": record.levelname,
            "logger": record.name,
            "msg": mask_secrets(record.getMessage()),
        }
        if record.exc_info:
            data["exception"] = mask_secrets(self.formatException(record.exc_info))
        return json.dumps(data)


def setup_logger(level: str = "INFO", json_mode: bool = False) -> logging.Logger:
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    # clear handlers
    for h in list(logger.handlers):
        logger.removeHandler(h)

    # stdout is reserved for the stdio MCP transport
    h = logging.StreamHandler(sys.stderr)
    if json_mode:
        f: logging.Formatter = JSONFormatter()
    else:
        f = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    h.setFormatter(f)
    h.addFilter(SecretMask())
    logger.addHandler(h)

    logging.getLogger("urllib3").setLevel(logging.ERROR)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logger
