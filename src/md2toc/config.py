"""Local configuration for md2toc."""

from __future__ import annotations

import os


DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_OUTLINE_DEPTH = 5
DEFAULT_ENCODING = "utf-8"

MD2TOC_LOG_LEVEL = os.getenv("MD2TOC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
MD2TOC_MAX_OUTLINE_DEPTH = int(os.getenv("MD2TOC_MAX_OUTLINE_DEPTH", str(DEFAULT_MAX_OUTLINE_DEPTH)))
MD2TOC_ENCODING = os.getenv("MD2TOC_ENCODING", DEFAULT_ENCODING)
