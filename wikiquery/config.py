# wikiquery/config.py
from __future__ import annotations

# MediaWiki API endpoint
DEFAULT_API_URL = "https://zh.moegirl.org.cn/api.php"
DEFAULT_UA = "wikiquery/0.1 (+https://github.com/wikiquery/wikiquery)"

# None = requests' default (no timeout)
DEFAULT_TIMEOUT: float | None = None

# Search configuration
DEFAULT_SEARCH_LIMIT = 10

# Rendering configuration
DEFAULT_MAX_CONTENT_CHARS = 2000
TRUNCATION_NOTICE = "\n\n... (content too long, truncated) ..."

# Logging configuration
DEFAULT_LOG_LEVEL = "WARNING"
