"""
Backend package for the interview preparation application.

This package contains the core backend service components including:
- Flask application and API routes
- Document upload, chunking and embedding services
- LLM integration for question generation and answer scoring
- Data models and JSON-backed storage services
- Configuration and utility modules
"""

import logging
import os

# Configure logging with clickable paths before anything else imports logging
logging.basicConfig(
    level=logging.INFO, format="%(levelname)s: %(pathname)s:%(lineno)d %(message)s"
)


class ClickablePathFilter(logging.Filter):
    """Filter to make file paths clickable in the terminal."""

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "pathname"):
            # Convert absolute path to relative path from workspace root
            workspace_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
            try:
                record.pathname = os.path.relpath(record.pathname, workspace_root)
            except ValueError:
                # Different drive on Windows
                pass
        return True


for _handler in logging.getLogger().handlers:
    _handler.addFilter(ClickablePathFilter())

# Third-party HTTP clients are noisy at INFO
for _name in ["urllib3", "cloudinary", "httpx"]:
    logging.getLogger(_name).setLevel(logging.WARNING)
