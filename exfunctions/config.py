from dataclasses import dataclass
import logging
import os
from typing import Any, Dict, Optional
from dotenv import load_dotenv

load_dotenv()

DEFAULT_URL_PATTERN = (
    r"((([A-Za-z]{3,9}:(?:\/\/)?)(?:[-;:&=\+\$,\w]+@)?[A-Za-z0-9.-]+"
    r"|(?:www.|[-;:&=\+\$,\w]+@)[A-Za-z0-9.-]+)"
    r"((?:\/[\+~%\/.\w_-]*)?\??(?:[-\+=&;%@.\w_]*)#?(?:[\w]*))?)"
)
DEFAULT_PHONE_PATTERN = r"(?:\+?1[-. ]?)?\(?([0-9]{3})\)?[-. ]?([0-9]{3})[-. ]?([0-9]{4})"
DEFAULT_SSN_PATTERN = r"\d{3}\-?\d{2}\-?\d{4}$"
DEFAULT_HTML_TAG_PATTERN = r"<.*?>"
DEFAULT_LINE_BREAK_PATTERN = r"<br.*?>"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class Config:
    """Library-wide defaults"""
    url_pattern: str = os.getenv("EXFUNCTIONS_URL_PATTERN", DEFAULT_URL_PATTERN)
    phone_pattern: str = os.getenv("EXFUNCTIONS_PHONE_PATTERN", DEFAULT_PHONE_PATTERN)
    ssn_pattern: str = os.getenv("EXFUNCTIONS_SSN_PATTERN", DEFAULT_SSN_PATTERN)
    html_tag_pattern: str = os.getenv("EXFUNCTIONS_HTML_TAG_PATTERN", DEFAULT_HTML_TAG_PATTERN)
    line_break_pattern: str = os.getenv("EXFUNCTIONS_LINE_BREAK_PATTERN", DEFAULT_LINE_BREAK_PATTERN)
    newline: str = os.getenv("EXFUNCTIONS_NEWLINE", os.linesep)
    log_level: str = os.getenv("EXFUNCTIONS_LOG_LEVEL", "WARNING").upper()

config = Config()


def get_all_config_variables() -> Dict[str, Any]:
    """
    Get all configuration variables with their env names and current values.

    Returns:
        Dict mapping env variable names to their current values
    """
    return {
        "EXFUNCTIONS_URL_PATTERN": config.url_pattern,
        "EXFUNCTIONS_PHONE_PATTERN": config.phone_pattern,
        "EXFUNCTIONS_SSN_PATTERN": config.ssn_pattern,
        "EXFUNCTIONS_HTML_TAG_PATTERN": config.html_tag_pattern,
        "EXFUNCTIONS_LINE_BREAK_PATTERN": config.line_break_pattern,
        "EXFUNCTIONS_NEWLINE": config.newline,
        "EXFUNCTIONS_LOG_LEVEL": config.log_level,
    }


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging for scripts and interactive use."""
    logging.basicConfig(
        level=getattr(logging, (level or config.log_level).upper(), logging.WARNING),
        format=LOG_FORMAT,
    )
    logging.getLogger(__name__).debug(f"Logging configured: {get_all_config_variables()}")
