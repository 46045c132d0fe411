import os
import logging
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv(".env")


def _unescape(raw: str) -> str:
    # lets .env files spell CRLF as "\r\n"
    return raw.replace("\\r", "\r").replace("\\n", "\n").replace("\\t", "\t")


@dataclass(frozen=True)
class Settings:
    # Input / output format
    FIELD_DELIMITER: str = _unescape(os.getenv("SHEETCALC_FIELD_DELIMITER", ","))
    ROW_DELIMITER: str   = _unescape(os.getenv("SHEETCALC_ROW_DELIMITER", "\r\n"))
    ERROR_MARKER: str    = os.getenv("SHEETCALC_ERROR_MARKER", "#ERR")
    ENCODING: str        = os.getenv("SHEETCALC_ENCODING", "utf-8")

    # Diagnostics
    LOG_LEVEL: str       = os.getenv("SHEETCALC_LOG_LEVEL", "WARNING")


def configure_logging(level: str = "WARNING") -> None:
    """Send diagnostics to stderr so stdout only ever carries the result grid."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
