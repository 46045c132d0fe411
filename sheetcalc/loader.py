# loader.py

import logging
import pathlib

from .exceptions import SourceDecodeError, SourceEmpty, SourceNotFound

logger = logging.getLogger(__name__)


def load_source(path, encoding: str = "utf-8") -> str:
    """Read the CSV text untouched; CRLF row delimiters must survive."""
    p = pathlib.Path(path)
    if not p.is_file():
        logger.error("The CSV file does not exist: %s", p)
        raise SourceNotFound(p)

    try:
        with p.open("r", encoding=encoding, newline="") as fh:
            data = fh.read()
    except UnicodeDecodeError as err:
        logger.error("The CSV file is not valid %s: %s (%s)", encoding, p, err)
        raise SourceDecodeError(p, encoding) from err

    if data.strip() == "":
        logger.error("The CSV file is empty: %s", p)
        raise SourceEmpty(p)
    return data
