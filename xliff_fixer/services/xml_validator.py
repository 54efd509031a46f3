"""
Well-formedness check shared by both repair strategies.
"""

import xml.etree.ElementTree as ET

from xliff_fixer.constants import UNKNOWN_PARSE_ERROR
from xliff_fixer.models.repair_result import ValidationOutcome
from xliff_fixer.logconf import logger


def validate_xml(xml_text: str) -> ValidationOutcome:
    """
    Parse `xml_text` with the standard library parser.

    Never raises: parse failures become an invalid outcome carrying the
    parser message as the single error.
    """
    try:
        ET.fromstring(xml_text)
    except ET.ParseError as exc:
        message = str(exc).strip() or UNKNOWN_PARSE_ERROR
        logger.debug("XML parse failed: %s", message)
        return ValidationOutcome(False, (message,))
    except Exception as exc:
        logger.error("Unexpected XML parser failure: %s", exc, exc_info=True)
        return ValidationOutcome(
            False, (f"Unexpected XML parser failure: {type(exc).__name__}: {exc}",)
        )
    return ValidationOutcome(True, ())
