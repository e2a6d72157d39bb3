"""Property list decoding for Dock preference documents."""

import logging
import plistlib
from typing import Any
from xml.parsers.expat import ExpatError

from dock_prefs.errors import MalformedDocumentError

logger = logging.getLogger(__name__)

BINARY_MAGIC = b"bplist00"

# plistlib's XML handler can fail with plain AttributeError/IndexError/KeyError
# on structurally invalid documents (bad <date>, stray top-level <key>, ...)
PARSER_ERRORS = (
    plistlib.InvalidFileException,
    ExpatError,
    ValueError,
    TypeError,
    OverflowError,
    AttributeError,
    IndexError,
    KeyError,
)


def decode_document(data: bytes) -> Any:
    """
    Parse raw bytes into a generic property list value tree.

    Both serializations are accepted; ``plistlib`` detects the format from
    the header. The result is built from dicts, lists, str, bool, int,
    float, bytes and datetime values.

    Args:
        data: Raw file contents

    Returns:
        The root value of the property list (normally a dict)

    Raises:
        MalformedDocumentError: If the bytes are not a valid property list

    Example:
        >>> decode_document(plistlib.dumps({"autohide": True}))
        {'autohide': True}
    """
    if not data:
        raise MalformedDocumentError("document is empty")

    fmt = "binary" if data.startswith(BINARY_MAGIC) else "xml"
    if fmt == "xml":
        # macOS tolerates surrounding whitespace that trips up expat
        data = data.strip()

    try:
        tree = plistlib.loads(data)
    except PARSER_ERRORS as e:
        raise MalformedDocumentError(f"{fmt} parser failed: {e}") from e

    logger.debug("Decoded %s property list with root %s", fmt, type(tree).__name__)
    return tree
