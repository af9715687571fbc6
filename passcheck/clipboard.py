import logging

import pyperclip

from passcheck.exceptions import ClipboardError

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> None:
    """
    Copiază textul în clipboard-ul sistemului.
    Ridică ClipboardError dacă nu există un mecanism de clipboard disponibil
    (ex. Linux fără xclip/xsel, sesiune fără display).
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning("Clipboard unavailable: %s", e)
        raise ClipboardError("Could not copy to clipboard.", code="CLIPBOARD_UNAVAILABLE", detail=str(e)) from e
