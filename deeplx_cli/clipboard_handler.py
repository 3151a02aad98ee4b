
import logging

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardHandler:
    def set_text(self, text):
        """
        Writes text to the system clipboard.
        Failures (no clipboard tool, headless session) are ignored.
        """
        try:
            pyperclip.copy(text)
        except Exception as e:
            logger.debug("Clipboard write error: %s", e)
            return False
        return True
