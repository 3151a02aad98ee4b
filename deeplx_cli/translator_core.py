
import logging
import sys

logger = logging.getLogger(__name__)


class TranslatorCore:
    def __init__(self, settings, client, clipboard, out=None):
        self.settings = settings
        self.client = client
        self.clipboard = clipboard
        self.out = out

    def process(self, text):
        """Main workflow: Translate -> Copy -> Print"""
        translated = self.client.translate_text(
            text,
            self.settings["source_lang"],
            self.settings["target_lang"],
        )

        if self.clipboard.set_text(translated):
            logger.debug("Translation copied to clipboard.")

        # Must stay the last thing written to stdout
        out = self.out or sys.stdout
        print(translated, file=out)
        out.flush()
        return translated
