
import argparse
import logging
import sys

from deeplx_cli import __version__
from deeplx_cli.clipboard_handler import ClipboardHandler
from deeplx_cli.config_loader import default_config_path, read_config, resolve_settings
from deeplx_cli.deeplx_client import DeepLXClient
from deeplx_cli.errors import ConfigError, InputError, TranslationError
from deeplx_cli.logger import setup_logging
from deeplx_cli.translator_core import TranslatorCore

logger = logging.getLogger(__name__)

STDIN_PROMPT = "Enter text to translate (press Ctrl+D to finish input):"


def build_parser():
    parser = argparse.ArgumentParser(
        prog="deeplx-cli",
        description="Translate text with a DeepLX API and copy the result to the clipboard.",
        allow_abbrev=False,
    )
    parser.add_argument("-text", "--text", dest="text", default="",
                        help="Text to translate. If not provided, reads from standard input.")
    parser.add_argument("-source_lang", "--source_lang", dest="source_lang", default="",
                        help="Source language.")
    parser.add_argument("-s", dest="source_lang_short", default="",
                        help="Source language (shorthand for -source_lang).")
    parser.add_argument("-target_lang", "--target_lang", dest="target_lang", default="",
                        help="Target language.")
    parser.add_argument("-t", dest="target_lang_short", default="",
                        help="Target language (shorthand for -target_lang).")
    parser.add_argument("-url", "--url", dest="url", default="",
                        help="URL of the DeepLX API.")
    parser.add_argument("-config", "--config", dest="config", default=None,
                        help="Path to the YAML config file (default: ~/.deeplx-cli.yml).")
    parser.add_argument("-debug", "--debug", dest="debug", action="store_true",
                        help="Enable debug logging on stderr.")
    parser.add_argument("-version", "--version", "-v", dest="version", action="store_true",
                        help="Show version information.")
    # Everything from the first non-flag token on is literal text
    parser.add_argument("words", nargs=argparse.REMAINDER,
                        help="Text to translate when -text is not given.")
    return parser


def resolve_input_text(text, words, stdin):
    """
    Picks the text to translate.
    Priority: -text flag > positional words (space-joined) > stdin.
    """
    if text:
        return text
    if words:
        return " ".join(words)

    if stdin.isatty():
        print(STDIN_PROMPT, file=sys.stderr)
    try:
        data = stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"failed to read standard input: {e}") from e
    # Only one trailing newline is dropped
    if data.endswith("\n"):
        data = data[:-1]
    return data


def run(argv=None, stdin=None, stdout=None, clipboard=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"deeplx-cli version {__version__}", file=stdout or sys.stdout)
        return 0

    setup_logging(debug=args.debug)

    try:
        config_path = args.config or default_config_path()
        config = read_config(config_path)
        settings = resolve_settings(
            config,
            url=args.url,
            source_lang=args.source_lang,
            source_lang_short=args.source_lang_short,
            target_lang=args.target_lang,
            target_lang_short=args.target_lang_short,
        )
        logger.debug("Effective settings: %s", settings)

        input_text = resolve_input_text(args.text, args.words, stdin or sys.stdin)
        if not input_text:
            raise InputError(
                "No text provided for translation. "
                "Please use the -text flag or provide text via standard input."
            )

        client = DeepLXClient(settings["url"])
        try:
            core = TranslatorCore(settings, client, clipboard or ClipboardHandler(), out=stdout)
            core.process(input_text)
        finally:
            client.close()
    except (ConfigError, InputError) as e:
        logger.error("%s", e)
        return 1
    except TranslationError as e:
        logger.error("Translation failed: %s", e)
        return 1

    return 0


def main():
    sys.exit(run())
