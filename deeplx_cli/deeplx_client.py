
import logging

import requests

from deeplx_cli.errors import TranslationError

logger = logging.getLogger(__name__)

HEADERS = {"Content-Type": "application/json"}


class DeepLXClient:
    def __init__(self, api_url, session=None):
        self.api_url = api_url
        self.session = session or requests.Session()
        self._owns_session = session is None

    def translate_text(self, text, source_lang, target_lang):
        """
        Sends one translation request and returns the translated text.
        Raises TranslationError on transport, HTTP, decoding or API failures.
        """
        payload = {
            "text": text,
            "source_lang": source_lang,
            "target_lang": target_lang,
        }
        logger.debug("POST %s (%s -> %s, %d chars)", self.api_url, source_lang, target_lang, len(text))

        try:
            response = self.session.post(self.api_url, json=payload, headers=HEADERS)
        except requests.RequestException as e:
            raise TranslationError(f"error sending request to DeepLX API: {e}") from e

        if response.status_code != 200:
            raise TranslationError(
                f"DeepLX API returned non-200 status: {response.status_code}, body: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            result = response.json()
        except ValueError as e:
            raise TranslationError(f"error unmarshalling response: {e}", body=response.text) from e

        if not isinstance(result, dict):
            raise TranslationError(
                f"error unmarshalling response: expected a JSON object, got {type(result).__name__}",
                body=response.text,
            )

        code = result.get("code")
        message = result.get("message")
        data = result.get("data")
        # bool is an int subclass; 200.0 is not a valid code either
        if code is not None and (isinstance(code, bool) or not isinstance(code, int)):
            raise TranslationError(
                f"error unmarshalling response: code must be an integer, got {type(code).__name__}",
                body=response.text,
            )
        for field, value in (("message", message), ("data", data)):
            if value is not None and not isinstance(value, str):
                raise TranslationError(
                    f"error unmarshalling response: {field} must be a string, got {type(value).__name__}",
                    body=response.text,
                )

        code = code or 0
        message = message or ""
        if code != 200:
            raise TranslationError(
                f"translation failed with code {code}: {message}",
                code=code,
                api_message=message,
            )

        return data or ""

    def close(self):
        if self._owns_session:
            self.session.close()


def translate(text, source_lang, target_lang, api_url):
    """One-shot helper: translate text against the given API URL."""
    client = DeepLXClient(api_url)
    try:
        return client.translate_text(text, source_lang, target_lang)
    finally:
        client.close()
