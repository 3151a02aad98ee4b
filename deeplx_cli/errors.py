
class DeepLXCLIError(Exception):
    """Base class for errors that stop the CLI."""


class ConfigError(DeepLXCLIError):
    pass


class InputError(DeepLXCLIError):
    pass


class TranslationError(DeepLXCLIError):
    """
    Raised when the DeepLX API call fails.
    Carries the HTTP status/body or the API's own code/message when known.
    """

    def __init__(self, message, status_code=None, body=None, code=None, api_message=None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.code = code
        self.api_message = api_message
