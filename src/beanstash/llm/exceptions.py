class ChatRequestError(Exception):
    """A chat-completion request failed.

    Covers every failure mode the same way: network errors, non-2xx
    statuses, malformed payloads and missing fields.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause
