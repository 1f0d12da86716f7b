import logging
import sys
from typing import ClassVar


class Log:
    """Scanner log, one stdout handler on the "docuscan" logger.

    Messages about a single document take ``document_id`` and are prefixed
    with ``[doc <id>]`` so one scan can be followed through the output.
    """

    _logger: logging.Logger = logging.getLogger("docuscan")

    # HTTP client loggers of the OCR providers, kept at WARNING unless debugging.
    _CLIENT_LOGGERS: ClassVar[tuple[str, ...]] = ("httpx", "httpcore", "openai")

    @classmethod
    def configure(cls, log_level: str) -> None:
        level = log_level.upper()
        cls._logger.setLevel(level)
        client_level = logging.DEBUG if level == "DEBUG" else logging.WARNING
        for name in cls._CLIENT_LOGGERS:
            logging.getLogger(name).setLevel(client_level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, *, document_id: str | None = None) -> None:
        cls._logger.info(cls._format(message, document_id))

    @classmethod
    def error(cls, message: str, *, document_id: str | None = None) -> None:
        cls._logger.error(cls._format(message, document_id))

    @classmethod
    def warning(cls, message: str, *, document_id: str | None = None) -> None:
        cls._logger.warning(cls._format(message, document_id))

    @classmethod
    def debug(cls, message: str, *, document_id: str | None = None) -> None:
        cls._logger.debug(cls._format(message, document_id))

    @staticmethod
    def _format(message: str, document_id: str | None) -> str:
        if document_id is None:
            return message
        return f"[doc {document_id}] {message}"
