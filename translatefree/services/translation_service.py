from __future__ import annotations

import logging

import requests
from pydantic import ValidationError

from translatefree import config
from translatefree.errors import (
    BadRequestError,
    DecodeError,
    NoContentError,
    TransportError,
    TranslatorError,
)
from translatefree.models import RawResult, TranslationRequest, TranslationResult
from translatefree.processing.flatten import flatten
from translatefree.processing.uri_encoding import encode_uri

logger = logging.getLogger(__name__)


class TranslationService:
    _endpoint = config.TRANSLATE_ENDPOINT

    @staticmethod
    def build_url(encoded_text: str, source_lang: str, target_lang: str) -> str:
        # Assembled by hand: `q` is already encoded and must not be re-encoded.
        data_types = "".join(f"&dt={dt}" for dt in config.DATA_TYPES)
        return (
            f"{TranslationService._endpoint}?client={config.CLIENT_ID}"
            f"&sl={source_lang}"
            f"&tl={target_lang}"
            f"&q={encoded_text}"
            f"{data_types}"
            "&dj=1"
        )

    @staticmethod
    def fetch(url: str, timeout=config.REQUEST_TIMEOUT, session: requests.Session | None = None) -> bytes:
        """
        One GET, no retry. Returns the whole body, whatever the status code.
        """
        getter = session.get if session is not None else requests.get
        logger.debug("GET %s", url)

        try:
            res = getter(url, timeout=timeout)
            body = res.content
        except requests.RequestException as e:
            raise TransportError(f"Error getting {TranslationService._endpoint}: {e}") from e

        logger.debug("HTTP %s | %d bytes", res.status_code, len(body))
        return body

    @staticmethod
    def parse(body: bytes) -> RawResult:
        if config.BAD_REQUEST_MARKER in body:
            raise BadRequestError("Error 400 (Bad Request)")

        try:
            raw = RawResult.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"Error decoding translation response: {e}") from e

        if not raw.sentences:
            raise NoContentError("No sentences in translation response")

        return raw

    @staticmethod
    def translate(
        text: str,
        source_lang: str,
        target_lang: str,
        *,
        timeout=config.REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ) -> TranslationResult:
        req = TranslationRequest(text=text, source_lang=source_lang, target_lang=target_lang)

        try:
            encoded = encode_uri(req.text)
            url = TranslationService.build_url(encoded, req.source_lang, req.target_lang)
            body = TranslationService.fetch(url, timeout=timeout, session=session)
            raw = TranslationService.parse(body)
        except TranslatorError as e:
            logger.warning(
                "Translation failed | %s → %s | %s: %s",
                req.source_lang, req.target_lang, e.kind, e,
            )
            raise

        return flatten(raw)


translate = TranslationService.translate
