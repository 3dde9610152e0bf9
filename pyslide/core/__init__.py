"""Request/response core: builder, decoder, session and paginator."""

from pyslide.core.decoder import ResponseDecoder
from pyslide.core.paginator import PageConsumer, Paginator
from pyslide.core.request_builder import RequestBuilder, encode_body, normalize_query
from pyslide.core.session import ApiSession

__all__ = [
    "ApiSession",
    "PageConsumer",
    "Paginator",
    "RequestBuilder",
    "ResponseDecoder",
    "encode_body",
    "normalize_query",
]
