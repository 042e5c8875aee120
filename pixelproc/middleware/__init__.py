from pixelproc.middleware.request_id import request_id_middleware
from pixelproc.middleware.error_handler import error_envelope_middleware, register_error_handlers

__all__ = ["request_id_middleware", "error_envelope_middleware", "register_error_handlers"]
