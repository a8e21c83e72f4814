"""Generic support for models served from an R interpreter."""

from core.r.generic_loader import GenericRModelLoader
from core.r.model import RClassificationModel
from core.r.rpy2_session import Rpy2Session
from core.r.scripts import r_identifier, r_string_literal

__all__ = [
    "GenericRModelLoader",
    "RClassificationModel",
    "Rpy2Session",
    "r_identifier",
    "r_string_literal",
]
