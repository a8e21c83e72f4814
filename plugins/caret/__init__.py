from .loader import CaretModelLoader

__all__ = ["CaretModelLoader"]
