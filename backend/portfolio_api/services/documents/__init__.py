from .dto import CreatedOut
from .service import DocumentService

__all__ = ["CreatedOut", "DocumentService"]
