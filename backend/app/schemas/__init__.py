"""Request/response schemas.

The ``*Response`` models are the public views of each entity: fields such
as ``password_hash`` or ``deleted_at`` are simply not declared on them.
"""

from app.schemas.common import ApiResponse, ServiceResponse

__all__ = ["ApiResponse", "ServiceResponse"]
