from __future__ import annotations
from fastapi import APIRouter
from swiftconvert.models.catalog import OPERATIONS, ROTATION_ANGLES
from swiftconvert.models.schemas import CatalogResponse, OperationInfo
from swiftconvert.services.compatibility import compatibility_matrix

router = APIRouter(prefix="/catalog", tags=["catalog"])

@router.get("", response_model=CatalogResponse)
async def get_catalog() -> CatalogResponse:
    """Operations and conversion choices for building tool pickers."""
    sources = compatibility_matrix.source_formats()
    return CatalogResponse(
        operations=[
            OperationInfo(id=op.id, label=op.label, endpoint=op.endpoint, multi_file=op.multi_file)
            for op in OPERATIONS
        ],
        rotation_angles=list(ROTATION_ANGLES),
        source_formats=sources,
        targets={fmt.value: compatibility_matrix.target_formats(fmt) for fmt in sources},
    )
