from __future__ import annotations
from typing import Dict, Iterable, List, Tuple
from swiftconvert.exceptions import EmptySelection, InvalidParameters
from swiftconvert.models.catalog import ROTATION_ANGLES, Operation, OperationId
from swiftconvert.models.domain import CandidateFile, OperationParameters, RequestPayload
from swiftconvert.services.compatibility import FormatCompatibilityMatrix, compatibility_matrix


class RequestBuilder:
    """Composes the multipart payload for one operation. Pure: no I/O, no session state."""

    def __init__(self, matrix: FormatCompatibilityMatrix = compatibility_matrix):
        self.matrix = matrix

    def build(
        self,
        operation: Operation,
        file_set: Iterable[CandidateFile],
        parameters: OperationParameters = OperationParameters(),
    ) -> RequestPayload:
        candidates = list(file_set)
        if not candidates:
            raise EmptySelection()

        if operation.multi_file:
            files: List[Tuple[str, CandidateFile]] = [("files", f) for f in candidates]
        else:
            files = [("file", candidates[0])]

        return RequestPayload(
            endpoint=operation.endpoint,
            files=files,
            fields=self._fields(operation, parameters),
        )

    def _fields(self, operation: Operation, parameters: OperationParameters) -> Dict[str, str]:
        if operation.id is OperationId.CONVERT:
            if not self.matrix.is_valid_pair(parameters.source, parameters.target):
                raise InvalidParameters(
                    f"Cannot convert {parameters.source.value} to {parameters.target.value}"
                )
            return {
                "from": parameters.source.value.lower(),
                "to": parameters.target.value.lower(),
            }
        if operation.id is OperationId.ROTATE:
            if parameters.angle not in ROTATION_ANGLES:
                raise InvalidParameters(f"Unsupported rotation angle: {parameters.angle}")
            return {"angle": str(parameters.angle)}
        if operation.id is OperationId.REORDER:
            return {"order": parameters.order}
        return {}

request_builder = RequestBuilder()
