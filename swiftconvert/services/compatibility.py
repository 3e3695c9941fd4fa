from __future__ import annotations
from typing import Dict, Iterable, List, Optional
from swiftconvert.exceptions import NoSuchSource
from swiftconvert.models.catalog import CONVERSION_PAIRS, ConversionPair, Format


class FormatCompatibilityMatrix:
    """Answers which conversions the service accepts."""

    def __init__(self, pairs: Iterable[ConversionPair] = CONVERSION_PAIRS):
        self._targets: Dict[Format, List[Format]] = {}
        for pair in pairs:
            self._targets.setdefault(pair.source, []).append(pair.target)

    def source_formats(self) -> List[Format]:
        """Every format that can be converted from, sorted by name."""
        return sorted(self._targets, key=lambda fmt: fmt.value)

    def target_formats(self, source: Format) -> List[Format]:
        """Targets for *source* in declaration order."""
        return list(self._targets.get(Format(source), []))

    def default_target(self, source: Format) -> Format:
        try:
            return self._targets[Format(source)][0]
        except (KeyError, ValueError):
            raise NoSuchSource(str(getattr(source, "value", source))) from None

    def is_valid_pair(self, source: Format, target: Format) -> bool:
        try:
            return Format(target) in self._targets.get(Format(source), ())
        except ValueError:
            return False

    def infer_format_from_filename(self, name: str) -> Optional[Format]:
        """Source format implied by the file extension, if it is convertible."""
        if "." not in name:
            return None
        extension = name.rsplit(".", 1)[1].upper()
        try:
            fmt = Format(extension)
        except ValueError:
            return None
        return fmt if fmt in self._targets else None


compatibility_matrix = FormatCompatibilityMatrix()
