#!/usr/bin/env python3
"""
Result structures for typo distance scoring.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional


@dataclass
class DistanceResult:
    """
    Result container for one typo distance calculation.

    Holds the distance from the intended string to the typed string,
    plus optional components (e.g., the reverse-direction distance).
    """

    distance: float
    """Typo distance from string1 to string2 (lower = more likely a typo)"""

    string1: str = ""
    """Intended string"""

    string2: str = ""
    """Typed string"""

    components: Dict[str, float] = field(default_factory=dict)
    """Additional distances (e.g., reverse_distance, asymmetry)"""

    metadata: Dict[str, Any] = field(default_factory=dict)
    """Method and input metadata"""

    detailed_breakdown: Dict[str, Any] = field(default_factory=dict)
    """Detailed analysis breakdown (e.g., the distance matrix)"""

    validation_info: Dict[str, Any] = field(default_factory=dict)
    """Input sanitizing information"""

    execution_time: float = 0.0
    """Time taken to calculate the distance (seconds)"""

    config_used: Dict[str, Any] = field(default_factory=dict)
    """Configuration settings used for this calculation"""

    def get_score(self, component_name: Optional[str] = None) -> float:
        """
        Get a component value or the distance itself.

        Raises:
            KeyError: If component_name not found in components
        """
        if component_name is None:
            return self.distance

        if component_name not in self.components:
            available = list(self.components.keys())
            raise KeyError(f"Component '{component_name}' not found. Available: {available}")

        return self.components[component_name]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert result to a flat dictionary suitable for CSV export.
        """
        result = {
            'string1': self.string1,
            'string2': self.string2,
            'typo_distance': self.distance,
            'execution_time': self.execution_time,
        }

        for component, score in self.components.items():
            result[f'component_{component}'] = score

        for key, value in self.metadata.items():
            if isinstance(value, (str, int, float, bool)):
                result[f'meta_{key}'] = value

        for key, value in self.validation_info.items():
            if isinstance(value, (str, int, float, bool)):
                result[f'validation_{key}'] = value

        return result

    def summary(self) -> str:
        """Brief human-readable summary."""
        summary_lines = [
            f"{self.string1!r} -> {self.string2!r}",
            f"Typo distance: {self.distance:.6f}",
        ]

        for name, score in self.components.items():
            summary_lines.append(f"  {name}: {score:.6f}")

        if self.execution_time > 0:
            summary_lines.append(f"Execution time: {self.execution_time:.3f}s")

        return "\n".join(summary_lines)
