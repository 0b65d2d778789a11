"""Configuration schema definitions using Pydantic for validation.

Configuration errors surface as ``pydantic.ValidationError`` when a model is
built, before any graph work starts.
"""

from typing import Any, Dict, Literal

from pydantic import BaseModel, Field

CloneStrategyName = Literal["reference", "copy", "deepcopy"]


class SymmetricDifferenceConfig(BaseModel):
    """Configuration for the symmetric difference operation.

    Attributes:
        enforce_identical_node_sets: Reject inputs whose ``(handle, payload)``
            node sets differ with ``NodeSetMismatch``. When False the mismatch
            is only logged and the call proceeds, which may later fail with
            ``EndpointNotFound``.
        clone_strategy: How payloads are duplicated into the output graph.
            ``reference`` shares the input objects, ``copy`` makes shallow
            copies and ``deepcopy`` makes deep copies.
    """

    enforce_identical_node_sets: bool = True
    clone_strategy: CloneStrategyName = Field(default="reference")

    model_config = {"extra": "allow"}

    @classmethod
    def default(cls) -> "SymmetricDifferenceConfig":
        return cls()

    @classmethod
    def permissive(cls) -> "SymmetricDifferenceConfig":
        """Configuration that ignores node-set mismatches."""
        return cls(enforce_identical_node_sets=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SymmetricDifferenceConfig":
        """Create configuration from dictionary.

        Accepts either the flat field mapping or a mapping with a
        ``symmetric_difference`` table, as found in TOML files.

        Raises:
            ValidationError: If configuration is invalid.
        """
        section = data.get("symmetric_difference")
        if isinstance(section, dict):
            data = section
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
