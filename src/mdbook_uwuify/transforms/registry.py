import logging
from collections.abc import Iterable

from .base import ExpansionBound, TextTransform

logger = logging.getLogger(__name__)


class TransformRegistry:
    """Named text transforms available to the preprocessor."""

    def __init__(self) -> None:
        self._transforms: dict[str, TextTransform] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._transforms

    def register(self, transform: TextTransform) -> None:
        if not isinstance(getattr(transform, "bound", None), ExpansionBound):
            raise TypeError(f"Transform '{transform.name}' declares no ExpansionBound")
        if transform.name in self._transforms:
            raise ValueError(f"Transform '{transform.name}' already registered")

        self._transforms[transform.name] = transform
        logger.debug(
            "Registered transform: %s (bound %d/%d)",
            transform.name,
            transform.bound.block_size,
            transform.bound.multiplier,
        )

    def register_all(self, transforms: Iterable[TextTransform]) -> None:
        for transform in transforms:
            self.register(transform)

    def get(self, name: str) -> TextTransform:
        try:
            return self._transforms[name]
        except KeyError:
            logger.error(
                "Transform not found: %s (available: %s)", name, ", ".join(self.list())
            )
            raise KeyError(f"Transform '{name}' not found")

    def remove(self, name: str) -> None:
        if self._transforms.pop(name, None) is None:
            raise KeyError(f"Transform '{name}' not found")
        logger.debug("Removed transform: %s", name)

    def list(self) -> list[str]:
        return sorted(self._transforms)


def default_registry() -> TransformRegistry:
    """Fresh registry holding the built-in transforms."""
    from .builtin import CaseTransform, IdentityTransform, UwuTransform

    registry = TransformRegistry()
    registry.register_all(
        [
            IdentityTransform(),
            CaseTransform("upper"),
            CaseTransform("lower"),
            UwuTransform(),
        ]
    )
    return registry
