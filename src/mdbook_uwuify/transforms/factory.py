# src/mdbook_uwuify/transforms/factory.py

from mdbook_uwuify.config import PreprocessorConfig
from mdbook_uwuify.errors import ConfigError

from .base import TextTransform
from .registry import TransformRegistry, default_registry
from .substitutions import SubstitutionLibrary


def create_transform(
    config: PreprocessorConfig,
    registry: TransformRegistry | None = None,
) -> TextTransform:
    """Create the text transform named by config.

    Args:
        config: Preprocessor configuration naming the transform.
        registry: Registry to resolve from. Defaults to the built-ins.

    Returns:
        The configured TextTransform.

    Raises:
        ConfigError: If the transform is unknown, or a substitution table
            collides with an already registered name.

    Example:
        >>> config = PreprocessorConfig(transform="upper")
        >>> transform = create_transform(config)
        >>> transform(b"hi")
        b'HI'
    """
    registry = registry if registry is not None else default_registry()

    if config.substitutions_dir is not None:
        library = SubstitutionLibrary(config.substitutions_dir)
        try:
            registry.register_all(library.transforms())
        except ValueError as e:
            raise ConfigError(str(e)) from e

    try:
        return registry.get(config.transform)
    except KeyError:
        raise ConfigError(f"Unknown transform: {config.transform}") from None
