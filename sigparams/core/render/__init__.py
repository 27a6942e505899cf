"""Output renderers."""
from ..config import DEFAULT_BIGNUM_TYPE, OutputFormat
from .protocols import Renderer
from .plain import PlainRenderer
from .toml import TomlRenderer


def get_renderer(output_format: OutputFormat, bignum_type: str = DEFAULT_BIGNUM_TYPE) -> Renderer:
    """Return the renderer for output_format."""
    output_format = OutputFormat(output_format)
    if output_format is OutputFormat.TOML:
        return TomlRenderer()
    return PlainRenderer(bignum_type)


__all__ = [
    'Renderer',
    'PlainRenderer',
    'TomlRenderer',
    'get_renderer',
]
