"""
Protocol Renderer — interface pluggable pour les renderers (HTML mail, texte…).
"""
from typing import Iterable, Protocol, runtime_checkable

from ..blocks.base import BaseBlock
from ..core.schemas import Theme


@runtime_checkable
class Renderer(Protocol):
    def render(self, blocks: Iterable[BaseBlock], theme: Theme) -> str: ...
    def render_block(self, block: BaseBlock, theme: Theme) -> str: ...
