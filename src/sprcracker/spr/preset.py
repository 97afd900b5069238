from dataclasses import dataclass, replace
from typing import Any, TypeVar

from . import palette
from .settings import _DecodeSetting

_SettingT = TypeVar('_SettingT', bound='_DefaultOverride')


@dataclass(frozen=True)
class _DefaultOverride(object):
    def __call__(self: _SettingT, **kwargs: Any) -> _SettingT:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class _SpritePreset(_DecodeSetting, _DefaultOverride):

    # static pass through
    palette_colors = staticmethod(palette.palette_colors)
    palette_rgb = staticmethod(palette.palette_rgb)

    # isort: off
    from .decode import (
        decode,
        from_path,
    )
    # isort: on


spr = _SpritePreset()
