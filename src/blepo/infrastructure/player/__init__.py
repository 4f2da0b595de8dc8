"""Video player adapters."""

from blepo.infrastructure.player.mpv_player import MpvPlayer

__all__ = ["MpvPlayer"]
