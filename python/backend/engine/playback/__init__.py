from backend.engine.playback.playback import Playback

__all__ = ["Playback"]
