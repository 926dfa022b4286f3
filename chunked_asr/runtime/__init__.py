from .logging import configure_logging
from .recognizer import StreamingRecognizer
from .settings_loader import load_settings

__all__ = ["StreamingRecognizer", "configure_logging", "load_settings"]
