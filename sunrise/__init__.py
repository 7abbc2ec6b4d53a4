"""sunrise: describe the files of a project tree and print an annotated view."""

from sunrise.config import SunriseConfig, load_config
from sunrise.store import AnnotationStore, init_store, locate

__all__ = ["AnnotationStore", "SunriseConfig", "init_store", "load_config", "locate"]

__version__ = "0.1.0"
