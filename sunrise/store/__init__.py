"""Annotation store: path keys, backing file codec, and upward store search."""

from sunrise.store.codec import decode, encode
from sunrise.store.locator import InitResult, find_store_file, init_store, locate
from sunrise.store.paths import ROOT_KEY, is_root_key, normalize, to_key
from sunrise.store.store import STORE_FILENAME, AnnotationStore

__all__ = [
    "AnnotationStore",
    "InitResult",
    "ROOT_KEY",
    "STORE_FILENAME",
    "decode",
    "encode",
    "find_store_file",
    "init_store",
    "is_root_key",
    "locate",
    "normalize",
    "to_key",
]
