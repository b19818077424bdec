from .class_registry import ClassRegistry, IgnoreMatcher, class_registry
from .identity import Identifiable, primary_key_attributes, primary_key_value, type_name

__all__ = [
    "ClassRegistry",
    "IgnoreMatcher",
    "Identifiable",
    "class_registry",
    "primary_key_attributes",
    "primary_key_value",
    "type_name",
]
