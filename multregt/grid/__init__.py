"""Structured grid collaborators: face directions and region categorization arrays."""

__all__ = ['FaceDir', 'RegionProperties']

from ._face_dir import FaceDir
from ._region_properties import RegionProperties

# Set "module" attribute of all public objects to this path.
for _name in __all__:
    _obj = eval(_name)
    if hasattr(_obj, "__module__"):
        _obj.__module__ = __name__
