from .json_adapter import JsonAdapter
from .yaml_adapter import YamlAdapter

__all__ = ["JsonAdapter", "YamlAdapter"]
