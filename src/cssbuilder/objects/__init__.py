from cssbuilder.objects.rectangle import Rectangle
from cssbuilder.objects.serialization import from_json, to_json

__all__ = ["Rectangle", "from_json", "to_json"]
