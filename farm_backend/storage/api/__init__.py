# storage/api/__init__.py
"""
Shared REST building blocks for storage-backed resources.

- serializers: RecordSerializer base + UniqueInStorage validator
- viewsets   : record mixins + StorageViewSet / AppendOnlyViewSet
"""
